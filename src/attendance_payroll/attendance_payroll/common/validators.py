from __future__ import annotations

from typing import Iterable

from ..core.enums import AttendanceStatus
from ..core.exceptions import InvalidConfigurationError, UnknownStatusError, ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_non_negative(value: float, field_name: str) -> float:
    if value is None or value < 0:
        raise InvalidConfigurationError(f"{field_name} must be >= 0, got {value!r}")
    return value


def require_positive(value: float, field_name: str) -> float:
    if value is None or value <= 0:
        raise InvalidConfigurationError(f"{field_name} must be > 0, got {value!r}")
    return value


def require_weekdays(values: Iterable[int], field_name: str) -> frozenset[int]:
    days = frozenset(values)
    bad = [d for d in days if not isinstance(d, int) or isinstance(d, bool) or not 0 <= d <= 6]
    if bad:
        raise InvalidConfigurationError(f"{field_name} must be weekdays 0-6, got {bad}")
    return days


def require_status(value) -> AttendanceStatus:
    """Coerce a raw status into the enum, rejecting anything outside it."""
    if isinstance(value, AttendanceStatus):
        return value
    try:
        return AttendanceStatus(value)
    except (TypeError, ValueError):
        raise UnknownStatusError(f"Unknown attendance status: {value!r}") from None
