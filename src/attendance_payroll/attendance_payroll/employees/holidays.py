from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from ..core.exceptions import InvalidConfigurationError


@dataclass(frozen=True)
class Holiday:
    """Domain entity: a named paid holiday."""

    date: date
    name: str


def index_holidays(holidays: Iterable[Holiday]) -> dict[date, Holiday]:
    """Map holidays by date, enforcing one holiday per date."""
    by_date: dict[date, Holiday] = {}
    for holiday in holidays:
        if holiday.date in by_date:
            raise InvalidConfigurationError(
                f"Duplicate holiday on {holiday.date.isoformat()}: "
                f"{by_date[holiday.date].name!r} and {holiday.name!r}"
            )
        by_date[holiday.date] = holiday
    return by_date
