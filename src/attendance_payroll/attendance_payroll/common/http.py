from __future__ import annotations

from typing import Any

from flask import request

from ..core.exceptions import ValidationError


def json_body() -> dict[str, Any]:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def int_field(payload: dict[str, Any], key: str) -> int:
    try:
        return int(payload[key])
    except KeyError:
        raise ValidationError(f"Missing field: {key}") from None
    except (TypeError, ValueError):
        raise ValidationError(f"{key} must be an integer") from None
