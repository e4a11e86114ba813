from __future__ import annotations

import math
from datetime import date, time
from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_clock, parse_iso_date


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_iso_date(value: str, field_name: str) -> date:
    v = require_non_empty(value, field_name)
    try:
        return parse_iso_date(v)
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")


def optional_clock(value: Optional[str], field_name: str) -> Optional[time]:
    v = (value or "").strip()
    if not v:
        return None
    parsed = parse_clock(v)
    if parsed is None:
        raise ValidationError(f"{field_name} must be a time (HH:MM)")
    return parsed


def require_non_negative_int(value, field_name: str) -> int:
    if value is None or (isinstance(value, str) and not value.strip()):
        return 0
    try:
        number = int(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a whole number")
    if number < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return number


def require_number(value, field_name: str, *, allow_negative: bool = False) -> float:
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a number")
    if not allow_negative and number < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return number
