from __future__ import annotations

import calendar

from .errors import ValidationError
from .models import DayFilter

# Leap year so that Feb 29 is accepted.
_REFERENCE_YEAR = 2000


def require_station_id(value: str | None) -> str:
    if value is None or not value.strip():
        raise ValidationError("Missing station id.")
    return value.strip()


def parse_day_filter(month: str | None, day: str | None) -> DayFilter | None:
    if _is_blank(month) and _is_blank(day):
        return None
    if _is_blank(month) or _is_blank(day):
        raise ValidationError("month and day must be provided together.")

    month_value = _parse_int("month", month or "")
    day_value = _parse_int("day", day or "")

    if not 1 <= month_value <= 12:
        raise ValidationError("month must be between 1 and 12.")
    if not 1 <= day_value <= 31:
        raise ValidationError("day must be between 1 and 31.")

    _, days_in_month = calendar.monthrange(_REFERENCE_YEAR, month_value)
    if day_value > days_in_month:
        raise ValidationError(f"day {day_value} does not exist in month {month_value}.")
    return DayFilter(month=month_value, day=day_value)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as exc:
        raise ValidationError(f"{name} must be numeric.") from exc
