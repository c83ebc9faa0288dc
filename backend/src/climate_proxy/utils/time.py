from __future__ import annotations

from datetime import date, datetime, timezone

from ..core.models import DateRange, DayFilter


def parse_upstream_date(value: str) -> datetime:
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def yearly_ranges(
    start_year: int,
    end_year: int,
    day_filter: DayFilter | None = None,
) -> list[DateRange]:
    """One inclusive range per calendar year in ``[start_year, end_year]``.

    With a day filter each range covers that single day; years in which the
    day does not exist (Feb 29 outside leap years) are left out.
    """
    ranges: list[DateRange] = []
    for year in range(start_year, end_year + 1):
        if day_filter is None:
            ranges.append(DateRange(start=date(year, 1, 1), end=date(year, 12, 31)))
            continue
        try:
            day = date(year, day_filter.month, day_filter.day)
        except ValueError:
            continue
        ranges.append(DateRange(start=day, end=day))
    return ranges
