from __future__ import annotations

from datetime import date, datetime, timezone

from climate_proxy.core.models import DateRange, DayFilter
from climate_proxy.utils.time import parse_upstream_date, yearly_ranges


def test_parse_upstream_date_assumes_utc_for_naive_values() -> None:
    parsed = parse_upstream_date("1991-07-04T00:00:00")

    assert parsed == datetime(1991, 7, 4, tzinfo=timezone.utc)


def test_yearly_ranges_cover_whole_years() -> None:
    ranges = yearly_ranges(1991, 1992)

    assert ranges == [
        DateRange(start=date(1991, 1, 1), end=date(1991, 12, 31)),
        DateRange(start=date(1992, 1, 1), end=date(1992, 12, 31)),
    ]


def test_yearly_ranges_with_day_filter_are_single_days() -> None:
    ranges = yearly_ranges(1991, 2020, DayFilter(month=7, day=4))

    assert len(ranges) == 30
    assert ranges[0] == DateRange(start=date(1991, 7, 4), end=date(1991, 7, 4))


def test_yearly_ranges_skip_missing_leap_days() -> None:
    ranges = yearly_ranges(1991, 2000, DayFilter(month=2, day=29))

    assert [item.start.year for item in ranges] == [1992, 1996, 2000]
