from __future__ import annotations

from collections.abc import Iterable

from .models import (
    DayFilter,
    ObservationRecord,
    StationClimateResult,
    YearValue,
)
from .units import to_fahrenheit


def matches_day(record: ObservationRecord, day_filter: DayFilter | None) -> bool:
    if day_filter is None:
        return True
    return (
        record.date.month == day_filter.month and record.date.day == day_filter.day
    )


def group_by_year(
    records: Iterable[ObservationRecord],
) -> dict[int, list[ObservationRecord]]:
    grouped: dict[int, list[ObservationRecord]] = {}
    for record in records:
        grouped.setdefault(record.date.year, []).append(record)
    return grouped


def aggregate(
    records: Iterable[ObservationRecord],
    day_filter: DayFilter | None = None,
) -> list[YearValue]:
    """Turn raw observations into a chart series.

    Every retained record yields one entry; nothing is averaged or
    deduplicated. Years come out ascending, records inside a year keep the
    order upstream returned them in.
    """
    retained = (record for record in records if matches_day(record, day_filter))
    grouped = group_by_year(retained)
    output: list[YearValue] = []
    for year in sorted(grouped):
        for record in grouped[year]:
            output.append(YearValue(year=year, value=to_fahrenheit(record.value)))
    return output


def aggregate_climate(
    records: Iterable[ObservationRecord],
    day_filter: DayFilter | None = None,
) -> StationClimateResult:
    tmin: list[ObservationRecord] = []
    tmax: list[ObservationRecord] = []
    for record in records:
        if record.datatype == "TMIN":
            tmin.append(record)
        elif record.datatype == "TMAX":
            tmax.append(record)
    return StationClimateResult(
        tmin=tuple(aggregate(tmin, day_filter)),
        tmax=tuple(aggregate(tmax, day_filter)),
    )
