from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Literal

Datatype = Literal["TMIN", "TMAX"]

DATATYPES: tuple[Datatype, ...] = ("TMIN", "TMAX")


@dataclass(frozen=True)
class StationSummary:
    id: str
    name: str
    lat: float
    lon: float


@dataclass(frozen=True)
class ObservationRecord:
    date: datetime
    datatype: Datatype
    value: int


@dataclass(frozen=True)
class YearValue:
    year: int
    value: float


@dataclass(frozen=True)
class StationClimateResult:
    tmin: tuple[YearValue, ...]
    tmax: tuple[YearValue, ...]


@dataclass(frozen=True)
class DayFilter:
    month: int
    day: int


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date
