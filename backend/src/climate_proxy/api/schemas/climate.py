from __future__ import annotations

from pydantic import BaseModel

from ...core.models import StationClimateResult


class YearValue(BaseModel):
    year: int
    value: float


class StationClimate(BaseModel):
    tmin: list[YearValue]
    tmax: list[YearValue]

    @classmethod
    def from_result(cls, result: StationClimateResult) -> StationClimate:
        return cls(
            tmin=[YearValue(year=item.year, value=item.value) for item in result.tmin],
            tmax=[YearValue(year=item.year, value=item.value) for item in result.tmax],
        )
