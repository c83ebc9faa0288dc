from __future__ import annotations

from pydantic import BaseModel

from ...core.models import StationSummary


class Station(BaseModel):
    id: str
    name: str
    lat: float
    lon: float

    @classmethod
    def from_summary(cls, summary: StationSummary) -> Station:
        return cls(id=summary.id, name=summary.name, lat=summary.lat, lon=summary.lon)
