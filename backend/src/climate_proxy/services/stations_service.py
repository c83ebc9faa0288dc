from __future__ import annotations

from datetime import date

from ..core.models import DateRange, StationSummary
from ..noaa.client import NoaaClient


async def list_stations(
    client: NoaaClient,
    region: str | None,
    start_year: int,
    end_year: int,
) -> list[StationSummary]:
    window = DateRange(start=date(start_year, 1, 1), end=date(end_year, 12, 31))
    return await client.fetch_stations(region=region, date_range=window)
