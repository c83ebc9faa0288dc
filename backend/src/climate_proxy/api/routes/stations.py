from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from ...app.config import Settings
from ...noaa.client import NoaaClient
from ...services.stations_service import list_stations
from ..deps import get_noaa_client, get_settings
from ..schemas.common import ErrorResponse
from ..schemas.stations import Station


router = APIRouter()


@router.get(
    "/stations",
    response_model=list[Station],
    responses={500: {"model": ErrorResponse}},
)
async def get_stations(
    region: str | None = Query(None, description="CDO location id, e.g. FIPS:37"),
    client: NoaaClient = Depends(get_noaa_client),
    settings: Settings = Depends(get_settings),
) -> list[Station]:
    summaries = await list_stations(
        client,
        region.strip() if region else None,
        settings.start_year,
        settings.end_year,
    )
    return [Station.from_summary(summary) for summary in summaries]
