from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from ...app.config import Settings
from ...core.cache import ClimateCache
from ...core.validation import parse_day_filter, require_station_id
from ...noaa.client import NoaaClient
from ...services.climate_service import get_station_climate
from ..deps import get_cache, get_noaa_client, get_settings
from ..schemas.climate import StationClimate
from ..schemas.common import ErrorResponse


router = APIRouter()


@router.get(
    "/station",
    response_model=StationClimate,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_station(
    station_id: str | None = Query(None, alias="id"),
    month: str | None = Query(None),
    day: str | None = Query(None),
    client: NoaaClient = Depends(get_noaa_client),
    cache: ClimateCache = Depends(get_cache),
    settings: Settings = Depends(get_settings),
) -> StationClimate:
    """Yearly TMIN/TMAX series for one station, optionally for one calendar day."""
    checked_id = require_station_id(station_id)
    day_filter = parse_day_filter(month, day)
    result = await get_station_climate(
        client,
        cache,
        checked_id,
        day_filter,
        settings.start_year,
        settings.end_year,
    )
    return StationClimate.from_result(result)
