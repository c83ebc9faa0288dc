from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from ..core.aggregate import aggregate_climate
from ..core.cache import ClimateCache, cache_key
from ..core.models import (
    DATATYPES,
    DateRange,
    DayFilter,
    ObservationRecord,
    StationClimateResult,
)
from ..noaa.client import NoaaClient
from ..utils.time import yearly_ranges

logger = logging.getLogger(__name__)


async def fetch_all_datatypes(
    client: NoaaClient,
    station_id: str,
    ranges: Sequence[DateRange],
) -> list[ObservationRecord]:
    """Fetch every datatype concurrently; the first failure cancels the rest."""
    tasks = [
        asyncio.create_task(
            client.fetch_observation_history(station_id, datatype, ranges)
        )
        for datatype in DATATYPES
    ]
    try:
        done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    finally:
        pending = [task for task in tasks if not task.done()]
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)

    for task in done:
        error = task.exception()
        if error is not None:
            raise error

    records: list[ObservationRecord] = []
    for task in tasks:
        records.extend(task.result())
    return records


async def get_station_climate(
    client: NoaaClient,
    cache: ClimateCache,
    station_id: str,
    day_filter: DayFilter | None,
    start_year: int,
    end_year: int,
) -> StationClimateResult:
    key = cache_key(station_id, day_filter)
    cached = cache.get(key)
    if cached is not None:
        logger.info("Cache hit: %s", key)
        return cached

    logger.info("Cache miss: %s", key)
    ranges = yearly_ranges(start_year, end_year, day_filter)
    records = await fetch_all_datatypes(client, station_id, ranges)
    result = aggregate_climate(records, day_filter)
    cache.put(key, result)
    return result
