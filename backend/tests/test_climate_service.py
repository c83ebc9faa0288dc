from __future__ import annotations

import asyncio

import pytest

from climate_proxy.core.cache import ClimateCache, cache_key
from climate_proxy.core.errors import UpstreamError
from climate_proxy.core.models import DayFilter
from climate_proxy.services.climate_service import get_station_climate
from fakes import FakeNoaa, YieldingRateLimiter, make_client, observation

STATION = "GHCND:USW00013881"


def test_get_station_climate_fetches_both_datatypes(fake_noaa: FakeNoaa) -> None:
    cache = ClimateCache()
    client = make_client(fake_noaa)

    result = asyncio.run(
        get_station_climate(client, cache, STATION, DayFilter(7, 4), 2019, 2020)
    )

    assert [(item.year, item.value) for item in result.tmin] == [
        (2019, pytest.approx(69.98)),
        (2020, 68.0),
    ]
    assert [(item.year, item.value) for item in result.tmax] == [
        (2019, pytest.approx(89.96)),
        (2020, 212.0),
    ]
    datatypes = {request.url.params["datatypeid"] for request in fake_noaa.requests}
    assert datatypes == {"TMIN", "TMAX"}
    assert len(fake_noaa.requests) == 4


def test_get_station_climate_serves_second_call_from_cache(fake_noaa: FakeNoaa) -> None:
    cache = ClimateCache()
    client = make_client(fake_noaa)

    async def run_twice() -> None:
        first = await get_station_climate(client, cache, STATION, None, 2019, 2020)
        second = await get_station_climate(client, cache, STATION, None, 2019, 2020)
        assert second is first

    asyncio.run(run_twice())

    assert len(fake_noaa.requests) == 4
    assert cache_key(STATION) in cache


def test_get_station_climate_without_filter_keeps_all_days(fake_noaa: FakeNoaa) -> None:
    result = asyncio.run(
        get_station_climate(
            make_client(fake_noaa), ClimateCache(), STATION, None, 2019, 2020
        )
    )

    assert [item.year for item in result.tmax] == [2019, 2019, 2020]


def test_get_station_climate_does_not_cache_failures() -> None:
    fake = FakeNoaa(
        observations=[observation("2019-07-04", "TMIN", 200)], fail_status=503
    )
    cache = ClimateCache()

    with pytest.raises(UpstreamError):
        asyncio.run(
            get_station_climate(
                make_client(fake), cache, STATION, DayFilter(7, 4), 2019, 2020
            )
        )

    assert len(cache) == 0


def test_failed_datatype_stops_the_other_fetch() -> None:
    fake = FakeNoaa(fail_status=500, fail_datatype="TMIN")
    client = make_client(fake, rate_limiter=YieldingRateLimiter())
    cache = ClimateCache()

    async def run() -> int:
        with pytest.raises(UpstreamError):
            await get_station_climate(client, cache, STATION, None, 1991, 2020)
        seen_at_failure = len(fake.requests)
        for _ in range(100):
            await asyncio.sleep(0)
        return seen_at_failure

    seen_at_failure = asyncio.run(run())

    assert len(fake.requests) == seen_at_failure
    assert fake.datatypes().count("TMAX") < 30
    assert len(cache) == 0
