from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from climate_proxy.app.config import Settings
from climate_proxy.app.main import create_app
from climate_proxy.core.cache import ClimateCache
from fakes import BASE_URL, FakeNoaa, make_client, observation


@pytest.fixture
def settings() -> Settings:
    return Settings(
        noaa_token="test-token",
        noaa_base_url=BASE_URL,
        rate_limit_seconds=0.0,
        start_year=2019,
        end_year=2020,
    )


@pytest.fixture
def fake_noaa() -> FakeNoaa:
    return FakeNoaa(
        observations=[
            observation("2019-07-04", "TMIN", 211),
            observation("2019-07-04", "TMAX", 322),
            observation("2019-07-05", "TMAX", 300),
            observation("2020-07-04", "TMIN", 200),
            observation("2020-07-04", "TMAX", 1000),
        ],
        stations=[
            {
                "id": "GHCND:USW00013881",
                "name": "CHARLOTTE DOUGLAS AIRPORT, NC US",
                "latitude": 35.2236,
                "longitude": -80.9552,
            },
            {"id": "GHCND:US1NCMK0001", "name": "NO COORDINATES, NC US"},
        ],
    )


@pytest.fixture
def cache() -> ClimateCache:
    return ClimateCache()


@pytest.fixture
def api(
    settings: Settings, fake_noaa: FakeNoaa, cache: ClimateCache
) -> Iterator[TestClient]:
    app = create_app(settings, client=make_client(fake_noaa), cache=cache)
    with TestClient(app) as client:
        yield client
