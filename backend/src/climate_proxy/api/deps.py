from __future__ import annotations

from fastapi import Request

from ..app.config import Settings
from ..core.cache import ClimateCache
from ..noaa.client import NoaaClient


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_cache(request: Request) -> ClimateCache:
    return request.app.state.cache


def get_noaa_client(request: Request) -> NoaaClient:
    return request.app.state.noaa_client
