from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from ..api.errors import register_exception_handlers
from ..api.routes import station, stations
from ..core.cache import ClimateCache
from ..noaa.client import NoaaClient
from ..noaa.rate_limit import FixedDelayRateLimiter
from .config import Settings, load_settings

logger = logging.getLogger(__name__)


def build_noaa_client(settings: Settings) -> NoaaClient:
    return NoaaClient(
        token=settings.noaa_token,
        base_url=settings.noaa_base_url,
        rate_limiter=FixedDelayRateLimiter(settings.rate_limit_seconds),
        timeout=settings.timeout_seconds,
    )


def create_app(
    settings: Settings | None = None,
    client: NoaaClient | None = None,
    cache: ClimateCache | None = None,
) -> FastAPI:
    settings = settings or load_settings()
    noaa_client = client or build_noaa_client(settings)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Climate proxy starting: upstream=%s token=%s window=%d-%d",
            settings.noaa_base_url,
            settings.masked_token,
            settings.start_year,
            settings.end_year,
        )
        yield
        await noaa_client.aclose()

    app = FastAPI(title="Climate Proxy API", lifespan=lifespan)
    app.state.settings = settings
    app.state.cache = cache if cache is not None else ClimateCache()
    app.state.noaa_client = noaa_client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.include_router(stations.router)
    app.include_router(station.router)
    app.include_router(stations.router, prefix="/api")
    app.include_router(station.router, prefix="/api")
    register_exception_handlers(app)

    @app.get("/", response_class=PlainTextResponse)
    def root() -> str:
        return "service is running"

    return app
