"""Async client for the NOAA Climate Data Online (CDO) v2 API.

All list endpoints are paged with ``limit``/``offset`` (offset is 1-based).
Each request waits on the client's rate limiter first. Any failed page
aborts the whole fetch with :class:`UpstreamError`; pages are never skipped.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import httpx

from ..core.errors import UpstreamError
from ..core.models import Datatype, DateRange, ObservationRecord, StationSummary
from . import parser
from .rate_limit import FixedDelayRateLimiter, RateLimiter

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.ncei.noaa.gov/cdo-web/api/v2"
DATASET_ID = "GHCND"
PAGE_SIZE = 1000
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class Page:
    rows: list[dict[str, Any]]
    count: int | None


class NoaaClient:
    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        rate_limiter: RateLimiter | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        page_size: int = PAGE_SIZE,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._token = token
        self.base_url = base_url.rstrip("/")
        self.rate_limiter = rate_limiter or FixedDelayRateLimiter()
        self.timeout = timeout
        self.page_size = page_size
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            limits = httpx.Limits(max_keepalive_connections=5, max_connections=10)
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                limits=limits,
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch_observations(
        self,
        station_id: str,
        datatype: Datatype,
        date_range: DateRange,
    ) -> list[ObservationRecord]:
        params = {
            "datasetid": DATASET_ID,
            "stationid": station_id,
            "datatypeid": datatype,
            "startdate": date_range.start.isoformat(),
            "enddate": date_range.end.isoformat(),
        }
        rows = await self._fetch_all("data", params)
        return parser.observation_records(rows)

    async def fetch_observation_history(
        self,
        station_id: str,
        datatype: Datatype,
        date_ranges: Sequence[DateRange],
    ) -> list[ObservationRecord]:
        records: list[ObservationRecord] = []
        for date_range in date_ranges:
            records.extend(
                await self.fetch_observations(station_id, datatype, date_range)
            )
        logger.info(
            "Fetched %d %s observations for %s across %d ranges",
            len(records),
            datatype,
            station_id,
            len(date_ranges),
        )
        return records

    async def fetch_stations(
        self,
        region: str | None = None,
        date_range: DateRange | None = None,
    ) -> list[StationSummary]:
        params: dict[str, str] = {"datasetid": DATASET_ID}
        if region:
            params["locationid"] = region
        if date_range is not None:
            params["startdate"] = date_range.start.isoformat()
            params["enddate"] = date_range.end.isoformat()
        rows = await self._fetch_all("stations", params)
        return parser.station_summaries(rows)

    async def _fetch_all(self, path: str, params: dict[str, str]) -> list[dict[str, Any]]:
        rows: list[dict[str, Any]] = []
        total: int | None = None
        offset = 1
        while True:
            page = await self._fetch_page(path, params, offset)
            if not page.rows:
                break
            rows.extend(page.rows)
            if total is None:
                total = page.count
            if total is not None and len(rows) >= total:
                break
            if len(page.rows) < self.page_size:
                break
            offset += self.page_size
        return rows

    async def _fetch_page(self, path: str, params: dict[str, str], offset: int) -> Page:
        url = f"{self.base_url}/{path}"
        query = {**params, "limit": str(self.page_size), "offset": str(offset)}

        await self.rate_limiter.wait()
        client = await self._get_client()
        logger.debug("GET %s offset=%d params=%s", url, offset, params)
        try:
            response = await client.get(url, params=query, headers={"token": self._token})
        except httpx.TimeoutException as exc:
            logger.error("NOAA request timed out: %s offset=%d", url, offset)
            raise UpstreamError(f"NOAA request to {path} timed out.", url=url) from exc
        except httpx.HTTPError as exc:
            logger.error("NOAA request failed: %s offset=%d: %s", url, offset, exc)
            raise UpstreamError(f"NOAA request to {path} failed: {exc}", url=url) from exc

        if not response.is_success:
            logger.error(
                "NOAA returned HTTP %d for %s offset=%d", response.status_code, url, offset
            )
            raise UpstreamError(
                f"NOAA returned HTTP {response.status_code} for {path}.",
                url=url,
                status=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamError(
                f"NOAA returned an invalid JSON body for {path}.",
                url=url,
                status=response.status_code,
            ) from exc
        if not isinstance(payload, dict):
            raise UpstreamError(
                f"NOAA returned an unexpected body for {path}.",
                url=url,
                status=response.status_code,
            )
        return Page(rows=parser.results(payload), count=parser.result_count(payload))
