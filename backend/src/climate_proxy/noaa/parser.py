from __future__ import annotations

import logging
from typing import Any

from ..core.models import DATATYPES, ObservationRecord, StationSummary
from ..utils.time import parse_upstream_date

logger = logging.getLogger(__name__)


def results(payload: dict[str, Any]) -> list[dict[str, Any]]:
    rows = payload.get("results", [])
    if not isinstance(rows, list):
        return []
    return rows


def result_count(payload: dict[str, Any]) -> int | None:
    metadata = payload.get("metadata", {})
    if not isinstance(metadata, dict):
        return None
    resultset = metadata.get("resultset", {})
    if not isinstance(resultset, dict):
        return None
    count = resultset.get("count")
    if isinstance(count, bool) or not isinstance(count, int):
        return None
    return count


def observation_records(rows: list[dict[str, Any]]) -> list[ObservationRecord]:
    records: list[ObservationRecord] = []
    for row in rows:
        datatype = row.get("datatype")
        value = row.get("value")
        raw_date = row.get("date")
        if datatype not in DATATYPES:
            logger.warning("Skipping observation with unexpected datatype %r", datatype)
            continue
        if not _is_integral(value):
            logger.warning("Skipping %s observation with invalid value %r", datatype, value)
            continue
        if not isinstance(raw_date, str):
            logger.warning("Skipping %s observation with missing date", datatype)
            continue
        try:
            observed = parse_upstream_date(raw_date)
        except ValueError:
            logger.warning("Skipping observation with unparseable date %r", raw_date)
            continue
        records.append(
            ObservationRecord(date=observed, datatype=datatype, value=int(value))
        )
    return records


def station_summaries(rows: list[dict[str, Any]]) -> list[StationSummary]:
    stations: list[StationSummary] = []
    for row in rows:
        station_id = row.get("id")
        lat = row.get("latitude")
        lon = row.get("longitude")
        if not isinstance(station_id, str) or not station_id:
            continue
        if not _is_coordinate(lat) or not _is_coordinate(lon):
            continue
        name = row.get("name")
        stations.append(
            StationSummary(
                id=station_id,
                name=name if isinstance(name, str) else station_id,
                lat=float(lat),
                lon=float(lon),
            )
        )
    return stations


def _is_coordinate(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integral(value: object) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()
