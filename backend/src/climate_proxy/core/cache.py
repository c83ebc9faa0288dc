from __future__ import annotations

from .models import DayFilter, StationClimateResult

_WILDCARD = "*"


def cache_key(station_id: str, day_filter: DayFilter | None = None) -> str:
    if day_filter is None:
        return f"{station_id}|{_WILDCARD}|{_WILDCARD}"
    return f"{station_id}|{day_filter.month}|{day_filter.day}"


class ClimateCache:
    """Process-lifetime store of computed station results.

    Unbounded and never evicted; entries disappear only with the process.
    """

    def __init__(self) -> None:
        self._entries: dict[str, StationClimateResult] = {}

    def get(self, key: str) -> StationClimateResult | None:
        return self._entries.get(key)

    def put(self, key: str, value: StationClimateResult) -> None:
        self._entries[key] = value

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
