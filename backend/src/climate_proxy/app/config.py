from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from ..core.errors import ConfigurationError
from ..noaa.client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS
from ..noaa.rate_limit import DEFAULT_DELAY_SECONDS


@dataclass(frozen=True)
class Settings:
    noaa_token: str
    port: int = 10000
    host: str = "0.0.0.0"
    noaa_base_url: str = DEFAULT_BASE_URL
    rate_limit_seconds: float = DEFAULT_DELAY_SECONDS
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    start_year: int = 1991
    end_year: int = 2020
    cors_allow_origins: tuple[str, ...] = ("*",)
    log_level: str = "INFO"

    @property
    def masked_token(self) -> str:
        if len(self.noaa_token) <= 4:
            return "***"
        return f"{self.noaa_token[:4]}***"


def _get_env(name: str, default: str | None = None) -> str:
    value = os.getenv(name, default)
    if value is None or not value.strip():
        raise ConfigurationError(f"Missing required environment variable: {name}")
    return value.strip()


def _get_int(name: str, default: int) -> int:
    raw = _get_env(name, str(default))
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


def _get_float(name: str, default: float) -> float:
    raw = _get_env(name, str(default))
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc


def _get_origins(name: str) -> tuple[str, ...]:
    raw = os.getenv(name, "*")
    origins = tuple(origin.strip() for origin in raw.split(",") if origin.strip())
    return origins or ("*",)


def _get_log_level(name: str, default: str) -> str:
    level = _get_env(name, default).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"{name} must be a logging level name, got {level!r}")
    return level


def load_settings() -> Settings:
    load_dotenv()
    settings = Settings(
        noaa_token=_get_env("NOAA_TOKEN"),
        port=_get_int("PORT", 10000),
        host=_get_env("HOST", "0.0.0.0"),
        noaa_base_url=_get_env("NOAA_BASE_URL", DEFAULT_BASE_URL),
        rate_limit_seconds=_get_float("NOAA_RATE_LIMIT_SECONDS", DEFAULT_DELAY_SECONDS),
        timeout_seconds=_get_float("NOAA_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
        start_year=_get_int("NORMALS_START_YEAR", 1991),
        end_year=_get_int("NORMALS_END_YEAR", 2020),
        cors_allow_origins=_get_origins("CORS_ALLOW_ORIGINS"),
        log_level=_get_log_level("LOG_LEVEL", "INFO"),
    )
    if settings.start_year > settings.end_year:
        raise ConfigurationError("NORMALS_START_YEAR must not be after NORMALS_END_YEAR")
    if settings.rate_limit_seconds < 0:
        raise ConfigurationError("NOAA_RATE_LIMIT_SECONDS must not be negative")
    return settings
