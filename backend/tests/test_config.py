from __future__ import annotations

import pytest

from climate_proxy.app.config import Settings, load_settings
from climate_proxy.core.errors import ConfigurationError


def test_load_settings_requires_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NOAA_TOKEN", raising=False)

    with pytest.raises(ConfigurationError):
        load_settings()


def test_load_settings_rejects_blank_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NOAA_TOKEN", "   ")

    with pytest.raises(ConfigurationError):
        load_settings()


def test_load_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NOAA_TOKEN", "abcdef")
    for name in ("PORT", "NOAA_RATE_LIMIT_SECONDS", "NORMALS_START_YEAR", "NORMALS_END_YEAR"):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings.port == 10000
    assert settings.rate_limit_seconds == 0.25
    assert (settings.start_year, settings.end_year) == (1991, 2020)


def test_load_settings_reads_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NOAA_TOKEN", "abcdef")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://localhost:3000, https://example.org")

    settings = load_settings()

    assert settings.port == 8080
    assert settings.cors_allow_origins == ("http://localhost:3000", "https://example.org")


def test_load_settings_rejects_bad_port(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NOAA_TOKEN", "abcdef")
    monkeypatch.setenv("PORT", "http")

    with pytest.raises(ConfigurationError):
        load_settings()


def test_masked_token_hides_secret() -> None:
    assert Settings(noaa_token="abcdef123").masked_token == "abcd***"


def test_load_settings_rejects_unknown_log_level(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("NOAA_TOKEN", "abcdef")
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    with pytest.raises(ConfigurationError):
        load_settings()


def test_load_settings_normalises_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NOAA_TOKEN", "abcdef")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert load_settings().log_level == "DEBUG"
