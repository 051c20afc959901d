"""Environment-backed settings for the thermometer package."""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


_WEATHER_URL_ENV = "THERMOMETER_WEATHER_URL"
_HTTP_TIMEOUT_ENV = "THERMOMETER_HTTP_TIMEOUT"
_LOG_LEVEL_ENV = "THERMOMETER_LOG_LEVEL"

DEFAULT_WEATHER_URL = "https://api.brightsky.dev/current_weather"
DEFAULT_HTTP_TIMEOUT = 5.0
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    weather_url: str
    http_timeout: float
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_timeout(default: float) -> float:
    value = os.getenv(_HTTP_TIMEOUT_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = float(candidate)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


@lru_cache
def get_settings() -> Settings:
    return Settings(
        weather_url=_read_str_env(_WEATHER_URL_ENV, DEFAULT_WEATHER_URL),
        http_timeout=_read_timeout(DEFAULT_HTTP_TIMEOUT),
        log_level=_read_str_env(_LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper(),
    )


__all__ = ["Settings", "get_settings", "DEFAULT_WEATHER_URL", "DEFAULT_HTTP_TIMEOUT"]
