"""Configuration settings for the wxcompare weather store."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger("wxcompare.config")


def _get_bool(env_var: str, default: bool = False) -> bool:
    """Parse an environment variable into a boolean with a default."""

    value = os.getenv(env_var)
    if value is None:
        return default

    return value.lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Application configuration loaded from environment variables."""

    wxcompare_env: str = os.getenv("WXCOMPARE_ENV", "local")
    log_level: str = os.getenv("WXCOMPARE_LOG_LEVEL", "INFO")

    # Range queries widen every window by this many hours on each side
    default_buffer_hours: float = float(os.getenv("WXCOMPARE_BUFFER_HOURS", "2"))

    # Fetching
    sample_data_base_url: str = os.getenv(
        "WXCOMPARE_SAMPLE_DATA_BASE_URL", "http://localhost:5173"
    )
    weather_api_base_url: str = os.getenv(
        "WXCOMPARE_WEATHER_API_BASE_URL", "http://localhost:8000"
    )
    fetch_timeout: float = float(os.getenv("WXCOMPARE_FETCH_TIMEOUT", "10.0"))

    # IANA zone used for calendar-day math; host local time when unset
    local_timezone: str | None = os.getenv("WXCOMPARE_TIMEZONE") or None

    preload_sample_data: bool = _get_bool("WXCOMPARE_PRELOAD_SAMPLE")


settings = Settings()


def get_local_timezone() -> tzinfo | None:
    """Resolve the configured timezone.

    ``None`` means "host local time": ``datetime.fromtimestamp`` and naive
    ``datetime.timestamp`` already follow the host zone, DST included.
    """

    if not settings.local_timezone:
        return None
    try:
        return ZoneInfo(settings.local_timezone)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(
            "Unknown timezone %r; falling back to host local time",
            settings.local_timezone,
        )
        return None


__all__ = ["settings", "Settings", "get_local_timezone"]
