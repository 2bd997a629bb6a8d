"""Runtime settings read from the environment."""
from __future__ import annotations

import datetime as dt
import os
import typing as t
from dataclasses import dataclass

LOG_LEVEL_ENV = "EVENT_ORGANIZER_LOG_LEVEL"
TODAY_ENV = "EVENT_ORGANIZER_TODAY"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Settings:
    """Settings for one run of the organizer."""
    log_level: str = DEFAULT_LOG_LEVEL
    today: t.Optional[dt.date] = None  # None means the host clock


def load_settings(environ: t.Optional[t.Mapping[str, str]] = None) -> Settings:
    """Build settings from environment variables.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        The resolved settings.

    Raises:
        ValueError: If ``EVENT_ORGANIZER_TODAY`` is not an ISO date.
    """
    if environ is None:
        environ = os.environ

    today_text = environ.get(TODAY_ENV, "").strip()
    try:
        today = dt.date.fromisoformat(today_text) if today_text else None
    except ValueError:
        raise ValueError(f"{TODAY_ENV} must be an ISO date (YYYY-MM-DD), got '{today_text}'") from None

    return Settings(
        log_level=environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper(),
        today=today,
    )
