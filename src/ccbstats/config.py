"""Runtime settings read from the environment.

CCBSTATS_IGNORED_PARTICIPANTS - comma-separated speaker names to exclude
CCBSTATS_LOG_LEVEL            - root log level for scripts and the API
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

# Game master and dice-bot system announcements
DEFAULT_IGNORED_PARTICIPANTS: frozenset[str] = frozenset({"KP", "system"})

DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    ignored_participants: frozenset[str] = DEFAULT_IGNORED_PARTICIPANTS
    log_level: str = DEFAULT_LOG_LEVEL


def _parse_names(raw: str) -> frozenset[str]:
    return frozenset(name.strip() for name in raw.split(",") if name.strip())


def load_settings() -> Settings:
    """Build settings from environment variables.

    An unset or blank CCBSTATS_IGNORED_PARTICIPANTS keeps the default set.

    Returns:
        Settings instance.
    """
    raw_ignored = os.environ.get("CCBSTATS_IGNORED_PARTICIPANTS", "")
    ignored = _parse_names(raw_ignored) or DEFAULT_IGNORED_PARTICIPANTS
    log_level = os.environ.get("CCBSTATS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    return Settings(ignored_participants=ignored, log_level=log_level)


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for scripts and the API process.

    Args:
        level: Level name; defaults to the configured CCBSTATS_LOG_LEVEL.
    """
    if level is None:
        level = load_settings().log_level
    logging.basicConfig(level=level, format=LOG_FORMAT)
