"""Shared FastAPI dependencies."""

from __future__ import annotations

from ccbstats.config import Settings, load_settings


def get_settings() -> Settings:
    """Dependency to get runtime settings.

    Returns:
        Settings read from the environment for this request.
    """
    return load_settings()
