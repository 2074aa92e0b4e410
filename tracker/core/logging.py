"""Logging utilities shared across the tracker package."""
from __future__ import annotations

import logging

from tracker.core.config import get_config_value


def configure_logging(level: str | None = None) -> None:
    """Initialize basic logging with a shared format and log level.

    The level can be provided directly or via the ``LOG_LEVEL`` environment
    variable or Streamlit secret (defaults to ``INFO``). This keeps the CLI and
    the review console emitting the same messages without extra setup.
    """

    resolved_level = (level or get_config_value("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=resolved_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
