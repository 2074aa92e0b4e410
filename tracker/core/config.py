"""Configuration helpers: Streamlit secrets, environment variables, env files."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from datetime import tzinfo
from pathlib import Path
from typing import List, Mapping, Optional, Sequence, Tuple
from zoneinfo import ZoneInfo

from tracker.core.models import DEFAULT_ALLOWED_EVENTS, DEFAULT_SERVICE_TYPE, FilterRules
from tracker.ingestion.columns import COLUMN_CANDIDATES

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = Path("secrets/tracker.env")
DEFAULT_EXPORT_FILENAME = "filtered_records.xlsx"


def _streamlit_secret(key: str) -> Optional[str]:
    """Return a deployed secret, or ``None`` outside a configured Streamlit app."""

    try:
        import streamlit as st
    except ImportError:
        return None

    secrets = getattr(st, "secrets", None)
    if secrets is None:
        return None
    try:
        value = secrets.get(key)
    except (FileNotFoundError, KeyError):
        # No secrets.toml on this host.
        return None
    return None if value is None else str(value)


def get_config_value(key: str, default: str = "") -> str:
    """Resolve ``key`` from Streamlit secrets, then from the process environment."""

    secret = _streamlit_secret(key)
    if secret is not None:
        return secret
    return os.environ.get(key, default)


def _parse_env_line(line: str) -> Optional[Tuple[str, str]]:
    text = line.strip()
    if not text or text.startswith("#"):
        return None
    key, sep, value = text.partition("=")
    key = key.strip()
    if not sep or not key:
        return None
    return key, value.strip().strip("\"'")


def load_env_file(path: Path) -> List[str]:
    """Copy ``KEY=value`` lines from ``path`` into ``os.environ``.

    Variables that are already set win over the file. Returns the keys that
    were actually loaded; a missing or unreadable file loads nothing.
    """

    if not path.is_file():
        return []

    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        logger.warning("Could not read env file %s: %s", path, exc)
        return []

    loaded: List[str] = []
    for pair in filter(None, map(_parse_env_line, lines)):
        key, value = pair
        if key in os.environ:
            continue
        os.environ[key] = value
        loaded.append(key)

    logger.debug("Loaded %d setting(s) from %s", len(loaded), path)
    return loaded


@dataclass(frozen=True)
class Settings:
    """Runtime knobs for the import rules, column labels, time zone, and export naming."""

    service_type: str = DEFAULT_SERVICE_TYPE
    allowed_events: Tuple[str, ...] = DEFAULT_ALLOWED_EVENTS
    timezone: Optional[str] = None
    export_filename: str = DEFAULT_EXPORT_FILENAME
    column_candidates: Mapping[str, Sequence[str]] = field(
        default_factory=lambda: dict(COLUMN_CANDIDATES), hash=False
    )

    @property
    def tz(self) -> Optional[tzinfo]:
        """Zone used for naive spreadsheet dates; ``None`` means host local time."""

        return ZoneInfo(self.timezone) if self.timezone else None

    def rules(self) -> FilterRules:
        return FilterRules(service_type=self.service_type, allowed_events=frozenset(self.allowed_events))


def _split_events(raw: str) -> Tuple[str, ...]:
    return tuple(event.strip() for event in raw.split(",") if event.strip())


def load_settings() -> Settings:
    """Build settings from ``TRACKER_*`` values, reading the env file first."""

    load_env_file(Path(os.getenv("TRACKER_ENV_FILE", DEFAULT_ENV_FILE)))

    raw_events = get_config_value("TRACKER_ALLOWED_EVENTS")
    allowed_events = _split_events(raw_events) if raw_events else DEFAULT_ALLOWED_EVENTS

    return Settings(
        service_type=get_config_value("TRACKER_SERVICE_TYPE", DEFAULT_SERVICE_TYPE).strip(),
        allowed_events=allowed_events,
        timezone=get_config_value("TRACKER_TIMEZONE").strip() or None,
        export_filename=get_config_value("TRACKER_EXPORT_FILENAME", DEFAULT_EXPORT_FILENAME).strip()
        or DEFAULT_EXPORT_FILENAME,
    )
