"""Runtime settings, read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    api_url: str
    session_file: Path
    http_timeout: float
    log_level: str


def _getenv(name: str, default: str = "") -> str:
    return (os.environ.get(name) or default).strip()


def _getfloat(name: str, default: float) -> float:
    raw = _getenv(name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        value = -1.0
    if not value > 0:
        logger.warning("Ignoring invalid %s=%r; using %s", name, raw, default)
        return default
    return value


def load_settings() -> Settings:
    session_file = _getenv("CRM_SESSION_FILE")
    return Settings(
        api_url=_getenv("CRM_API_URL", "http://localhost:3000").rstrip("/"),
        session_file=Path(session_file).expanduser() if session_file else _DATA_DIR / "session.json",
        http_timeout=_getfloat("CRM_HTTP_TIMEOUT", 10.0),
        log_level=_getenv("CRM_LOG_LEVEL", "WARNING").upper(),
    )
