"""
Runtime configuration, read from the environment (and a local .env).
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

from .errors import ConfigError

load_dotenv()

# Model choices can be overridden via environment variables.
TEXT_MODEL = os.getenv("BRANDBIBLE_TEXT_MODEL", "gemini-2.5-flash")
IMAGE_MODEL = os.getenv("BRANDBIBLE_IMAGE_MODEL", "imagen-4.0-generate-001")

DEFAULT_STATUS_INTERVAL = 2.0


def get_api_key() -> str:
    """Return GEMINI_API_KEY or raise ConfigError if it is not set."""
    api_key = os.environ.get("GEMINI_API_KEY", "").strip()
    if not api_key:
        raise ConfigError("GEMINI_API_KEY not set in environment / .env")
    return api_key


def get_status_interval() -> float:
    """Seconds between progress phrases (BRANDBIBLE_STATUS_INTERVAL)."""
    raw = os.environ.get("BRANDBIBLE_STATUS_INTERVAL", "").strip()
    if not raw:
        return DEFAULT_STATUS_INTERVAL
    try:
        interval = float(raw)
    except ValueError:
        raise ConfigError(f"BRANDBIBLE_STATUS_INTERVAL must be a number of seconds, got {raw!r}") from None
    if interval <= 0:
        raise ConfigError(f"BRANDBIBLE_STATUS_INTERVAL must be positive, got {raw!r}")
    return interval
