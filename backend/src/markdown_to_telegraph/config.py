"""Load settings from environment (.env and env vars)."""

from __future__ import annotations

import os
from pathlib import Path

# Load .env from backend root if present
_env_path = Path(__file__).resolve().parent.parent.parent / ".env"
if _env_path.exists():
    from dotenv import load_dotenv
    load_dotenv(_env_path)


def _str(key: str, default: str = "") -> str:
    return (os.environ.get(key) or "").strip() or default


def _float(key: str, default: float) -> float:
    raw = _str(key)
    try:
        return float(raw) if raw else default
    except ValueError:
        return default


# Telegraph
TELEGRAPH_API_BASE = _str("TELEGRAPH_API_BASE", "https://api.telegra.ph").rstrip("/")
TELEGRAPH_ACCESS_TOKEN = _str("TELEGRAPH_ACCESS_TOKEN") or None
TELEGRAPH_AUTHOR_NAME = _str("TELEGRAPH_AUTHOR_NAME") or None
TELEGRAPH_AUTHOR_URL = _str("TELEGRAPH_AUTHOR_URL") or None
TELEGRAPH_TIMEOUT = _float("TELEGRAPH_TIMEOUT", 10.0)

# Logging
LOG_LEVEL = _str("LOG_LEVEL", "INFO").upper()
