"""Load configuration from the environment. Uses python-dotenv.

Only the entry point reads configuration; the core takes explicit
arguments. Values already present in the environment win over `.env`.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_PREFIX = "SOCIAL_REGISTRY_"


def load_config() -> None:
    """Load .env from the working directory. Idempotent."""
    load_dotenv(Path.cwd() / ".env", override=False)


def get_optional(key: str, default: str = "") -> str:
    """Get optional env var; return default if missing or empty."""
    load_config()
    val = os.getenv(ENV_PREFIX + key, "").strip()
    return val if val else default


def get_optional_int(key: str, default: int) -> int:
    """Get optional env var as int; return default if missing or invalid."""
    raw = get_optional(key)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def log_level() -> str:
    """Optional: logging level name. Default INFO; unknown names fall back to it."""
    name = get_optional("LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(name), int):
        return "INFO"
    return name


def data_file() -> Optional[Path]:
    """Optional: JSON document with the clients to load at startup."""
    val = get_optional("DATA_FILE")
    return Path(val) if val else None


def report_depth() -> int:
    """Optional: score tree depth used by the follower report. Default 4."""
    return get_optional_int("REPORT_DEPTH", 4)


def history_limit() -> int:
    """Optional: number of recent actions shown. Default 10."""
    return get_optional_int("HISTORY_LIMIT", 10)
