from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

_LOADED = False


def load_env() -> None:
    global _LOADED
    if _LOADED:
        return
    _LOADED = True

    base_dir = Path(__file__).resolve().parent
    # Project root .env wins over a package-local one.
    candidates = [
        base_dir.parent / ".env",
        base_dir / ".env",
    ]

    for path in candidates:
        if not path.exists():
            continue
        # Real environment variables (Docker/K8s) are never overridden.
        load_dotenv(dotenv_path=path, override=False)
        logger.debug("Environment loaded from %s", path)


def env_flag(name: str) -> bool:
    return os.getenv(name, "").strip() == "1"


def env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r, using %d", name, raw, default)
        return default
