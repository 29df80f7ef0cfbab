from __future__ import annotations

import logging
import os
from pathlib import Path

DEFAULT_DATA_FILE = Path(__file__).resolve().parent / "data" / "items.json"

_TRUTHY = {"1", "true", "yes", "on"}


def catalog_data_file() -> Path:
    path = os.getenv("CATALOG_DATA_FILE")

    if not path:
        return DEFAULT_DATA_FILE

    return Path(path)


def catalog_preload() -> bool:
    return os.getenv("CATALOG_PRELOAD", "false").strip().lower() in _TRUTHY


def log_level() -> str:
    level = os.getenv("LOG_LEVEL", "INFO").strip().upper()

    if level not in logging.getLevelNamesMapping():
        raise RuntimeError(f"LOG_LEVEL has an unknown value: {level}")

    return level


def configure_logging() -> None:
    """Configure root logging once; later calls are no-ops if handlers exist."""
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
