"""Helpers to keep static and runtime configuration apart.

``config.ini`` holds the committed defaults. Machine-local overrides (e.g. a
different data file on a new device) go in an uncommitted
``config.runtime.ini`` so the committed file stays clean. Environment
variables (optionally from ``.env``) win over both for the data path and the
log level.
"""

from __future__ import annotations

import configparser
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent
CONFIG_MAIN_PATH = BASE_DIR / "config.ini"
CONFIG_RUNTIME_PATH = BASE_DIR / "config.runtime.ini"

DEFAULT_DATA_PATH = "data/store.json"


def load_base_config() -> configparser.ConfigParser:
    """Load only the static base configuration."""
    cfg = configparser.ConfigParser()
    cfg.read(CONFIG_MAIN_PATH, encoding="utf-8-sig")
    return cfg


def load_runtime_config() -> configparser.ConfigParser:
    """Load only the runtime overrides."""
    cfg = configparser.ConfigParser()
    if CONFIG_RUNTIME_PATH.exists():
        cfg.read(CONFIG_RUNTIME_PATH, encoding="utf-8-sig")
    return cfg


def load_merged_config() -> configparser.ConfigParser:
    """Combine static and runtime configuration."""
    base = load_base_config()
    runtime = load_runtime_config()
    for section in runtime.sections():
        if not base.has_section(section):
            base.add_section(section)
        for key, value in runtime.items(section):
            base.set(section, key, value)
    return base


def inventory_data_path(cfg: configparser.ConfigParser | None = None) -> Path:
    """Return the store file; ``MUNAFA_DATA_PATH`` overrides the ini value.

    Relative paths are resolved against the repository root.
    """
    cfg = cfg if cfg is not None else load_merged_config()
    raw = os.getenv("MUNAFA_DATA_PATH") or cfg.get(
        "INVENTORY", "data_path", fallback=DEFAULT_DATA_PATH
    )
    path = Path(raw.strip() or DEFAULT_DATA_PATH)
    if not path.is_absolute():
        path = BASE_DIR / path
    return path
