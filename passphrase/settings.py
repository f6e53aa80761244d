#!/usr/bin/env python3
"""
Settings
========
Read-only access to ``configs/app.yaml``, which ships inside the package and
holds the option defaults, the word file search order and the attack speed
used by the entropy report.

Usage:
    from passphrase.settings import get_setting

    get_setting('defaults.separator')            # ' '
    get_setting('report.guesses_per_second')     # 1000
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any
import os

import yaml

PACKAGE_ROOT = Path(__file__).resolve().parent
CONFIG_DIR = PACKAGE_ROOT / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"


@lru_cache(maxsize=1)
def load_app_config() -> dict:
    if not APP_CONFIG_PATH.exists():
        raise FileNotFoundError(f"Missing app config: {APP_CONFIG_PATH}")
    data = yaml.safe_load(APP_CONFIG_PATH.read_text())
    return data or {}


def get_setting(path: str, default: Any = None) -> Any:
    """Look up a dotted key such as ``wordfiles.search_paths``."""
    current: Any = load_app_config()
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def resolve_path(value, base: Path | None = None) -> Path:
    """
    Turn a user-supplied word file location into an absolute path.

    ``~`` is expanded and relative locations are taken from ``base``, or
    from the current working directory, since word files are usually named
    on the command line. The file does not have to exist.
    """
    if value is None:
        raise ValueError("path value is required")
    path = Path(os.path.expanduser(str(value)))
    if not path.is_absolute():
        path = (base or Path.cwd()) / path
    return path.resolve()


__all__ = [
    "load_app_config",
    "get_setting",
    "resolve_path",
    "PACKAGE_ROOT",
    "APP_CONFIG_PATH",
]
