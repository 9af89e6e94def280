from __future__ import annotations

import os
import sys
from pathlib import Path

APP_NAME = "TalentPlanner"
COMPANY_NAME = "TECHASH"


def _platform_base() -> Path:
    home = Path.home()
    if sys.platform.startswith("win"):
        return Path(os.getenv("APPDATA") or home / "AppData" / "Roaming")
    if sys.platform == "darwin":
        return home / "Library" / "Application Support"
    return Path(os.getenv("XDG_DATA_HOME") or home / ".local" / "share")


def user_data_dir() -> Path:
    """Per-user application folder (``<base>/TECHASH/TalentPlanner``), created on demand."""
    target = _platform_base() / COMPANY_NAME / APP_NAME
    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError:
        # unwritable base: settle for a dot-folder in home
        target = Path.home() / f".{APP_NAME}"
        target.mkdir(parents=True, exist_ok=True)
    return target


def default_log_dir() -> Path:
    return user_data_dir() / "logs"


__all__ = ["APP_NAME", "COMPANY_NAME", "user_data_dir", "default_log_dir"]
