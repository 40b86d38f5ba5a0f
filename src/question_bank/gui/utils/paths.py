"""
Where the browser keeps its files.

A source checkout keeps preferences and the default catalog under
./workspace so nothing leaks into the user profile. A bundled build uses
Qt's per-user application data location instead.
"""
from __future__ import annotations

import sys
from pathlib import Path

from PySide6.QtCore import QStandardPaths

PREFERENCES_FILENAME = "preferences.json"
DEFAULT_CATALOG = Path("data") / "questions.json"


def is_frozen() -> bool:
    """True inside a PyInstaller bundle."""
    return bool(getattr(sys, "frozen", False)) or hasattr(sys, "_MEIPASS")


def get_app_data_dir() -> Path:
    """Base directory for preferences and the default catalog."""
    if not is_frozen():
        return Path.cwd() / "workspace"
    location = QStandardPaths.writableLocation(
        QStandardPaths.StandardLocation.AppLocalDataLocation
    )
    base = Path(location)
    base.mkdir(parents=True, exist_ok=True)
    return base


def get_preferences_path() -> Path:
    return get_app_data_dir() / PREFERENCES_FILENAME


def get_default_catalog_path() -> Path:
    """Catalog used when neither the command line nor the environment names one."""
    return get_app_data_dir() / DEFAULT_CATALOG
