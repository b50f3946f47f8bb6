"""
Path utilities for handling dev vs production (frozen) file locations.

Dev mode: Uses local workspace/ directory
Frozen mode: Uses system-standard paths (AppData, Application Support)
"""
from __future__ import annotations

import sys
from pathlib import Path

from PySide6.QtCore import QStandardPaths

APP_NAME = "Temperature Converter"


def is_frozen() -> bool:
    """Check if running as a frozen (PyInstaller) application."""
    return getattr(sys, 'frozen', False) or hasattr(sys, '_MEIPASS')


def get_app_data_dir() -> Path:
    """
    Get the application data directory for settings and crash logs.

    Frozen: ~/Library/Application Support/Temperature Converter (macOS)
            or %LOCALAPPDATA%/Temperature Converter (Windows)
    Dev: workspace/
    """
    if is_frozen():
        app_data = Path(QStandardPaths.writableLocation(
            QStandardPaths.StandardLocation.AppLocalDataLocation
        ))
        app_data.mkdir(parents=True, exist_ok=True)
        return app_data
    # Dev mode: use local workspace
    return Path.cwd() / "workspace"


def get_settings_path() -> Path:
    """Get the path for storing GUI settings."""
    return get_app_data_dir() / "gui_settings.json"


def get_crash_logs_dir() -> Path:
    """Get the directory crash reports are written to."""
    return get_app_data_dir() / "crash_logs"
