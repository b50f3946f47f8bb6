"""
Settings persistence model for the GUI.

Holds presentation preferences only (theme, window layout). The form's
mode and field values are deliberately absent: every window starts with
Celsius as the source and empty fields.

Any malformed data results in graceful fallback to defaults, never a crash.
"""
import json
import logging
from pathlib import Path
from typing import Dict, Optional

from PySide6.QtCore import QObject, Signal

logger = logging.getLogger(__name__)


class SettingsStore(QObject):
    """Lightweight JSON-backed store for persisting GUI preferences."""

    darkModeChanged = Signal(bool)
    CURRENT_VERSION = 1
    KNOWN_KEYS = ("version", "app_version", "ui", "window_geometry", "splitter_state")

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = path
        self.data: Dict[str, object] = {}
        self._load_error: Optional[str] = None

        if self.path.exists():
            try:
                loaded = json.loads(self.path.read_text(encoding="utf-8"))
                if not isinstance(loaded, dict):
                    raise ValueError(f"expected a JSON object, got {type(loaded).__name__}")
                self.data = loaded
                self._migrate()
            except json.JSONDecodeError as e:
                self._load_error = f"Settings file is corrupted:\n{e}"
                self.data = {}
            except (OSError, ValueError) as e:
                self._load_error = f"Failed to read settings:\n{e}"
                self.data = {}

        if "version" not in self.data:
            self.data["version"] = self.CURRENT_VERSION

    @property
    def load_error(self) -> Optional[str]:
        return self._load_error

    def check_load_error(self) -> bool:
        """
        Check if there was an error loading settings and prompt user to reset.

        Returns True if app should continue, False if app should exit.
        Call this after QApplication is created.
        """
        if not self._load_error:
            return True

        from PySide6.QtWidgets import QMessageBox

        msg = QMessageBox()
        msg.setIcon(QMessageBox.Icon.Warning)
        msg.setWindowTitle("Settings Error")
        msg.setText("Your GUI settings file could not be loaded.")
        msg.setInformativeText(
            f"{self._load_error}\n\n"
            "Would you like to reset settings to defaults and continue?"
        )
        msg.setStandardButtons(
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
        )
        msg.setDefaultButton(QMessageBox.StandardButton.Yes)

        if msg.exec() == QMessageBox.StandardButton.Yes:
            self.reset()
            return True
        return False

    def reset(self) -> None:
        """Drop every preference and write the defaults back."""
        self.data = {"version": self.CURRENT_VERSION, "app_version": self._get_app_version()}
        self._load_error = None
        self._save()

    def _migrate(self) -> None:
        """Handle settings compatibility based on app version.

        If the settings were written by a different major.minor version,
        drop keys this version does not understand.
        """
        stored_version = str(self.data.get("app_version", "0.0.0"))
        current_version = self._get_app_version()

        if stored_version.split(".")[:2] != current_version.split(".")[:2]:
            for key in [k for k in self.data if k not in self.KNOWN_KEYS]:
                logger.debug(f"Dropping stale setting {key!r} from v{stored_version}")
                del self.data[key]

        self.data["app_version"] = current_version
        self._save()

    def _get_app_version(self) -> str:
        from tempconv import __version__
        return __version__

    def get_dark_mode(self) -> bool:
        ui = self._get_ui()
        return bool(ui.get("dark_mode", False))

    def set_dark_mode(self, enabled: bool) -> None:
        ui = self._get_ui()
        if ui.get("dark_mode") == enabled:
            return
        ui["dark_mode"] = enabled
        self._save()
        self.darkModeChanged.emit(enabled)

    def get_window_geometry(self) -> Optional[str]:
        """Get saved window geometry, or None if missing or not valid hex."""
        return self._get_hex("window_geometry")

    def set_window_geometry(self, geometry: str) -> None:
        self._get_dict()["window_geometry"] = geometry
        self._save()

    def get_splitter_state(self) -> Optional[str]:
        """Get saved splitter state, or None if missing or not valid hex."""
        return self._get_hex("splitter_state")

    def set_splitter_state(self, state: str) -> None:
        self._get_dict()["splitter_state"] = state
        self._save()

    def _get_hex(self, key: str) -> Optional[str]:
        value = self._get_dict().get(key)
        if not isinstance(value, str):
            return None
        try:
            bytes.fromhex(value)
            return value
        except ValueError:
            logger.warning(f"Invalid {key} in settings, ignoring")
            return None

    def _get_ui(self) -> Dict[str, object]:
        ui = self._get_dict().setdefault("ui", {})
        if not isinstance(ui, dict):
            ui = {}
            self.data["ui"] = ui
        return ui  # type: ignore[return-value]

    def _get_dict(self) -> Dict[str, object]:
        if not isinstance(self.data, dict):
            self.data = {}
        return self.data

    def _save(self) -> None:
        """Safely write settings with atomic replacement.

        Uses a temp file to prevent corruption if write is interrupted.
        """
        temp_path = self.path.with_suffix('.tmp')
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(json.dumps(self.data, indent=2), encoding="utf-8")
            temp_path.replace(self.path)
        except OSError as e:
            logger.warning(f"Failed to save settings: {e}")
            try:
                if temp_path.exists():
                    temp_path.unlink()
            except OSError:
                pass
