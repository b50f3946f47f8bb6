"""
Main Window for the Temperature Converter GUI.

Hosts the converter form for its whole lifetime: the window owns the
FormState, so the mode lives exactly as long as the window does.
"""
import logging
import queue
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QSplitter, QLabel,
    QStatusBar, QApplication, QMessageBox
)
from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QAction, QKeySequence

from tempconv import __version__
from tempconv.core import FormMode, FormState, format_temperature
from tempconv.gui.models.settings import SettingsStore
from tempconv.gui.styles.theme import (
    GLOBAL_STYLESHEET, GLOBAL_STYLESHEET_DARK, get_styles, set_dark_mode
)
from tempconv.gui.utils.logging_utils import attach_queue_handler, detach_queue_handler
from tempconv.gui.widgets.console_widget import ConsoleWidget
from tempconv.gui.widgets.converter_form import ConverterForm

logger = logging.getLogger(__name__)

LOGGER_NAME = "tempconv"


class MainWindow(QMainWindow):
    def __init__(self, settings: Optional[SettingsStore] = None):
        super().__init__()

        if settings is None:
            from tempconv.gui.utils.paths import get_settings_path
            settings = SettingsStore(get_settings_path())
        self.settings = settings

        self.setWindowTitle("Temperature Converter")
        self.setMinimumSize(480, 360)

        # Set dark mode state BEFORE creating widgets (so they initialize with correct colors)
        set_dark_mode(self.settings.get_dark_mode())

        # --- Menu Bar ---
        self.menu_bar = self.menuBar()

        file_menu = self.menu_bar.addMenu("File")
        reset_action = QAction("Reset Form", self)
        reset_action.triggered.connect(self._reset_form)
        file_menu.addAction(reset_action)
        file_menu.addSeparator()
        exit_action = QAction("Quit", self)
        exit_action.setShortcut(QKeySequence.StandardKey.Quit)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        settings_menu = self.menu_bar.addMenu("Settings")
        self.dark_mode_action = QAction("Dark Mode", self)
        self.dark_mode_action.setCheckable(True)
        self.dark_mode_action.triggered.connect(self._toggle_theme)
        settings_menu.addAction(self.dark_mode_action)
        settings_menu.addSeparator()
        clear_console_action = QAction("Clear Console", self)
        clear_console_action.triggered.connect(self._clear_console)
        settings_menu.addAction(clear_console_action)

        help_menu = self.menu_bar.addMenu("Help")
        about_action = QAction("About", self)
        about_action.triggered.connect(self._show_about)
        help_menu.addAction(about_action)

        # --- Logging ---
        self.log_queue: queue.Queue = queue.Queue()
        self._log_handler = attach_queue_handler(self.log_queue, LOGGER_NAME, logging.DEBUG)
        self.log_timer = QTimer(self)
        self.log_timer.timeout.connect(self._drain_log_queue)
        self.log_timer.start(100)

        # --- Central Widget ---
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)
        self.main_layout.setContentsMargins(0, 0, 0, 0)
        self.main_layout.setSpacing(0)

        self.header = QWidget()
        self.header.setObjectName("mainHeader")
        self.header.setFixedHeight(72)
        header_layout = QHBoxLayout(self.header)
        header_layout.setContentsMargins(24, 12, 24, 12)
        self.title_label = QLabel("Temperature Converter")
        self.title_label.setObjectName("mainTitle")
        header_layout.addWidget(self.title_label, alignment=Qt.AlignmentFlag.AlignVCenter)
        header_layout.addStretch()
        self.main_layout.addWidget(self.header)

        self.splitter = QSplitter(Qt.Orientation.Vertical)
        self.splitter.setHandleWidth(8)
        self.splitter.setChildrenCollapsible(False)

        self.form_state = FormState()
        self.form = ConverterForm(self.form_state)
        self.form.converted.connect(self._on_converted)
        self.form.flipped.connect(self._on_flipped)
        self.form.conversionFailed.connect(self._on_conversion_failed)

        self.console = ConsoleWidget()

        self.splitter.addWidget(self.form)
        self.splitter.addWidget(self.console)
        self.main_layout.addWidget(self.splitter)

        splitter_state = self.settings.get_splitter_state()
        if not (splitter_state and self.splitter.restoreState(bytes.fromhex(splitter_state))):
            # Console starts collapsed to its title bar
            self.splitter.setStretchFactor(0, 1)
            self.splitter.setStretchFactor(1, 0)
            self.splitter.setSizes([99999, 0])

        geometry = self.settings.get_window_geometry()
        if not (geometry and self.restoreGeometry(bytes.fromhex(geometry))):
            self.resize(640, 520)

        # --- Status Bar ---
        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self._show_direction(self.form_state.mode)

        # Apply initial theme
        is_dark = self.settings.get_dark_mode()
        self.dark_mode_action.setChecked(is_dark)
        self._apply_theme(is_dark)
        self.settings.darkModeChanged.connect(self._on_dark_mode_changed)

        logger.debug("Main window created")

    # ─────────────────────────────────────────────────────────────────────
    # Form events
    # ─────────────────────────────────────────────────────────────────────

    def _on_converted(self, source_value: float, derived_value: float):
        src = self.form_state.source_unit
        self.status_bar.showMessage(
            f"{format_temperature(source_value)} {src.symbol} = "
            f"{format_temperature(derived_value)} {src.other.symbol}"
        )

    def _on_flipped(self, mode: FormMode):
        self._show_direction(mode)

    def _on_conversion_failed(self, message: str):
        self.status_bar.showMessage(message)

    def _show_direction(self, mode: FormMode):
        self.status_bar.showMessage(
            f"Converting {mode.source_unit.label} to {mode.derived_unit.label}"
        )

    def _reset_form(self):
        self.form.reset()
        self._show_direction(self.form_state.mode)
        logger.info("Form reset")

    # ─────────────────────────────────────────────────────────────────────
    # Theme / console
    # ─────────────────────────────────────────────────────────────────────

    def _toggle_theme(self, checked: bool):
        self.settings.set_dark_mode(checked)

    def _on_dark_mode_changed(self, is_dark: bool):
        # Windows sharing one SettingsStore follow each other
        self.dark_mode_action.setChecked(is_dark)
        self._apply_theme(is_dark)

    def _apply_theme(self, is_dark: bool):
        """Apply the selected theme stylesheet."""
        # Set global dark mode state FIRST (before any widgets read colors)
        set_dark_mode(is_dark)

        app = QApplication.instance()
        if app is not None:
            app.setStyleSheet(GLOBAL_STYLESHEET_DARK if is_dark else GLOBAL_STYLESHEET)

        self.splitter.setStyleSheet(get_styles().SPLITTER)
        self.form.update_theme()
        self.console.update_theme()

    def _clear_console(self):
        self.console.clear()

    def _drain_log_queue(self):
        while True:
            try:
                msg = self.log_queue.get_nowait()
            except queue.Empty:
                break
            if isinstance(msg, tuple) and len(msg) == 2:
                text, level = msg
                self.console.append_log(level, text)
            else:
                self.console.append_log("INFO", str(msg))
            self.log_queue.task_done()

    def _show_about(self):
        QMessageBox.about(
            self,
            "About Temperature Converter",
            "<h3>Temperature Converter</h3>"
            f"<p>Version: {__version__}</p>"
            "<p>Converts between Celsius and Fahrenheit. "
            "Use <b>Flip</b> to choose which field you type into.</p>"
        )

    def closeEvent(self, event):
        """Save UI state on close."""
        self.log_timer.stop()
        detach_queue_handler(self._log_handler, LOGGER_NAME)
        self.settings.set_window_geometry(self.saveGeometry().toHex().data().decode())
        self.settings.set_splitter_state(self.splitter.saveState().toHex().data().decode())
        super().closeEvent(event)
