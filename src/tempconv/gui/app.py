"""
Entry point for the PySide6 GUI.
"""
import logging
import sys

logger = logging.getLogger(__name__)

APP_NAME = "Temperature Converter"


def run() -> int:
    """
    Main entry point for the GUI application.

    Returns:
        The Qt event loop's exit code.
    """
    from PySide6.QtWidgets import QApplication

    from tempconv import __version__
    from tempconv.gui.main_window import MainWindow
    from tempconv.gui.models.settings import SettingsStore
    from tempconv.gui.styles.theme import apply_theme
    from tempconv.gui.utils.crashlog import (
        install_crash_handler,
        install_qt_crash_handling,
        check_previous_crash,
        show_previous_crash_dialog,
    )
    from tempconv.gui.utils.paths import get_settings_path

    # App name first: frozen builds resolve the crash log dir through QStandardPaths
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationDisplayName(APP_NAME)
    app.setOrganizationName(APP_NAME)
    app.setApplicationVersion(__version__)

    # Check before install_crash_handler creates this session's marker
    previous_crash = check_previous_crash()
    install_crash_handler(app_version=__version__)
    install_qt_crash_handling()

    if previous_crash is not None:
        show_previous_crash_dialog(previous_crash)

    settings = SettingsStore(get_settings_path())
    if not settings.check_load_error():
        return 1  # User chose not to reset

    apply_theme(app, settings.get_dark_mode())

    window = MainWindow(settings)
    window.show()
    logger.info(f"{APP_NAME} {__version__} started")

    return app.exec()


def main() -> None:
    """Console-script entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
