"""
Crashlog utilities for capturing unhandled exceptions.

In frozen (PyInstaller) builds stderr is not visible to users. This module
writes unhandled exceptions to crash log files and shows a dialog.

Strategy:
1. Python exceptions: sys.excepthook
2. Qt errors: Qt message handler records qCritical/qFatal
3. Native crashes: faulthandler writes the traceback to last_crash.log
4. Process-level crashes: detected on restart via the .running marker file
"""
from __future__ import annotations

import atexit
import faulthandler
import platform
import sys
import traceback
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

# Global reference to original excepthook
_original_excepthook: Optional[Callable] = None

# Kept open for the whole session so faulthandler can write during a crash
_faulthandler_file = None

# Maximum number of crash logs to keep
MAX_CRASH_LOGS = 5

REPORT_TITLE = "Temperature Converter Crash Report"


def get_crashlog_dir() -> Path:
    """Get the directory for crash logs, creating it if needed."""
    from tempconv.gui.utils.paths import get_crash_logs_dir
    crash_dir = get_crash_logs_dir()
    crash_dir.mkdir(parents=True, exist_ok=True)
    return crash_dir


def _get_unclean_exit_marker() -> Path:
    return get_crashlog_dir() / ".running"


def _get_last_crash_file() -> Path:
    return get_crashlog_dir() / "last_crash.log"


def _rotate_crash_logs() -> None:
    """
    Maintain a maximum of MAX_CRASH_LOGS files.

    Deletes oldest logs so there is room for one more.
    """
    crash_dir = get_crashlog_dir()
    logs = sorted(crash_dir.glob("crash_*.log"), key=lambda p: p.stat().st_mtime)

    while len(logs) >= MAX_CRASH_LOGS:
        oldest = logs.pop(0)
        try:
            oldest.unlink()
        except OSError:
            pass  # Best effort deletion


def format_crash_report(exc_type, exc_value, exc_tb, app_version: str) -> str:
    """Build the text written to a crash log file."""
    tb_text = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
    lines = [
        REPORT_TITLE,
        "=" * 50,
        f"Timestamp: {datetime.now().isoformat()}",
        f"Version: {app_version}",
        f"Python: {sys.version}",
        f"Platform: {platform.platform()}",
        f"Frozen: {getattr(sys, 'frozen', False)}",
        "",
        "Exception:",
        "-" * 50,
        tb_text,
    ]
    return "\n".join(lines)


def write_crash_report(exc_type, exc_value, exc_tb, app_version: str = "unknown") -> Optional[Path]:
    """
    Write a crash report file.

    Returns:
        Path of the written file, or None if it could not be written.
    """
    content = format_crash_report(exc_type, exc_value, exc_tb, app_version)
    try:
        _rotate_crash_logs()
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        crash_file = get_crashlog_dir() / f"crash_{timestamp}.log"
        crash_file.write_text(content, encoding="utf-8")
        return crash_file
    except OSError:
        return None


def _install_qt_message_handler() -> None:
    """
    Install a Qt message handler to capture Qt warnings and errors.

    qCritical and qFatal messages are appended to the last crash file.
    """
    from PySide6.QtCore import qInstallMessageHandler, QtMsgType

    def qt_message_handler(mode, context, message):
        level_map = {
            QtMsgType.QtDebugMsg: "DEBUG",
            QtMsgType.QtInfoMsg: "INFO",
            QtMsgType.QtWarningMsg: "WARNING",
            QtMsgType.QtCriticalMsg: "CRITICAL",
            QtMsgType.QtFatalMsg: "FATAL",
        }
        level = level_map.get(mode, "UNKNOWN")

        if mode in (QtMsgType.QtCriticalMsg, QtMsgType.QtFatalMsg):
            try:
                with open(_get_last_crash_file(), "a", encoding="utf-8") as f:
                    f.write(f"\n[{datetime.now().isoformat()}] Qt {level}:\n")
                    f.write(f"  File: {context.file}:{context.line}\n")
                    f.write(f"  Function: {context.function}\n")
                    f.write(f"  Message: {message}\n")
            except OSError:
                pass

        print(f"Qt {level}: {message}", file=sys.stderr)

    qInstallMessageHandler(qt_message_handler)


def _install_faulthandler(app_version: str) -> None:
    """Send native-crash tracebacks (segfaults inside Qt) to last_crash.log."""
    global _faulthandler_file
    try:
        _faulthandler_file = open(_get_last_crash_file(), "a", encoding="utf-8")
        _faulthandler_file.write(f"[{datetime.now().isoformat()}] Session started (v{app_version})\n")
        _faulthandler_file.flush()
        faulthandler.enable(file=_faulthandler_file, all_threads=True)
    except OSError as e:
        print(f"Warning: Could not install faulthandler: {e}", file=sys.stderr)


def _cleanup_faulthandler() -> None:
    """Stop faulthandler and drop this session's log after a clean exit."""
    global _faulthandler_file
    if _faulthandler_file is None:
        return
    faulthandler.disable()
    _faulthandler_file.close()
    _faulthandler_file = None
    try:
        _get_last_crash_file().unlink(missing_ok=True)
    except OSError:
        pass


def _create_unclean_exit_marker() -> None:
    try:
        _get_unclean_exit_marker().write_text(datetime.now().isoformat())
    except OSError:
        pass


def _remove_unclean_exit_marker() -> None:
    try:
        marker = _get_unclean_exit_marker()
        if marker.exists():
            marker.unlink()
    except OSError:
        pass


def check_previous_crash() -> Optional[str]:
    """
    Check if the previous session crashed (unclean exit).

    Returns:
        Crash log content (possibly empty) if the previous session crashed,
        None otherwise.
    """
    marker = _get_unclean_exit_marker()
    if not marker.exists():
        return None

    crash_file = _get_last_crash_file()
    crash_content = ""
    if crash_file.exists():
        try:
            crash_content = crash_file.read_text(encoding="utf-8")
            crash_file.unlink()
        except OSError:
            pass

    try:
        marker.unlink()
    except OSError:
        pass
    return crash_content


def show_previous_crash_dialog(crash_content: str) -> None:
    """Tell the user the previous session did not exit cleanly."""
    from PySide6.QtWidgets import QApplication, QMessageBox

    if not QApplication.instance():
        return

    msg = QMessageBox()
    msg.setIcon(QMessageBox.Icon.Warning)
    msg.setWindowTitle("Temperature Converter - Previous Session Crashed")
    msg.setText("The application did not exit cleanly last time.")
    msg.setInformativeText(f"Crash logs are kept in:\n{get_crashlog_dir()}")
    msg.setDetailedText(crash_content or "No crash details available.")
    msg.setStandardButtons(QMessageBox.StandardButton.Ok)
    msg.exec()


def install_crash_handler(app_version: str = "unknown") -> None:
    """
    Install crash handling for unhandled Python exceptions.

    Call this early in application startup, before any GUI code.

    Args:
        app_version: Application version string for crash reports.
    """
    global _original_excepthook
    _original_excepthook = sys.excepthook

    _install_faulthandler(app_version)
    _create_unclean_exit_marker()
    atexit.register(_remove_unclean_exit_marker)
    atexit.register(_cleanup_faulthandler)

    def crash_handler(exc_type, exc_value, exc_tb):
        tb_text = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
        print(tb_text, file=sys.stderr)
        sys.stderr.flush()

        # Write crash log BEFORE any Qt operations
        crash_file = write_crash_report(exc_type, exc_value, exc_tb, app_version)
        _show_crash_dialog(crash_file, tb_text)

        _remove_unclean_exit_marker()
        sys.exit(1)

    sys.excepthook = crash_handler


def install_qt_crash_handling() -> None:
    """
    Install Qt-specific crash handling.

    Call this AFTER QApplication is created but BEFORE showing the main window.
    """
    _install_qt_message_handler()


def _show_crash_dialog(crash_file: Optional[Path], traceback_text: str) -> None:
    """Show a blocking crash dialog with the log location."""
    from PySide6.QtWidgets import QApplication, QMessageBox
    from PySide6.QtCore import Qt

    app = QApplication.instance()
    if not app:
        return

    if crash_file and crash_file.exists():
        info_text = (
            f"A crash report has been saved to:\n{crash_file}\n\n"
            "Please include this file when reporting the issue."
        )
    else:
        info_text = "Could not save crash report."

    msg = QMessageBox()
    msg.setIcon(QMessageBox.Icon.Critical)
    msg.setWindowTitle("Temperature Converter - Unexpected Error")
    msg.setText("The application encountered an unexpected error and needs to close.")
    msg.setInformativeText(info_text)
    msg.setDetailedText(traceback_text)
    msg.setStandardButtons(QMessageBox.StandardButton.Ok)
    msg.setWindowModality(Qt.WindowModality.ApplicationModal)
    msg.exec()
