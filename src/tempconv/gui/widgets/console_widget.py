"""
Console panel showing the converter's log records.

Records arrive from MainWindow as (level, message) pairs, where level is a
logging level name. Each record becomes one timestamped line; WARNING and
above are coloured.
"""
from datetime import datetime
from typing import Dict, Set

from PySide6.QtCore import Slot
from PySide6.QtGui import QColor, QFont, QTextCharFormat, QTextCursor
from PySide6.QtWidgets import (
    QApplication, QFileDialog, QGroupBox, QMenu, QPlainTextEdit, QSizePolicy, QVBoxLayout
)

from tempconv.gui.styles.theme import Fonts, get_colors
from tempconv.gui.utils.icons import MaterialIcons


# Level names (e.g. "INFO") never shown in the console
CONSOLE_SUPPRESSED_LEVELS: Set[str] = set()

MAX_LINES = 1000

# Level name -> palette attribute used for its text
LEVEL_COLOURS: Dict[str, str] = {
    "WARNING": "WARNING",
    "ERROR": "ERROR",
    "CRITICAL": "ERROR",
}


class ConsoleWidget(QGroupBox):
    def __init__(self, parent=None, max_lines: int = MAX_LINES):
        super().__init__("Console Log", parent)
        self.suppressed_levels: Set[str] = set(CONSOLE_SUPPRESSED_LEVELS)

        # Title bar stays visible when the splitter collapses the console
        self.setMinimumHeight(40)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.text_edit = QPlainTextEdit()
        self.text_edit.setReadOnly(True)
        self.text_edit.setMaximumBlockCount(max_lines)

        font = QFont(Fonts.MONO_FONT.split(",")[0])
        font.setPointSize(int(Fonts.CONSOLE.removesuffix("pt")))
        self.text_edit.setFont(font)
        layout.addWidget(self.text_edit)

        self._formats: Dict[str, QTextCharFormat] = {}
        self.update_theme()

    @Slot(str, str)
    def append_log(self, level: str, message: str):
        level = level.upper()
        if level in self.suppressed_levels:
            return

        cursor = self.text_edit.textCursor()
        cursor.movePosition(QTextCursor.MoveOperation.End)
        timestamp = datetime.now().strftime("%H:%M:%S")
        cursor.insertText(f"[{timestamp}] [{level}] {message}\n", self.format_for(level))
        self.text_edit.setTextCursor(cursor)
        self.text_edit.ensureCursorVisible()

    def format_for(self, level: str) -> QTextCharFormat:
        """Character format for a level name; unknown levels use the default."""
        return self._formats.get(level.upper(), self._formats["DEFAULT"])

    def line_count(self) -> int:
        return len(self.text_edit.toPlainText().splitlines())

    def clear(self):
        self.text_edit.clear()

    def contextMenuEvent(self, event):
        menu = QMenu(self)
        copy_action = menu.addAction(MaterialIcons.content_copy(), "Copy")
        copy_all_action = menu.addAction(MaterialIcons.content_copy(), "Copy All")
        menu.addSeparator()
        save_action = menu.addAction(MaterialIcons.content_save(), "Save to File...")
        menu.addSeparator()
        clear_action = menu.addAction(MaterialIcons.delete(), "Clear")

        action = menu.exec(event.globalPos())
        if action == copy_action:
            selected = self.text_edit.textCursor().selectedText()
            if selected:
                QApplication.clipboard().setText(selected)
        elif action == copy_all_action:
            QApplication.clipboard().setText(self.text_edit.toPlainText())
        elif action == save_action:
            filename, _ = QFileDialog.getSaveFileName(
                self, "Save Log", "conversions.log", "Log Files (*.log *.txt);;All Files (*)"
            )
            if filename:
                self.save_to(filename)
        elif action == clear_action:
            self.clear()

    def save_to(self, filename: str) -> bool:
        """Write the console text to a file. Failures are reported in the console."""
        try:
            with open(filename, "w", encoding="utf-8") as f:
                f.write(self.text_edit.toPlainText())
            return True
        except OSError as e:
            self.append_log("ERROR", f"Failed to save log: {e}")
            return False

    def update_theme(self):
        """Restyle the panel. Existing lines keep the colours they were written with."""
        C = get_colors()
        self.setStyleSheet(f"""
            QGroupBox {{
                background-color: {C.SURFACE};
                border: none;
                border-top: 1px solid {C.BORDER};
                margin-top: 24px;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 8px;
                padding: 0 4px;
                color: {C.TEXT_PRIMARY};
            }}
        """)
        self.text_edit.setStyleSheet(
            f"QPlainTextEdit {{ border: none; background-color: {C.SURFACE}; }}"
        )

        default = QTextCharFormat()
        default.setForeground(QColor(C.TEXT_PRIMARY))
        self._formats = {"DEFAULT": default}
        for level, attr in LEVEL_COLOURS.items():
            fmt = QTextCharFormat()
            fmt.setForeground(QColor(getattr(C, attr)))
            self._formats[level] = fmt
