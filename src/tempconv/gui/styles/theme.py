"""
Theme definitions for the Temperature Converter GUI.
"""


class Colors:
    # Primary Colors
    PRIMARY_BLUE = "#0364B8"
    PRIMARY_BLUE_HOVER = "#0A2767"
    PRIMARY_BLUE_PRESSED = "#0A2767"

    # Backgrounds
    BACKGROUND = "#f5f5f5"
    SURFACE = "#ffffff"
    HOVER = "#f0f0f0"
    DISABLED_BG = "#e0e0e0"

    # Text
    TEXT_PRIMARY = "#1f1f1f"
    TEXT_SECONDARY = "#666666"
    TEXT_DISABLED = "#757575"
    TEXT_ON_PRIMARY = "#ffffff"

    # Borders
    BORDER = "#e0e0e0"
    BORDER_FOCUS = "#28A8EA"
    SPLITTER_HOVER = "#c0c0c0"

    # Status
    ERROR = "#d32f2f"
    WARNING = "#f57c00"

    # Selection
    SELECTION_BG = "#F0F9FF"
    SELECTION_TEXT = "#1f1f1f"

    # Read-only (derived) field
    DERIVED_BG = "#FFF4E5"


class ColorsDark:
    """Dark palette, VS Code Dark+ inspired."""

    PRIMARY_BLUE = "#3794FF"
    PRIMARY_BLUE_HOVER = "#4FA3FF"
    PRIMARY_BLUE_PRESSED = "#2A7FE8"

    BACKGROUND = "#1e1e1e"
    SURFACE = "#252526"
    HOVER = "#21262D"
    DISABLED_BG = "#3D444D"

    TEXT_PRIMARY = "#E6EDF3"
    TEXT_SECONDARY = "#8B949E"
    TEXT_DISABLED = "#9CA3AF"
    TEXT_ON_PRIMARY = "#FFFFFF"

    BORDER = "#30363D"
    BORDER_FOCUS = "#3794FF"
    SPLITTER_HOVER = "#555555"

    ERROR = "#F85149"
    WARNING = "#D29922"

    SELECTION_BG = "#1F6FEB"
    SELECTION_TEXT = "#FFFFFF"

    DERIVED_BG = "#2D2A22"


class Fonts:
    # Font Families
    UI_FONT = "-apple-system, 'SF Pro Text', 'Segoe UI', Roboto, Helvetica, Arial, sans-serif"
    MONO_FONT = "Consolas, Monaco, Menlo, 'Courier New', monospace"

    # Sizes
    TITLE = "28pt"
    BODY = "14pt"
    FIELD = "18pt"
    CONSOLE = "12pt"

    # Weights
    WEIGHT_MEDIUM = "500"


def _button_primary(C) -> str:
    return f"""
        QPushButton {{
            background-color: {C.PRIMARY_BLUE};
            color: {C.TEXT_ON_PRIMARY};
            border-radius: 6px;
            padding: 8px 16px;
            font-weight: {Fonts.WEIGHT_MEDIUM};
            border: none;
            qproperty-iconSize: 20px 20px;
        }}
        QPushButton:hover {{
            background-color: {C.PRIMARY_BLUE_HOVER};
        }}
        QPushButton:pressed {{
            background-color: {C.PRIMARY_BLUE_PRESSED};
        }}
        QPushButton:disabled {{
            background-color: {C.DISABLED_BG};
            color: {C.TEXT_DISABLED};
        }}
    """


def _button_secondary(C) -> str:
    return f"""
        QPushButton {{
            background-color: {C.SURFACE};
            color: {C.TEXT_PRIMARY};
            border: 1px solid {C.BORDER};
            border-radius: 6px;
            padding: 8px 16px;
            font-weight: {Fonts.WEIGHT_MEDIUM};
            qproperty-iconSize: 20px 20px;
        }}
        QPushButton:hover {{
            background-color: {C.HOVER};
            border-color: {C.BORDER_FOCUS};
        }}
        QPushButton:pressed {{
            background-color: {C.BORDER};
        }}
    """


def _temperature_field(C) -> str:
    # Disabled == derived field; keep its text readable
    return f"""
        QLineEdit {{
            border: 1px solid {C.BORDER};
            border-radius: 6px;
            padding: 10px;
            font-size: {Fonts.FIELD};
            background: {C.SURFACE};
            color: {C.TEXT_PRIMARY};
            selection-background-color: {C.SELECTION_BG};
            selection-color: {C.SELECTION_TEXT};
        }}
        QLineEdit:focus {{
            border: 1px solid {C.BORDER_FOCUS};
        }}
        QLineEdit:disabled {{
            background: {C.DERIVED_BG};
            color: {C.TEXT_PRIMARY};
        }}
    """


def _splitter(C) -> str:
    return f"""
        QSplitter::handle {{
            background: {C.BORDER};
        }}
        QSplitter::handle:hover {{
            background: {C.SPLITTER_HOVER};
        }}
    """


class Styles:
    # Common QSS fragments
    BUTTON_PRIMARY = _button_primary(Colors)
    BUTTON_SECONDARY = _button_secondary(Colors)
    TEMPERATURE_FIELD = _temperature_field(Colors)
    SPLITTER = _splitter(Colors)


class StylesDark:
    BUTTON_PRIMARY = _button_primary(ColorsDark)
    BUTTON_SECONDARY = _button_secondary(ColorsDark)
    TEMPERATURE_FIELD = _temperature_field(ColorsDark)
    SPLITTER = _splitter(ColorsDark)


def _global_stylesheet(C) -> str:
    return f"""
    * {{
        font-family: {Fonts.UI_FONT};
        font-size: {Fonts.BODY};
        color: {C.TEXT_PRIMARY};
    }}

    QMainWindow, QWidget {{
        background-color: {C.BACKGROUND};
    }}

    QLabel {{
        background-color: transparent;
        color: {C.TEXT_PRIMARY};
    }}

    QMenuBar, QMenu {{
        background-color: {C.BACKGROUND};
        color: {C.TEXT_PRIMARY};
        border: none;
    }}
    QMenu::item:selected {{
        background-color: {C.SELECTION_BG};
        color: {C.SELECTION_TEXT};
    }}

    QStatusBar {{
        background-color: {C.SURFACE};
        color: {C.TEXT_SECONDARY};
    }}

    QPlainTextEdit {{
        background-color: {C.SURFACE};
        color: {C.TEXT_PRIMARY};
        border: 1px solid {C.BORDER};
        border-radius: 6px;
    }}

    #mainHeader {{
        background-color: {C.SURFACE};
        border-bottom: 1px solid {C.BORDER};
    }}
    #mainTitle {{
        color: {C.TEXT_PRIMARY};
        font-size: {Fonts.TITLE};
        font-weight: normal;
    }}
    #directionLabel {{
        color: {C.TEXT_SECONDARY};
    }}
"""


# Global application stylesheets (avoid inheriting the OS palette)
GLOBAL_STYLESHEET = _global_stylesheet(Colors)
GLOBAL_STYLESHEET_DARK = _global_stylesheet(ColorsDark)


def apply_theme(app, is_dark: bool = False) -> None:
    """
    Apply the appropriate stylesheet (light or dark) to the QApplication.
    """
    set_dark_mode(is_dark)
    app.setStyleSheet(GLOBAL_STYLESHEET_DARK if is_dark else GLOBAL_STYLESHEET)

# Module-level dark mode state (set explicitly when theme changes)
_is_dark_mode = False

def set_dark_mode(is_dark: bool):
    """Explicitly set the dark mode state. Called by MainWindow._apply_theme."""
    global _is_dark_mode
    _is_dark_mode = is_dark

def is_dark_mode() -> bool:
    return _is_dark_mode

def get_colors():
    """Get the appropriate color palette based on current theme."""
    return ColorsDark if _is_dark_mode else Colors


def get_styles():
    """Get the appropriate styles based on current theme."""
    return StylesDark if _is_dark_mode else Styles

def apply_shadow(widget, blur_radius=20, x_offset=2, y_offset=4, color=None):
    """Apply a soft shadow to a widget."""
    from PySide6.QtWidgets import QGraphicsDropShadowEffect
    from PySide6.QtGui import QColor

    if color is None:
        color = QColor(0, 0, 0, 45)

    shadow = QGraphicsDropShadowEffect(widget)
    shadow.setBlurRadius(blur_radius)
    shadow.setXOffset(x_offset)
    shadow.setYOffset(y_offset)
    shadow.setColor(color)
    widget.setGraphicsEffect(shadow)
