"""
Converter form: the two temperature fields plus Convert and Flip buttons.

Field enablement is always re-derived from FormState.mode; the widget keeps
no enabled/disabled flags of its own.
"""
import logging
from typing import Dict, Optional

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QLineEdit,
    QPushButton, QMessageBox
)
from PySide6.QtCore import Qt, Signal

from tempconv.core import (
    FormMode, FormState, InvalidInput, TemperatureUnit,
    format_temperature, parse_temperature,
)
from tempconv.gui.styles.theme import apply_shadow, get_colors, get_styles
from tempconv.gui.utils.icons import MaterialIcons

logger = logging.getLogger(__name__)


class ConverterForm(QWidget):
    """
    Celsius/Fahrenheit form driven by a FormState.

    Signals:
        converted(source_value, derived_value): after a successful convert
        flipped(FormMode): after the direction changed
        conversionFailed(message): when the source text did not parse
    """

    converted = Signal(float, float)
    flipped = Signal(object)
    conversionFailed = Signal(str)

    def __init__(self, state: Optional[FormState] = None, parent=None):
        super().__init__(parent)
        self.state = state if state is not None else FormState()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(32, 24, 32, 24)
        layout.setSpacing(16)

        grid = QGridLayout()
        grid.setHorizontalSpacing(12)
        grid.setVerticalSpacing(12)

        self.celsius_field = self._make_field(TemperatureUnit.CELSIUS)
        self.fahrenheit_field = self._make_field(TemperatureUnit.FAHRENHEIT)
        self.fields: Dict[TemperatureUnit, QLineEdit] = {
            TemperatureUnit.CELSIUS: self.celsius_field,
            TemperatureUnit.FAHRENHEIT: self.fahrenheit_field,
        }

        for row, unit in enumerate((TemperatureUnit.CELSIUS, TemperatureUnit.FAHRENHEIT)):
            grid.addWidget(QLabel(unit.label), row, 0)
            grid.addWidget(self.fields[unit], row, 1)
            grid.addWidget(QLabel(unit.symbol), row, 2)
        grid.setColumnStretch(1, 1)
        layout.addLayout(grid)

        self.direction_label = QLabel()
        self.direction_label.setObjectName("directionLabel")
        self.direction_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.direction_label)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self.flip_btn = QPushButton("Flip")
        self.flip_btn.setToolTip("Swap which field is editable")
        self.flip_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.flip_btn.clicked.connect(self._on_flip_clicked)
        button_row.addWidget(self.flip_btn)

        self.convert_btn = QPushButton("Convert")
        self.convert_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.convert_btn.clicked.connect(self._on_convert_clicked)
        apply_shadow(self.convert_btn, blur_radius=12, y_offset=2)
        button_row.addWidget(self.convert_btn)

        layout.addLayout(button_row)
        layout.addStretch()

        self.update_theme()
        self._apply_mode()

    def _make_field(self, unit: TemperatureUnit) -> QLineEdit:
        field = QLineEdit()
        field.setObjectName(f"{unit.label.lower()}Field")
        field.setPlaceholderText(f"Temperature in {unit.symbol}")
        field.setAlignment(Qt.AlignmentFlag.AlignRight)
        # Only the enabled (source) field can receive Return
        field.returnPressed.connect(self._on_convert_clicked)
        return field

    # ─────────────────────────────────────────────────────────────────────
    # Projection of FormMode
    # ─────────────────────────────────────────────────────────────────────

    @property
    def mode(self) -> FormMode:
        return self.state.mode

    @property
    def source_field(self) -> QLineEdit:
        return self.fields[self.state.source_unit]

    @property
    def derived_field(self) -> QLineEdit:
        return self.fields[self.state.derived_unit]

    def _apply_mode(self) -> None:
        for unit, field in self.fields.items():
            editable = self.state.is_editable(unit)
            field.setEnabled(editable)
            field.setToolTip("" if editable else "Result (read-only)")
        self.direction_label.setText(
            f"{self.state.source_unit.symbol}  →  {self.state.derived_unit.symbol}"
        )

    # ─────────────────────────────────────────────────────────────────────
    # Operations
    # ─────────────────────────────────────────────────────────────────────

    def convert(self) -> float:
        """
        Convert the source field's text and write the result to the derived field.

        Returns:
            The derived value.

        Raises:
            InvalidInput: If the source text is not a finite number. No field
                is modified in that case.
        """
        source_unit = self.state.source_unit
        value = parse_temperature(self.source_field.text())
        derived = self.state.convert(value)
        self.derived_field.setText(format_temperature(derived))

        logger.info(
            f"Converted {format_temperature(value)} {source_unit.symbol} -> "
            f"{format_temperature(derived)} {source_unit.other.symbol}"
        )
        self.converted.emit(value, derived)
        return derived

    def flip(self) -> FormMode:
        """Swap the editable field. The derived value is left as it is."""
        mode = self.state.flip()
        self._apply_mode()
        self.source_field.setFocus()

        logger.info(f"Direction flipped: {mode.source_unit.symbol} -> {mode.derived_unit.symbol}")
        self.flipped.emit(mode)
        return mode

    def reset(self) -> None:
        """Clear both fields and return to Celsius as the source."""
        self.state.initialize()
        for field in self.fields.values():
            field.clear()
        self._apply_mode()

    # ─────────────────────────────────────────────────────────────────────
    # Triggers
    # ─────────────────────────────────────────────────────────────────────

    def _on_convert_clicked(self):
        try:
            self.convert()
        except InvalidInput as e:
            logger.warning(str(e))
            self.conversionFailed.emit(str(e))
            QMessageBox.warning(
                self,
                "Invalid Input",
                f"Enter a number in the {self.state.source_unit.label} field.",
            )
        logger.debug("convert trigger finished")

    def _on_flip_clicked(self):
        self.flip()
        logger.debug("flip trigger finished")

    def update_theme(self):
        """Update styles when theme changes."""
        S = get_styles()
        C = get_colors()
        for field in self.fields.values():
            field.setStyleSheet(S.TEMPERATURE_FIELD)
        self.convert_btn.setStyleSheet(S.BUTTON_PRIMARY)
        self.convert_btn.setIcon(MaterialIcons.thermometer(C.TEXT_ON_PRIMARY))
        self.flip_btn.setStyleSheet(S.BUTTON_SECONDARY)
        self.flip_btn.setIcon(MaterialIcons.swap(C.TEXT_SECONDARY))
