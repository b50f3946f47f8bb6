"""
Module: form_state

Purpose:
    Tracks which of the two fields is the editable source and drives the
    two user-visible operations, convert and flip.

Key Classes:
    - FormMode: CELSIUS_IS_SOURCE / FAHRENHEIT_IS_SOURCE
    - FormState: owns one FormMode for the lifetime of a form

State machine:
    Two states joined by one transition (flip), period 2. `convert` reads
    the mode and never changes it. Field enablement is a projection of the
    mode and is never tracked separately.

Used By:
    - gui.widgets.converter_form.ConverterForm
"""

from __future__ import annotations

import logging
import math
from enum import Enum

from tempconv.core.conversions import TemperatureUnit, convert
from tempconv.core.parsing import InvalidInput

logger = logging.getLogger(__name__)


class FormMode(Enum):
    """Which field currently accepts user input."""

    CELSIUS_IS_SOURCE = "celsius"
    FAHRENHEIT_IS_SOURCE = "fahrenheit"

    @property
    def source_unit(self) -> TemperatureUnit:
        if self is FormMode.CELSIUS_IS_SOURCE:
            return TemperatureUnit.CELSIUS
        return TemperatureUnit.FAHRENHEIT

    @property
    def derived_unit(self) -> TemperatureUnit:
        return self.source_unit.other

    def flipped(self) -> FormMode:
        if self is FormMode.CELSIUS_IS_SOURCE:
            return FormMode.FAHRENHEIT_IS_SOURCE
        return FormMode.CELSIUS_IS_SOURCE

    def is_editable(self, unit: TemperatureUnit) -> bool:
        return unit is self.source_unit


class FormState:
    """
    Source/derived bookkeeping for one converter form.

    Example:
        >>> state = FormState()
        >>> state.convert(0)
        32.0
        >>> state.flip()
        <FormMode.FAHRENHEIT_IS_SOURCE: 'fahrenheit'>
        >>> state.convert(32)
        0.0
    """

    DEFAULT_MODE = FormMode.CELSIUS_IS_SOURCE

    def __init__(self) -> None:
        self._mode = self.DEFAULT_MODE
        self.initialize()

    def initialize(self) -> None:
        """Reset to the startup default: Celsius editable."""
        self._mode = self.DEFAULT_MODE
        logger.debug(f"Form state initialized ({self._mode.name})")

    @property
    def mode(self) -> FormMode:
        return self._mode

    @property
    def source_unit(self) -> TemperatureUnit:
        return self._mode.source_unit

    @property
    def derived_unit(self) -> TemperatureUnit:
        return self._mode.derived_unit

    def is_editable(self, unit: TemperatureUnit) -> bool:
        return self._mode.is_editable(unit)

    def convert(self, source_value: float) -> float:
        """
        Compute the derived value from the source field's value.

        Args:
            source_value: Already-parsed value of the source field.

        Returns:
            The value for the read-only field.

        Raises:
            InvalidInput: If source_value is NaN or infinite, or the result
                does not fit in a float.
        """
        if not math.isfinite(source_value):
            raise InvalidInput(str(source_value), "value must be finite")
        derived = convert(source_value, self.source_unit)
        if not math.isfinite(derived):
            raise InvalidInput(str(source_value), "value is out of range")
        return derived

    def flip(self) -> FormMode:
        """Swap source and derived roles. Values are not recomputed."""
        self._mode = self._mode.flipped()
        logger.debug(f"Form mode is now {self._mode.name}")
        return self._mode

    def __repr__(self) -> str:
        return f"FormState(mode={self._mode.name})"
