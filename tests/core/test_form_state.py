"""
Unit Tests for FormMode and FormState.
"""

import math

import pytest

from tempconv.core.conversions import TemperatureUnit
from tempconv.core.form_state import FormMode, FormState
from tempconv.core.parsing import InvalidInput


class TestFormMode:

    def test_celsius_source_projects_units(self):
        mode = FormMode.CELSIUS_IS_SOURCE
        assert mode.source_unit is TemperatureUnit.CELSIUS
        assert mode.derived_unit is TemperatureUnit.FAHRENHEIT

    def test_fahrenheit_source_projects_units(self):
        mode = FormMode.FAHRENHEIT_IS_SOURCE
        assert mode.source_unit is TemperatureUnit.FAHRENHEIT
        assert mode.derived_unit is TemperatureUnit.CELSIUS

    def test_exactly_one_unit_is_editable(self):
        for mode in FormMode:
            editable = [unit for unit in TemperatureUnit if mode.is_editable(unit)]
            assert editable == [mode.source_unit]

    def test_flipped_has_period_two(self):
        for mode in FormMode:
            assert mode.flipped() is not mode
            assert mode.flipped().flipped() is mode


class TestFormState:

    # ─────────────────────────────────────────────────────────────────────
    # Initialization
    # ─────────────────────────────────────────────────────────────────────

    def test_init_when_created_then_celsius_is_source(self):
        state = FormState()
        assert state.mode is FormMode.CELSIUS_IS_SOURCE
        assert state.is_editable(TemperatureUnit.CELSIUS)
        assert not state.is_editable(TemperatureUnit.FAHRENHEIT)

    def test_initialize_when_flipped_then_resets_to_default(self):
        state = FormState()
        state.flip()
        state.initialize()
        assert state.mode is FormMode.CELSIUS_IS_SOURCE

    def test_states_are_independent(self):
        """Mode is owned per instance, not shared."""
        first, second = FormState(), FormState()
        first.flip()
        assert second.mode is FormMode.CELSIUS_IS_SOURCE

    # ─────────────────────────────────────────────────────────────────────
    # Flip
    # ─────────────────────────────────────────────────────────────────────

    def test_flip_once_then_fahrenheit_is_source(self):
        state = FormState()
        assert state.flip() is FormMode.FAHRENHEIT_IS_SOURCE
        assert state.mode is FormMode.FAHRENHEIT_IS_SOURCE
        assert state.source_unit is TemperatureUnit.FAHRENHEIT
        assert state.derived_unit is TemperatureUnit.CELSIUS

    def test_flip_twice_then_back_to_celsius(self):
        state = FormState()
        state.flip()
        assert state.flip() is FormMode.CELSIUS_IS_SOURCE

    # ─────────────────────────────────────────────────────────────────────
    # Convert
    # ─────────────────────────────────────────────────────────────────────

    def test_convert_when_celsius_source_then_fahrenheit(self):
        state = FormState()
        assert state.convert(0) == 32

    def test_convert_after_flip_then_celsius(self):
        state = FormState()
        state.convert(0)
        state.flip()
        assert state.convert(32) == 0

    def test_convert_does_not_change_mode(self):
        state = FormState()
        state.convert(100)
        assert state.mode is FormMode.CELSIUS_IS_SOURCE

    def test_convert_after_flip_when_near_float_max_then_finite(self):
        state = FormState()
        state.flip()
        derived = state.convert(1.7e308)
        assert math.isfinite(derived)
        assert derived == pytest.approx(9.444444444444444e307, rel=1e-12)

    def test_convert_when_result_overflows_then_raises_invalid_input(self):
        state = FormState()
        with pytest.raises(InvalidInput, match="out of range"):
            state.convert(1.5e308)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_convert_when_not_finite_then_raises_invalid_input(self, value):
        state = FormState()
        with pytest.raises(InvalidInput, match="finite"):
            state.convert(value)

    def test_repr_shows_mode(self):
        assert repr(FormState()) == "FormState(mode=CELSIUS_IS_SOURCE)"
