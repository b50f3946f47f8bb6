"""
Module: conversions

Purpose:
    Pure Celsius/Fahrenheit transforms. No state, no side effects, no
    validation beyond what float arithmetic gives for free: any finite
    input is accepted, including values below absolute zero.

Key Functions:
    - celsius_to_fahrenheit(c): c * 9/5 + 32
    - fahrenheit_to_celsius(f): (f - 32) * 5/9
    - convert(value, source): dispatch on the unit of `value`

Used By:
    - core.form_state.FormState
"""

from __future__ import annotations

from enum import Enum


class TemperatureUnit(Enum):
    """The two units the form knows about."""

    CELSIUS = "C"
    FAHRENHEIT = "F"

    @property
    def symbol(self) -> str:
        return f"°{self.value}"

    @property
    def label(self) -> str:
        return "Celsius" if self is TemperatureUnit.CELSIUS else "Fahrenheit"

    @property
    def other(self) -> TemperatureUnit:
        if self is TemperatureUnit.CELSIUS:
            return TemperatureUnit.FAHRENHEIT
        return TemperatureUnit.CELSIUS


def celsius_to_fahrenheit(c: float) -> float:
    """
    Convert Celsius to Fahrenheit.

    Example:
        >>> celsius_to_fahrenheit(100)
        212.0
    """
    return c * (9 / 5) + 32


def fahrenheit_to_celsius(f: float) -> float:
    """
    Convert Fahrenheit to Celsius.

    Example:
        >>> fahrenheit_to_celsius(212)
        100.0
    """
    return (f - 32) * (5 / 9)


def convert(value: float, source: TemperatureUnit) -> float:
    """Convert `value` expressed in `source` into the other unit."""
    if source is TemperatureUnit.CELSIUS:
        return celsius_to_fahrenheit(value)
    return fahrenheit_to_celsius(value)
