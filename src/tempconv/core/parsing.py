"""
Module: parsing

Purpose:
    Text <-> number boundary for the form fields. The editable field holds
    free text; it only becomes a TemperatureValue once it parses to a finite
    float. Everything else is an InvalidInput.

Key Functions:
    - parse_temperature(text): str -> float, raises InvalidInput
    - format_temperature(value): float -> str for the read-only field
"""

from __future__ import annotations

import math


class InvalidInput(ValueError):
    """
    Raised when field text is not a finite real number.

    Attributes:
        text: The raw text that failed to parse.
    """

    def __init__(self, text: str, reason: str = "not a number") -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid temperature {text!r}: {reason}")


def parse_temperature(text: str) -> float:
    """
    Parse the text of the editable field.

    Surrounding whitespace is ignored. Signs, decimals and exponents are
    accepted ("-40", "36.6", "1e2"); empty text, words, digit-group
    underscores, NaN and infinities are not.

    Raises:
        InvalidInput: If the text is not a finite number.

    Example:
        >>> parse_temperature(" 100 ")
        100.0
    """
    stripped = text.strip()
    if not stripped:
        raise InvalidInput(text, "field is empty")
    # float() allows "1_000"; the field should not
    if "_" in stripped:
        raise InvalidInput(text)
    try:
        value = float(stripped)
    except ValueError:
        raise InvalidInput(text) from None
    if not math.isfinite(value):
        raise InvalidInput(text, "value must be finite")
    return value


def format_temperature(value: float) -> str:
    """
    Render a value for the read-only field (212 -> "212.0").

    Magnitudes from 1e-4 up to 1e16 are written in positional notation;
    anything outside uses repr's exponent form ("1e+21").
    """
    return repr(float(value))
