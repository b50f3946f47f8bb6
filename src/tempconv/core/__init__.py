"""
Temperature Converter Core Package

Pure domain logic with no Qt dependency:

1. **Conversion functions**
   - `celsius_to_fahrenheit` / `fahrenheit_to_celsius`, total over finite floats

2. **Form state**
   - `FormMode` is the single source of truth for which field is editable
   - `FormState.flip()` never recomputes values; the derived field stays stale

3. **Boundary parsing**
   - Text from the editable field is parsed by `parse_temperature`
   - Anything that is not a finite number raises `InvalidInput`
"""

from .conversions import TemperatureUnit, celsius_to_fahrenheit, convert, fahrenheit_to_celsius
from .form_state import FormMode, FormState
from .parsing import InvalidInput, format_temperature, parse_temperature

__all__ = [
    "TemperatureUnit",
    "celsius_to_fahrenheit",
    "fahrenheit_to_celsius",
    "convert",
    "FormMode",
    "FormState",
    "InvalidInput",
    "parse_temperature",
    "format_temperature",
]
