"""
Unit Tests for the field text boundary.
"""

import pytest

from tempconv.core.parsing import InvalidInput, format_temperature, parse_temperature


class TestParseTemperature:

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("100", 100.0),
            ("-40", -40.0),
            ("+5", 5.0),
            ("36.6", 36.6),
            (".5", 0.5),
            ("1e2", 100.0),
            ("  21  ", 21.0),
        ],
    )
    def test_parse_when_numeric_then_returns_float(self, text, expected):
        assert parse_temperature(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_parse_when_empty_then_raises(self, text):
        with pytest.raises(InvalidInput, match="empty"):
            parse_temperature(text)

    @pytest.mark.parametrize("text", ["abc", "12abc", "1,5", "1_000", "--3", "°C"])
    def test_parse_when_not_numeric_then_raises(self, text):
        with pytest.raises(InvalidInput):
            parse_temperature(text)

    @pytest.mark.parametrize("text", ["nan", "NaN", "inf", "-Infinity", "1e400"])
    def test_parse_when_not_finite_then_raises(self, text):
        with pytest.raises(InvalidInput, match="finite"):
            parse_temperature(text)

    def test_invalid_input_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_temperature("x")

    def test_invalid_input_keeps_original_text(self):
        with pytest.raises(InvalidInput) as excinfo:
            parse_temperature(" hot ")
        assert excinfo.value.text == " hot "


class TestFormatTemperature:

    def test_whole_number_keeps_decimal_point(self):
        assert format_temperature(212) == "212.0"

    def test_negative_zero_is_preserved(self):
        assert format_temperature(-0.0) == "-0.0"

    def test_uses_shortest_round_trip_repr(self):
        assert format_temperature(100 / 3) == "33.333333333333336"

    def test_output_parses_back(self):
        for value in (0.1, -17.77777777777778, 1e21):
            assert parse_temperature(format_temperature(value)) == value

    @pytest.mark.parametrize("value, text", [
        (0.001, "0.001"),
        (9999999.0, "9999999.0"),
        (1e21, "1e+21"),
        (1e-5, "1e-05"),
    ])
    def test_notation_depends_on_magnitude(self, value, text):
        assert format_temperature(value) == text
