"""Тесты для разбора и форматирования величин."""

import pytest
import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import DisplayConfig
from power_plan import resolve, estimate_power, estimate_voltage_drop
from power_plan.formatting import (
    format_quantity,
    parse_quantity,
    render_ohms_law,
    render_power,
    render_voltage_drop,
    round_to_places,
)
from power_plan.quantities import OhmsLawInputs, Phase, PowerEstimateInputs


class TestParseQuantity:
    """Тесты для функции parse_quantity."""

    def test_valid_numbers(self):
        test_cases = [
            ("230", 230.0),
            (" 2.5 ", 2.5),
            ("-3", -3.0),
            ("+4", 4.0),
            (".5", 0.5),
            ("5.", 5.0),
            ("1e3", 1000.0),
            ("0", 0.0),
        ]

        for text, expected in test_cases:
            assert parse_quantity(text) == expected, f"Failed for input: {text!r}"

    def test_absent_values(self):
        """Пустой и нечисловой текст означает отсутствие значения, а не ноль."""
        test_cases = [None, "", "   ", "abc", "12V", "2,5", "nan", "inf", "1e999", "--1", "."]

        for text in test_cases:
            assert parse_quantity(text) is None, f"Failed for input: {text!r}"


class TestRounding:
    """Тесты округления."""

    @pytest.mark.parametrize("value, places, expected", [
        (0.125, 2, 0.13),
        (-0.125, 2, -0.13),
        (2.5, 0, 3.0),
        (12.5, 2, 12.5),
        (23.0, 3, 23.0),
        (1.0004, 3, 1.0),
    ])
    def test_half_away_from_zero(self, value, places, expected):
        assert round_to_places(value, places) == expected


class TestFormatQuantity:
    """Тесты для format_quantity."""

    def test_fixed_places(self):
        assert format_quantity(23.0, "Ω", 3) == "23.000 Ω"
        assert format_quantity(6.72, "V", 2) == "6.72 V"
        assert format_quantity(0.125, "A", 2) == "0.13 A"

    def test_placeholder(self):
        assert format_quantity(None, "Ω", 3) == "–"
        assert format_quantity(None, "Ω", 3, placeholder="n/a") == "n/a"


class TestRender:
    """Тесты текстового представления результатов."""

    def test_ohms_law(self):
        text = render_ohms_law(resolve(OhmsLawInputs(voltage=230, current=10)))

        assert text.splitlines() == [
            "Voltage: 230.000 V",
            "Current: 10.000 A",
            "Resistance: 23.000 Ω",
            "Power: 2300.000 W",
        ]

    def test_ohms_law_undefined(self):
        text = render_ohms_law(resolve(OhmsLawInputs(voltage=230, current=0)))

        assert "Resistance: –" in text
        assert "Power: 0.000 W" in text

    def test_ohms_law_custom_precision(self):
        config = DisplayConfig(ohms_law_precision=1, placeholder="?")
        text = render_ohms_law(resolve(OhmsLawInputs(resistance=0, power=10)), config)

        assert "Current: ?" in text
        assert "Resistance: 0.0 Ω" in text

    def test_power(self):
        text = render_power(estimate_power(PowerEstimateInputs(Phase.SINGLE, 230.0, 10.0, 1.0)))

        assert text.splitlines() == [
            "Power: 2300.00 W (2.30 kW)",
            "Recommended breaker: 12.50 A",
            "Apparent power: 2300.00 VA",
        ]

    def test_voltage_drop(self, standard_run):
        text = render_voltage_drop(estimate_voltage_drop(standard_run))

        assert text.splitlines() == [
            "Estimated drop: 6.72 V",
            "Percentage of supply: 2.92%",
            "Loop resistance: 0.42 Ω",
        ]


class TestLargeValues:
    """Тесты для чисел без дробных разрядов."""

    @pytest.mark.parametrize("value, places", [
        (1e306, 3),
        (-1e306, 3),
        (1.7976931348623157e308, 2),
        (2.0 ** 60, 0),
    ])
    def test_round_returns_value_unchanged(self, value, places):
        assert round_to_places(value, places) == value

    def test_render_huge_ohms_law(self):
        """Огромное, но конечное напряжение выводится без ошибки."""
        text = render_ohms_law(resolve(OhmsLawInputs(voltage=1e306, current=1)))

        lines = text.splitlines()
        assert lines[0].startswith("Voltage: 1")
        assert lines[0].endswith(".000 V")
        assert "Current: 1.000 A" in text
