"""Тесты командной строки."""

import pytest
import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from power_plan.cli import main, EXIT_OK, EXIT_INVALID_INPUT


class TestOhmsCommand:
    """Тесты команды ohms."""

    def test_resolves(self, capsys):
        code = main(["ohms", "--voltage", "230", "--current", "10"])

        assert code == EXIT_OK
        assert "Resistance: 23.000 Ω" in capsys.readouterr().out

    def test_insufficient(self, capsys):
        code = main(["ohms", "--voltage", "230", "--current", "abc"])

        assert code == EXIT_INVALID_INPUT
        assert "Enter at least two known values." in capsys.readouterr().out

    def test_undefined_placeholder(self, capsys):
        code = main(["ohms", "--resistance", "0", "--power", "10"])

        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert "Current: –" in out

    def test_inconsistent_note(self, capsys):
        main(["ohms", "--voltage", "230", "--current", "10", "--resistance", "999"])

        out = capsys.readouterr().out
        assert "Resistance: 23.000 Ω" in out
        assert "ignored inconsistent input(s): resistance" in out


class TestPowerCommand:
    """Тесты команды power."""

    def test_defaults(self, capsys):
        code = main(["power", "--power-factor", "1"])

        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert "Power: 2300.00 W (2.30 kW)" in out
        assert "Recommended breaker: 12.50 A" in out

    def test_invalid_text(self, capsys):
        code = main(["power", "--voltage", "abc"])

        assert code == EXIT_INVALID_INPUT
        assert "Please enter valid voltage and current." in capsys.readouterr().out

    def test_domain_violation(self, capsys):
        code = main(["power", "--power-factor", "0.3"])

        assert code == EXIT_INVALID_INPUT
        assert "Invalid value for power_factor" in capsys.readouterr().out


class TestDropCommand:
    """Тесты команды drop."""

    def test_defaults(self, capsys):
        code = main(["drop"])

        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert "Estimated drop: 6.72 V" in out
        assert "Percentage of supply: 2.92%" in out

    def test_sweep(self, capsys):
        main(["drop", "--sweep"])

        out = capsys.readouterr().out
        assert " 1.5 mm²" in out
        assert "35.0 mm²" in out

    def test_limit(self, capsys):
        main(["drop", "--limit", "3"])

        assert "Smallest conductor within 3.0%: 2.5 mm²" in capsys.readouterr().out

    def test_limit_unreachable(self, capsys):
        main(["drop", "--limit", "0.1"])

        assert "No conductor up to 35.0 mm²" in capsys.readouterr().out

    def test_invalid_text(self, capsys):
        code = main(["drop", "--length", ""])

        assert code == EXIT_INVALID_INPUT
        assert "Please provide valid numeric values." in capsys.readouterr().out


class TestReferenceCommand:
    """Тесты команды reference."""

    def test_reference(self, capsys):
        code = main(["reference"])

        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert "Copper resistivity: 0.0175 Ω·mm²/m" in out
        assert "breaker sized at 125% of load current" in out

    def test_command_required(self):
        with pytest.raises(SystemExit):
            main([])


class TestExtremeValues:
    """Тесты ввода на границе диапазона чисел с плавающей точкой."""

    def test_huge_voltage(self, capsys):
        code = main(["ohms", "--voltage", "1e306", "--current", "1"])

        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert "Current: 1.000 A" in out
        assert "Power: –" not in out

    def test_power_overflow(self, capsys):
        code = main(["power", "--voltage", "1e200", "--current", "1e200"])

        assert code == EXIT_INVALID_INPUT
        assert "Invalid value for" in capsys.readouterr().out


class TestDropLimitValidation:
    """Некорректный предел отклоняется до вывода результата."""

    @pytest.mark.parametrize("limit", ["abc", "-1", "0"])
    def test_invalid_limit(self, capsys, limit):
        code = main(["drop", "--limit", limit])

        out = capsys.readouterr().out
        assert code == EXIT_INVALID_INPUT
        assert "Please provide valid numeric values." in out
        assert "Estimated drop" not in out
