"""
Скрипт для демонстрации калькуляторов Power Plan

Основные функции:
- Без аргументов: демонстрация трех калькуляторов на типовых значениях
- С аргументами: командная строка (см. python main.py --help)
"""

import sys
from pathlib import Path

# Добавляем текущую папку в путь
sys.path.append(str(Path(__file__).parent))

from power_plan import (
    OhmsLawInputs,
    Phase,
    PowerEstimateInputs,
    VoltageDropInputs,
    estimate_power,
    estimate_voltage_drop,
    resolve,
)
from power_plan.cli import main as cli_main
from power_plan.formatting import render_ohms_law, render_power, render_voltage_drop


def demo_calculations():
    """Демонстрация расчетов на значениях по умолчанию."""
    print("\n--- Ohm's Law: 230 V, 10 A ---")
    print(render_ohms_law(resolve(OhmsLawInputs(voltage=230.0, current=10.0))))

    print("\n--- Power & Load: three-phase, 230 V, 10 A, pf 0.95 ---")
    print(render_power(estimate_power(PowerEstimateInputs(Phase.THREE, 230.0, 10.0, 0.95))))

    print("\n--- Voltage Drop: 30 m, 16 A, 2.5 mm², 230 V ---")
    print(render_voltage_drop(estimate_voltage_drop(VoltageDropInputs(30.0, 16.0, 2.5, 230.0))))


def main():
    if len(sys.argv) > 1:
        return cli_main(sys.argv[1:])

    print("🚀 Power Plan")
    print("=" * 50)
    demo_calculations()
    print("\n✅ Демонстрация завершена")
    return 0


if __name__ == "__main__":
    sys.exit(main())
