"""Справочные константы и подсказки."""

from power_plan.calculators.voltage_drop import COPPER_RESISTIVITY

QUICK_CONSTANTS = (
    f"Copper resistivity: {COPPER_RESISTIVITY} Ω·mm²/m",
    "Power factor typical range: 0.8 - 1.0",
    "3ϕ power multiplier: √3",
)

USAGE_TIPS = (
    "Use at least two known values in Ohm's Law to solve the circuit.",
    "Power calculator suggests a breaker sized at 125% of load current.",
    "Voltage drop assumes copper conductors at 20°C with round-trip length.",
)


def render_reference() -> str:
    lines = ["Quick constants"]
    lines.extend(f"  {item}" for item in QUICK_CONSTANTS)
    lines.append("Usage tips")
    lines.extend(f"  • {tip}" for tip in USAGE_TIPS)
    return "\n".join(lines)
