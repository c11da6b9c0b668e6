"""Командная строка для калькуляторов.

Значения принимаются как текст полей ввода и разбираются parse_quantity:
пустое или нечисловое поле считается неизвестным, а не нулем.
"""

import argparse
import logging
import sys
from typing import List, Optional

from config import DisplayConfig, LimitsConfig, VerifierConfig
from power_plan.calculators import get_calculator_registry
from power_plan.errors import DomainViolationError, InsufficientInputsError, PowerPlanError
from power_plan.formatting import (
    INSUFFICIENT_INPUTS_MESSAGE,
    INVALID_DROP_INPUT_MESSAGE,
    INVALID_POWER_INPUT_MESSAGE,
    OHMS_LAW_PROMPT,
    format_quantity,
    parse_quantity,
    render_ohms_law,
    render_power,
    render_voltage_drop,
)
from power_plan.quantities import OhmsLawInputs, Phase, PowerEstimateInputs, VoltageDropInputs
from power_plan.reference import render_reference
from power_plan.verifier import ConsistencyVerifier

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="power-plan",
        description="Electrician toolkit: Ohm's Law, power and voltage drop calculators",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    ohms = subparsers.add_parser("ohms", help="Ohm's Law", description=OHMS_LAW_PROMPT)
    ohms.add_argument("--voltage", default="", help="Voltage (V)")
    ohms.add_argument("--current", default="", help="Current (A)")
    ohms.add_argument("--resistance", default="", help="Resistance (Ω)")
    ohms.add_argument("--power", default="", help="Power (W)")

    power = subparsers.add_parser("power", help="Power & Load")
    power.add_argument("--phase", choices=[phase.value for phase in Phase], default=Phase.SINGLE.value)
    power.add_argument("--voltage", default="230", help="Voltage (V)")
    power.add_argument("--current", default="10", help="Current (A)")
    power.add_argument("--power-factor", default="0.95", help="Power factor (0.5 - 1.0)")

    drop = subparsers.add_parser("drop", help="Voltage Drop")
    drop.add_argument("--length", default="30", help="One-way length (m)")
    drop.add_argument("--current", default="16", help="Load current (A)")
    drop.add_argument("--area", default="2.5", help="Conductor area (mm²)")
    drop.add_argument("--supply", default="230", help="Supply voltage (V)")
    drop.add_argument("--sweep", action="store_true", help="Show the drop for every conductor area")
    drop.add_argument("--limit", default=None, help="Find the smallest conductor keeping the drop within this percentage")

    subparsers.add_parser("reference", help="Reference constants and tips")
    return parser


def run_ohms(args, registry, display: DisplayConfig) -> int:
    inputs = OhmsLawInputs(
        voltage=parse_quantity(args.voltage),
        current=parse_quantity(args.current),
        resistance=parse_quantity(args.resistance),
        power=parse_quantity(args.power),
    )
    try:
        result = registry["ohms_law"].calculate(inputs)
    except InsufficientInputsError:
        print(INSUFFICIENT_INPUTS_MESSAGE)
        return EXIT_INVALID_INPUT

    print(render_ohms_law(result, display))

    if len(inputs.known) > 2:
        conflicts = ConsistencyVerifier(VerifierConfig(), registry["ohms_law"]).find_conflicts(inputs)
        if conflicts:
            print(f"Note: ignored inconsistent input(s): {', '.join(conflicts)}")
    return EXIT_OK


def run_power(args, registry, display: DisplayConfig) -> int:
    voltage = parse_quantity(args.voltage)
    current = parse_quantity(args.current)
    power_factor = parse_quantity(args.power_factor)
    if voltage is None or current is None or power_factor is None:
        print(INVALID_POWER_INPUT_MESSAGE)
        return EXIT_INVALID_INPUT

    inputs = PowerEstimateInputs(Phase(args.phase), voltage, current, power_factor)
    print(render_power(registry["power"].calculate(inputs), display))
    return EXIT_OK


def run_drop(args, registry, display: DisplayConfig) -> int:
    values = [parse_quantity(text) for text in (args.length, args.current, args.area, args.supply)]
    if any(value is None for value in values):
        print(INVALID_DROP_INPUT_MESSAGE)
        return EXIT_INVALID_INPUT

    limit = None
    if args.limit is not None:
        limit = parse_quantity(args.limit)
        if limit is None or limit <= 0:
            print(INVALID_DROP_INPUT_MESSAGE)
            return EXIT_INVALID_INPUT

    estimator = registry["voltage_drop"]
    inputs = VoltageDropInputs(*values)
    print(render_voltage_drop(estimator.calculate(inputs), display))

    places = display.default_precision
    if args.sweep:
        print()
        for row in estimator.sweep(inputs):
            print(
                f"{row.conductor_area_mm2:5.1f} mm²  "
                f"{format_quantity(row.drop_volts, 'V', places):>10}  "
                f"{row.drop_percent_of_supply:6.{places}f}%"
            )

    if limit is not None:
        best = estimator.smallest_conductor(inputs, limit)
        if best is None:
            print(f"No conductor up to {estimator.limits.conductor_area_range[1]} mm² keeps the drop within {limit}%")
        else:
            print(f"Smallest conductor within {limit}%: {best.conductor_area_mm2:.1f} mm²")
    return EXIT_OK


COMMANDS = {
    "ohms": run_ohms,
    "power": run_power,
    "drop": run_drop,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Точка входа командной строки.

    Returns:
        Код возврата: 0 при успехе, 2 при некорректном вводе
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "reference":
        print(render_reference())
        return EXIT_OK

    registry = get_calculator_registry(LimitsConfig())
    try:
        return COMMANDS[args.command](args, registry, DisplayConfig())
    except DomainViolationError as e:
        logger.debug("Вне области определения: %s", e)
        print(f"Invalid value for {e.field}: {e.value}")
        return EXIT_INVALID_INPUT
    except PowerPlanError as e:
        print(f"Error: {e}")
        return EXIT_INVALID_INPUT


if __name__ == "__main__":
    sys.exit(main())
