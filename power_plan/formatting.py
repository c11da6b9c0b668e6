"""Модуль общих утилит для ввода и вывода величин.

Содержит разбор текстовых полей в числа, округление и текстовое
представление результатов. Расчетная логика здесь не живет: калькуляторы
возвращают полную точность, округление применяется только при выводе.
"""

import math
import re
from typing import Optional

from config import DisplayConfig
from power_plan.quantities import OhmsLawResult, PowerEstimateResult, VoltageDropResult

OHMS_LAW_PROMPT = "Provide any two values to solve the rest."
INSUFFICIENT_INPUTS_MESSAGE = "Enter at least two known values."
INVALID_POWER_INPUT_MESSAGE = "Please enter valid voltage and current."
INVALID_DROP_INPUT_MESSAGE = "Please provide valid numeric values."

_NUMBER_RE = re.compile(r'[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?')


def parse_quantity(text: Optional[str]) -> Optional[float]:
    """Преобразует текст поля ввода в число.

    Пустая строка и нечисловой текст дают None ("неизвестно"), а не ноль.

    Args:
        text: Содержимое поля ввода

    Returns:
        Число или None

    Example:
        >>> parse_quantity(" 230 ")
        230.0
        >>> parse_quantity("abc") is None
        True
    """
    if text is None:
        return None

    candidate = text.strip()
    if not _NUMBER_RE.fullmatch(candidate):
        return None

    value = float(candidate)
    # "1e999" проходит по шаблону, но дает бесконечность
    if not math.isfinite(value):
        return None
    return value


def round_to_places(value: float, places: int) -> float:
    """Округляет до заданного числа знаков, половину от нуля (2.5 -> 3)."""
    divisor = 10.0 ** places
    scaled = abs(value) * divisor
    # У таких чисел дробных разрядов уже нет, округлять нечего
    if not math.isfinite(scaled) or scaled >= 2.0 ** 52:
        return value
    return math.copysign(math.floor(scaled + 0.5), value) / divisor


def format_quantity(
    value: Optional[float],
    unit: str,
    places: int,
    placeholder: str = "–"
) -> str:
    """Форматирует величину с фиксированным числом знаков.

    Неопределенная величина (None) выводится заглушкой.
    """
    if value is None:
        return placeholder
    return f"{round_to_places(value, places):.{places}f} {unit}"


def render_ohms_law(result: OhmsLawResult, config: DisplayConfig = None) -> str:
    config = config or DisplayConfig()
    places = config.ohms_law_precision

    def fmt(value, unit):
        return format_quantity(value, unit, places, config.placeholder)

    return "\n".join([
        f"Voltage: {fmt(result.voltage, 'V')}",
        f"Current: {fmt(result.current, 'A')}",
        f"Resistance: {fmt(result.resistance, 'Ω')}",
        f"Power: {fmt(result.power, 'W')}",
    ])


def render_power(result: PowerEstimateResult, config: DisplayConfig = None) -> str:
    config = config or DisplayConfig()
    places = config.default_precision
    watts = format_quantity(result.real_power_watts, "W", places)
    kilowatts = format_quantity(result.real_power_kw, "kW", places)

    return "\n".join([
        f"Power: {watts} ({kilowatts})",
        f"Recommended breaker: {format_quantity(result.recommended_breaker_amps, 'A', places)}",
        f"Apparent power: {format_quantity(result.apparent_power_va, 'VA', places)}",
    ])


def render_voltage_drop(result: VoltageDropResult, config: DisplayConfig = None) -> str:
    config = config or DisplayConfig()
    places = config.default_precision
    percent = round_to_places(result.drop_percent_of_supply, places)

    return "\n".join([
        f"Estimated drop: {format_quantity(result.drop_volts, 'V', places)}",
        f"Percentage of supply: {percent:.{places}f}%",
        f"Loop resistance: {format_quantity(result.loop_resistance_ohms, 'Ω', places)}",
    ])
