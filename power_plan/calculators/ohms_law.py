"""Разрешение закона Ома по любым двум известным величинам."""

import logging
import math
from typing import Callable, Optional, Tuple

from .base import FormulaCalculator
from power_plan.errors import InsufficientInputsError
from power_plan.quantities import OHMS_LAW_FIELDS, OhmsLawInputs, OhmsLawResult

logger = logging.getLogger(__name__)

Quantities = Tuple[Optional[float], Optional[float], Optional[float], Optional[float]]


def _finite(value: Optional[float]) -> Optional[float]:
    if value is None or not math.isfinite(value):
        return None
    return value


def _divide(numerator: Optional[float], denominator: Optional[float]) -> Optional[float]:
    # Деление на ноль делает неопределенным только эту величину
    if numerator is None or denominator is None or denominator == 0:
        return None
    return _finite(numerator / denominator)


def _multiply(*factors: Optional[float]) -> Optional[float]:
    if any(factor is None for factor in factors):
        return None
    product = 1.0
    for factor in factors:
        product *= factor
    return _finite(product)


def _square_root(value: Optional[float]) -> Optional[float]:
    if value is None or value < 0:
        return None
    return math.sqrt(value)


def _from_voltage_current(v, i, r, p) -> Quantities:
    return v, i, _divide(v, i), _multiply(v, i)


def _from_voltage_resistance(v, i, r, p) -> Quantities:
    current = _divide(v, r)
    return v, current, r, _multiply(v, current)


def _from_voltage_power(v, i, r, p) -> Quantities:
    current = _divide(p, v)
    return v, current, _divide(v, current), p


def _from_current_resistance(v, i, r, p) -> Quantities:
    return _multiply(i, r), i, r, _multiply(i, i, r)


def _from_current_power(v, i, r, p) -> Quantities:
    voltage = _divide(p, i)
    return voltage, i, _divide(voltage, i), p


def _from_resistance_power(v, i, r, p) -> Quantities:
    current = _square_root(_divide(p, r))
    return _multiply(current, r), current, r, p


# Порядок важен: при трех и более известных побеждает первая подходящая пара
BRANCHES: Tuple[Tuple[Tuple[str, str], Callable[..., Quantities]], ...] = (
    (("voltage", "current"), _from_voltage_current),
    (("voltage", "resistance"), _from_voltage_resistance),
    (("voltage", "power"), _from_voltage_power),
    (("current", "resistance"), _from_current_resistance),
    (("current", "power"), _from_current_power),
    (("resistance", "power"), _from_resistance_power),
)


class OhmsLawResolver(FormulaCalculator):
    """Находит недостающие величины по закону Ома (V = I·R) и мощности (P = V·I)."""

    def calculate(self, inputs: OhmsLawInputs) -> OhmsLawResult:
        """Разрешает величины закона Ома.

        Лишние известные величины (больше двух) игнорируются и
        перезаписываются расчетными значениями выбранной пары.

        Args:
            inputs: Известные величины (минимум две)

        Returns:
            Результат; неопределенные величины равны None

        Raises:
            InsufficientInputsError: Если известно меньше двух величин
            DomainViolationError: Если известная величина не конечное число
        """
        known = inputs.known
        if len(known) < 2:
            raise InsufficientInputsError(len(known))

        values = {name: self._require_finite(name, getattr(inputs, name)) for name in known}
        args = [values.get(name) for name in OHMS_LAW_FIELDS]

        branch, solve = next(
            (pair, solve) for pair, solve in BRANCHES if all(name in values for name in pair)
        )

        ignored = [name for name in known if name not in branch]
        if ignored:
            logger.debug("Ветвь %s, игнорируются: %s", branch, ignored)
        else:
            logger.debug("Ветвь %s", branch)

        voltage, current, resistance, power = solve(*args)
        result = OhmsLawResult(
            voltage=voltage,
            current=current,
            resistance=resistance,
            power=power,
            branch=branch,
        )

        if result.undefined_fields:
            logger.debug("Не определены: %s", result.undefined_fields)
        return result
