"""Калькуляторы электрических величин.

Содержит калькуляторы:
- Закон Ома (любые две величины из V, I, R, P)
- Мощность одно- и трехфазной нагрузки
- Падение напряжения в медной линии
"""

from config import LimitsConfig
from power_plan.quantities import (
    OhmsLawInputs,
    OhmsLawResult,
    PowerEstimateInputs,
    PowerEstimateResult,
    VoltageDropInputs,
    VoltageDropResult,
)
from .base import FormulaCalculator
from .ohms_law import OhmsLawResolver
from .power import PowerEstimator
from .voltage_drop import VoltageDropEstimator


def get_calculator_registry(limits: LimitsConfig = None):
    """Создает реестр калькуляторов.

    Args:
        limits: Допустимые диапазоны входных параметров

    Returns:
        Словарь {calculator_name: calculator_instance}
    """
    return {
        "ohms_law": OhmsLawResolver(limits),
        "power": PowerEstimator(limits),
        "voltage_drop": VoltageDropEstimator(limits),
    }


_DEFAULT_REGISTRY = get_calculator_registry()


def resolve(inputs: OhmsLawInputs) -> OhmsLawResult:
    return _DEFAULT_REGISTRY["ohms_law"].calculate(inputs)


def estimate_power(inputs: PowerEstimateInputs) -> PowerEstimateResult:
    return _DEFAULT_REGISTRY["power"].calculate(inputs)


def estimate_voltage_drop(inputs: VoltageDropInputs) -> VoltageDropResult:
    return _DEFAULT_REGISTRY["voltage_drop"].calculate(inputs)


__all__ = [
    "FormulaCalculator",
    "OhmsLawResolver",
    "PowerEstimator",
    "VoltageDropEstimator",
    "get_calculator_registry",
    "resolve",
    "estimate_power",
    "estimate_voltage_drop",
]
