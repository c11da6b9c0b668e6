"""Инженерные калькуляторы для электриков.

Содержит разрешение закона Ома, оценку мощности нагрузки и падения
напряжения, а также разбор и форматирование величин для вывода.
"""

from power_plan.errors import DomainViolationError, InsufficientInputsError, PowerPlanError
from power_plan.quantities import (
    OhmsLawInputs,
    OhmsLawResult,
    Phase,
    PowerEstimateInputs,
    PowerEstimateResult,
    VoltageDropInputs,
    VoltageDropResult,
)
from power_plan.calculators import (
    OhmsLawResolver,
    PowerEstimator,
    VoltageDropEstimator,
    estimate_power,
    estimate_voltage_drop,
    get_calculator_registry,
    resolve,
)
from power_plan.verifier import ConsistencyVerifier

__version__ = "1.0.0"

__all__ = [
    "PowerPlanError",
    "InsufficientInputsError",
    "DomainViolationError",
    "OhmsLawInputs",
    "OhmsLawResult",
    "Phase",
    "PowerEstimateInputs",
    "PowerEstimateResult",
    "VoltageDropInputs",
    "VoltageDropResult",
    "OhmsLawResolver",
    "PowerEstimator",
    "VoltageDropEstimator",
    "estimate_power",
    "estimate_voltage_drop",
    "get_calculator_registry",
    "resolve",
    "ConsistencyVerifier",
]
