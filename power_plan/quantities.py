"""Входные данные и результаты расчетов.

Все записи неизменяемые: результат каждый раз создается заново,
общего состояния между вызовами нет.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

# Канонический порядок величин закона Ома
OHMS_LAW_FIELDS = ("voltage", "current", "resistance", "power")


@dataclass(frozen=True)
class OhmsLawInputs:
    """Известные величины закона Ома; None означает неизвестную."""

    voltage: Optional[float] = None
    current: Optional[float] = None
    resistance: Optional[float] = None
    power: Optional[float] = None

    @property
    def known(self) -> Tuple[str, ...]:
        """Имена заданных величин в каноническом порядке."""
        return tuple(name for name in OHMS_LAW_FIELDS if getattr(self, name) is not None)


@dataclass(frozen=True)
class OhmsLawResult:
    """Результат разрешения закона Ома.

    Attributes:
        voltage, current, resistance, power: Значения величин. None означает,
            что величина не определена (деление на ноль или корень из
            отрицательного числа).
        branch: Пара известных величин, по которой велся расчет.
    """

    voltage: Optional[float]
    current: Optional[float]
    resistance: Optional[float]
    power: Optional[float]
    branch: Tuple[str, str]

    @property
    def undefined_fields(self) -> Tuple[str, ...]:
        return tuple(name for name in OHMS_LAW_FIELDS if getattr(self, name) is None)

    @property
    def is_complete(self) -> bool:
        return not self.undefined_fields

    def as_dict(self) -> Dict[str, Optional[float]]:
        return {name: getattr(self, name) for name in OHMS_LAW_FIELDS}


class Phase(Enum):
    """Тип питающей сети."""

    SINGLE = "single"
    THREE = "three"

    @property
    def multiplier(self) -> float:
        return 1.0 if self is Phase.SINGLE else math.sqrt(3.0)

    @property
    def label(self) -> str:
        return "Single-phase" if self is Phase.SINGLE else "Three-phase"


@dataclass(frozen=True)
class PowerEstimateInputs:
    phase: Phase
    voltage: float
    current: float
    power_factor: float = 0.95


@dataclass(frozen=True)
class PowerEstimateResult:
    real_power_watts: float
    apparent_power_va: float
    recommended_breaker_amps: float

    @property
    def real_power_kw(self) -> float:
        return self.real_power_watts / 1000


@dataclass(frozen=True)
class VoltageDropInputs:
    """Параметры кабельной линии (медь, подача и возврат)."""

    one_way_length_m: float
    load_current_a: float
    conductor_area_mm2: float = 2.5
    supply_voltage: float = 230.0


@dataclass(frozen=True)
class VoltageDropResult:
    drop_volts: float
    drop_percent_of_supply: float
    loop_resistance_ohms: float
    conductor_area_mm2: float
