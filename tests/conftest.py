"""Конфигурация pytest."""

import pytest
import sys
import os

# Добавляем корневую папку в путь
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture
def resolver():
    """Фикстура с резолвером закона Ома."""
    from power_plan.calculators import OhmsLawResolver
    return OhmsLawResolver()


@pytest.fixture
def standard_run():
    """Фикстура с типовой линией: 30 м, 16 А, 2.5 мм², 230 В."""
    from power_plan.quantities import VoltageDropInputs
    return VoltageDropInputs(
        one_way_length_m=30.0,
        load_current_a=16.0,
        conductor_area_mm2=2.5,
        supply_voltage=230.0
    )


@pytest.fixture
def three_phase_load():
    """Фикстура с трехфазной нагрузкой 230 В, 10 А, cosφ = 0.95."""
    from power_plan.quantities import Phase, PowerEstimateInputs
    return PowerEstimateInputs(
        phase=Phase.THREE,
        voltage=230.0,
        current=10.0,
        power_factor=0.95
    )
