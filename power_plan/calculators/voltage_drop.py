"""Калькулятор падения напряжения в медной линии."""

import logging
from typing import List, Optional, Sequence

import numpy as np

from .base import FormulaCalculator
from power_plan.quantities import VoltageDropInputs, VoltageDropResult

logger = logging.getLogger(__name__)

# Удельное сопротивление меди при 20°C, Ом·мм²/м
COPPER_RESISTIVITY = 0.0175


class VoltageDropEstimator(FormulaCalculator):
    """Оценивает падение напряжения с учетом прямого и обратного проводника.

    Сопротивление петли R = ρ·2L/S, падение ΔU = I·R.
    Алюминий и температурная поправка не поддерживаются.
    """

    def calculate(self, inputs: VoltageDropInputs) -> VoltageDropResult:
        length, current, supply_voltage = self._validate_run(inputs)
        area = self._require_range(
            "conductor_area_mm2", inputs.conductor_area_mm2, self.limits.conductor_area_range
        )

        loop_resistance = COPPER_RESISTIVITY * 2 * length / area
        drop = current * loop_resistance
        result = VoltageDropResult(
            drop_volts=drop,
            drop_percent_of_supply=100 * drop / supply_voltage,
            loop_resistance_ohms=loop_resistance,
            conductor_area_mm2=area,
        )
        self._check_result(result)
        return result

    def area_grid(self) -> np.ndarray:
        """Сетка сечений от минимального до максимального с заданным шагом."""
        low, high = self.limits.conductor_area_range
        step = self.limits.conductor_area_step
        # Половина шага компенсирует погрешность arange на верхней границе
        return np.round(np.arange(low, high + step / 2, step), 6)

    def sweep(
        self,
        inputs: VoltageDropInputs,
        areas: Optional[Sequence[float]] = None
    ) -> List[VoltageDropResult]:
        """Считает ту же линию для набора сечений.

        Args:
            inputs: Параметры линии; сечение из inputs не используется
            areas: Сечения, мм²; по умолчанию area_grid()

        Returns:
            Результаты в порядке сечений
        """
        length, current, supply_voltage = self._validate_run(inputs)
        grid = self.area_grid() if areas is None else np.asarray(areas, dtype=float)
        for area in grid:
            self._require_range("conductor_area_mm2", float(area), self.limits.conductor_area_range)

        with np.errstate(over="ignore"):
            loop_resistance = COPPER_RESISTIVITY * 2 * length / grid
            drop = current * loop_resistance
            percent = 100 * drop / supply_voltage

        logger.debug("Расчет для %d сечений", len(grid))
        rows = [
            VoltageDropResult(
                drop_volts=float(drop[k]),
                drop_percent_of_supply=float(percent[k]),
                loop_resistance_ohms=float(loop_resistance[k]),
                conductor_area_mm2=float(grid[k]),
            )
            for k in range(len(grid))
        ]
        for row in rows:
            self._check_result(row)
        return rows

    def smallest_conductor(
        self,
        inputs: VoltageDropInputs,
        max_drop_percent: Optional[float] = None
    ) -> Optional[VoltageDropResult]:
        """Подбирает минимальное сечение из сетки с падением не выше предела.

        Returns:
            Результат для подобранного сечения или None, если не хватает
            даже максимального сечения
        """
        if max_drop_percent is None:
            max_drop_percent = self.limits.max_drop_percent
        limit = self._require_positive("max_drop_percent", max_drop_percent)

        for result in self.sweep(inputs):
            if result.drop_percent_of_supply <= limit:
                return result

        logger.debug("Ни одно сечение не дает падения <= %.2f%%", limit)
        return None

    def _check_result(self, result: VoltageDropResult) -> None:
        self._require_finite_results(
            loop_resistance_ohms=result.loop_resistance_ohms,
            drop_volts=result.drop_volts,
            drop_percent_of_supply=result.drop_percent_of_supply,
        )

    def _validate_run(self, inputs: VoltageDropInputs):
        return (
            self._require_positive("one_way_length_m", inputs.one_way_length_m),
            self._require_positive("load_current_a", inputs.load_current_a),
            self._require_positive("supply_voltage", inputs.supply_voltage),
        )

