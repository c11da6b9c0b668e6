"""Калькулятор мощности одно- и трехфазной нагрузки."""

import logging

from .base import FormulaCalculator
from power_plan.errors import DomainViolationError
from power_plan.formatting import round_to_places
from power_plan.quantities import Phase, PowerEstimateInputs, PowerEstimateResult

logger = logging.getLogger(__name__)

# Автомат подбирается с запасом 25% к току нагрузки
BREAKER_MARGIN = 1.25
BREAKER_PRECISION = 2


class PowerEstimator(FormulaCalculator):
    """Оценивает активную и полную мощность и номинал автомата."""

    def calculate(self, inputs: PowerEstimateInputs) -> PowerEstimateResult:
        """Вычисляет мощность: P = k·U·I·cosφ, S = k·U·I, k = 1 или √3.

        Args:
            inputs: Фаза, напряжение, ток и коэффициент мощности

        Returns:
            Активная мощность (Вт), полная мощность (ВА), ток автомата (А)

        Raises:
            DomainViolationError: U <= 0, I <= 0 или cosφ вне диапазона
        """
        try:
            phase = Phase(inputs.phase)
        except ValueError:
            raise DomainViolationError("phase", inputs.phase, "ожидается single или three") from None
        voltage = self._require_positive("voltage", inputs.voltage)
        current = self._require_positive("current", inputs.current)
        power_factor = self._require_range(
            "power_factor", inputs.power_factor, self.limits.power_factor_range
        )

        apparent_power = phase.multiplier * voltage * current
        result = PowerEstimateResult(
            real_power_watts=apparent_power * power_factor,
            apparent_power_va=apparent_power,
            recommended_breaker_amps=round_to_places(current * BREAKER_MARGIN, BREAKER_PRECISION),
        )
        self._require_finite_results(
            real_power_watts=result.real_power_watts,
            apparent_power_va=result.apparent_power_va,
            recommended_breaker_amps=result.recommended_breaker_amps,
        )

        logger.debug("%s: %.3f Вт, %.3f ВА", phase.label, result.real_power_watts, result.apparent_power_va)
        return result
