"""Базовый класс для калькуляторов."""

import math
from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple

from config import LimitsConfig
from power_plan.errors import DomainViolationError


class FormulaCalculator(ABC):
    """Базовый абстрактный класс для калькуляторов.

    Определяет интерфейс расчета по замкнутой формуле и общие проверки
    области определения. Калькуляторы не хранят состояния между вызовами,
    поэтому один экземпляр можно использовать повторно и из разных потоков.

    Attributes:
        limits: Допустимые диапазоны входных параметров
    """

    def __init__(self, limits: LimitsConfig = None):
        """Инициализирует калькулятор.

        Args:
            limits: Допустимые диапазоны; по умолчанию LimitsConfig()
        """
        self.limits = limits or LimitsConfig()

    @abstractmethod
    def calculate(self, inputs: Any) -> Any:
        """Вычисляет результат для входной записи.

        Args:
            inputs: Неизменяемая запись с входными данными

        Returns:
            Неизменяемая запись с результатом

        Raises:
            DomainViolationError: Если вход вне области определения
        """
        raise NotImplementedError("FormulaCalculator.calculate() не реализован")

    @staticmethod
    def _require_finite(field: str, value: Optional[float]) -> float:
        if value is None or isinstance(value, bool) or not math.isfinite(value):
            raise DomainViolationError(field, value, "ожидается конечное число")
        return float(value)

    def _require_positive(self, field: str, value: Optional[float]) -> float:
        value = self._require_finite(field, value)
        if value <= 0:
            raise DomainViolationError(field, value, "значение должно быть больше нуля")
        return value

    def _require_range(self, field: str, value: Optional[float], bounds: Tuple[float, float]) -> float:
        value = self._require_finite(field, value)
        low, high = bounds
        if not low <= value <= high:
            raise DomainViolationError(field, value, f"допустимый диапазон [{low}, {high}]")
        return value

    @staticmethod
    def _require_finite_results(**results: float) -> None:
        # Переполнение при конечных входных данных
        for field, value in results.items():
            if not math.isfinite(value):
                raise DomainViolationError(field, value, "результат вне диапазона чисел с плавающей точкой")
