"""Иерархия исключений калькуляторов."""

from typing import Optional


class PowerPlanError(Exception):
    """Базовое исключение для всех ошибок расчета."""


class InsufficientInputsError(PowerPlanError, ValueError):
    """Для закона Ома известно меньше двух величин."""

    def __init__(self, known_count: int):
        self.known_count = known_count
        super().__init__(f"Нужно минимум две известные величины, получено: {known_count}")


class DomainViolationError(PowerPlanError, ValueError):
    """Входное значение вне допустимой области определения."""

    def __init__(self, field: str, value: Optional[float], requirement: str):
        self.field = field
        self.value = value
        self.requirement = requirement
        super().__init__(f"{field}={value!r}: {requirement}")
