"""Конфигурация допустимых диапазонов входных данных."""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class LimitsConfig:
    """Границы входных параметров калькуляторов."""

    # Коэффициент мощности
    power_factor_range: Tuple[float, float] = (0.5, 1.0)

    # Сечение проводника, мм²
    conductor_area_range: Tuple[float, float] = (1.5, 35.0)
    conductor_area_step: float = 0.5

    # Допустимое падение напряжения для подбора сечения, %
    max_drop_percent: float = 3.0

    def __post_init__(self):
        low, high = self.power_factor_range
        if not 0 < low <= high <= 1:
            raise ValueError(f"Некорректный диапазон коэффициента мощности: {self.power_factor_range}")

        low, high = self.conductor_area_range
        if not 0 < low <= high:
            raise ValueError(f"Некорректный диапазон сечений: {self.conductor_area_range}")

        if self.conductor_area_step <= 0:
            raise ValueError(f"Шаг сечения должен быть положительным: {self.conductor_area_step}")
