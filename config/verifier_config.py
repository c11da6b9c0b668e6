"""Конфигурация для проверки согласованности величин."""

from dataclasses import dataclass


@dataclass
class VerifierConfig:
    # Точность проверки
    relative_tolerance: float = 1e-3  # 0.1% относительная погрешность
    absolute_tolerance: float = 1e-6  # Абсолютная погрешность

    def __post_init__(self):
        if self.relative_tolerance < 0 or self.absolute_tolerance < 0:
            raise ValueError(
                f"Погрешность не может быть отрицательной: "
                f"{self.relative_tolerance}, {self.absolute_tolerance}"
            )
