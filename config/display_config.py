"""Конфигурация вывода результатов."""

from dataclasses import dataclass


@dataclass
class DisplayConfig:
    """Настройки форматирования чисел при выводе."""

    # Знаки после запятой
    ohms_law_precision: int = 3  # Закон Ома: V, I, R, P
    default_precision: int = 2   # Мощность и падение напряжения

    # Заглушка для неопределенных величин
    placeholder: str = "–"

    def __post_init__(self):
        if self.ohms_law_precision < 0 or self.default_precision < 0:
            raise ValueError(
                f"Число знаков не может быть отрицательным: "
                f"{self.ohms_law_precision}, {self.default_precision}"
            )
