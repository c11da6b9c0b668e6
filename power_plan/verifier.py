"""Модуль проверки согласованности величин закона Ома.

Резолвер при трех и более известных величинах молча использует первую
пару по приоритету. ConsistencyVerifier позволяет отдельно проверить,
согласуются ли остальные заданные величины с результатом.
"""

import logging
from typing import List

from config import VerifierConfig
from power_plan.calculators.ohms_law import OhmsLawResolver
from power_plan.quantities import OhmsLawInputs

logger = logging.getLogger(__name__)


class ConsistencyVerifier:
    """Проверяет заданные величины на соответствие V = I·R и P = V·I.

    Attributes:
        rtol: Относительная погрешность
        atol: Абсолютная погрешность
    """

    def __init__(self, config: VerifierConfig = None, resolver: OhmsLawResolver = None) -> None:
        self.config = config or VerifierConfig()
        self.rtol: float = self.config.relative_tolerance
        self.atol: float = self.config.absolute_tolerance
        self.resolver = resolver or OhmsLawResolver()

    def find_conflicts(self, inputs: OhmsLawInputs) -> List[str]:
        """Возвращает имена заданных величин, расходящихся с расчетом.

        Формула: |given - resolved| <= atol + rtol * |resolved|.
        Величина, которую не удалось вычислить, считается конфликтом.

        Raises:
            InsufficientInputsError: Если известно меньше двух величин
        """
        result = self.resolver.calculate(inputs)
        conflicts = []
        for name in inputs.known:
            given = getattr(inputs, name)
            resolved = getattr(result, name)
            if resolved is None or abs(given - resolved) > self.atol + self.rtol * abs(resolved):
                conflicts.append(name)

        if conflicts:
            logger.debug("Несогласованные величины: %s", conflicts)
        return conflicts

    def verify(self, inputs: OhmsLawInputs) -> bool:
        """True, если все заданные величины согласованы между собой."""
        return not self.find_conflicts(inputs)
