"""
TransitionMatrix — матрица допустимых переходов между состояниями

Квадратная матрица неотрицательных весов, индексированная идентификаторами
состояний 0..n-1. Нулевой вес означает, что переход запрещён.

Используется проверкой допустимости последовательности состояний
(например, последовательности режимов, размеченных классификатором).
"""

import logging
from typing import Sequence

from pydantic import BaseModel, Field, model_validator

from src.core.domain.series import UInt256
from src.core.errors import OutOfRangeError
from src.core.math.checked import ensure_integer

logger = logging.getLogger(__name__)


class TransitionMatrix(BaseModel):
    """Квадратная матрица весов переходов; weights[from][to] == 0 → запрещено."""

    weights: tuple[tuple[UInt256, ...], ...] = Field(..., min_length=1)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_square(self) -> "TransitionMatrix":
        """Проверка, что матрица квадратная"""
        size = len(self.weights)
        for row_index, row in enumerate(self.weights):
            if len(row) != size:
                raise ValueError(
                    f"row {row_index} has {len(row)} columns, expected {size}"
                )
        return self

    @property
    def size(self) -> int:
        return len(self.weights)

    def check_state(self, state: int) -> None:
        """
        Raises:
            OutOfRangeError: Если идентификатор состояния вне матрицы
        """
        ensure_integer(state, "state")
        if not 0 <= state < self.size:
            raise OutOfRangeError(
                f"state {state} outside transition matrix of size {self.size}"
            )

    def weight(self, source: int, target: int) -> int:
        """
        Вес перехода source → target.

        Raises:
            OutOfRangeError: Если идентификатор состояния вне матрицы
        """
        self.check_state(source)
        self.check_state(target)
        return self.weights[source][target]

    def allows(self, source: int, target: int) -> bool:
        return self.weight(source, target) > 0


def is_valid_sequence(states: Sequence[int], matrix: TransitionMatrix) -> bool:
    """
    Проверка, что каждый последовательный переход разрешён матрицей.

    Пустая последовательность и последовательность из одного состояния
    допустимы (переходов нет). Все состояния проверяются до переходов:
    неизвестное состояние даёт ошибку даже после запрещённого перехода.

    Returns:
        True если все переходы имеют ненулевой вес

    Raises:
        OutOfRangeError: Если встречается состояние вне матрицы
    """
    for state in states:
        matrix.check_state(state)

    for position in range(1, len(states)):
        if not matrix.allows(states[position - 1], states[position]):
            logger.debug(
                "Forbidden transition %s -> %s at position %d",
                states[position - 1],
                states[position],
                position,
            )
            return False
    return True
