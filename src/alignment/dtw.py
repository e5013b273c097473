"""
Dynamic Time Warping — минимальная стоимость выравнивания двух серий

Стоимость шага — |a[i-1] - b[j-1]| (abs_diff ядра). Рекуррентность:

    cost[i][j] = |a[i-1] - b[j-1]| + min(cost[i-1][j], cost[i][j-1], cost[i-1][j-1])

Матрица (n+1) x (m+1): начало cost[0][0] = 0, остальные граничные ячейки —
недостижимый sentinel UINT256_MAX. Заполнение построчное. Результат —
cost[n][m]; путь выравнивания не восстанавливается.

Серии разной длины допустимы (именно ради этого DTW и существует).
Без окна Сакоэ-Чибы: O(n·m) по времени и памяти.

Масштаб: сырые целые на входе и на выходе.
"""

import logging
from typing import Final, Sequence

from src.core.errors import IndexOutOfRangeError
from src.core.math.checked import UINT256_MAX, abs_diff, checked_add, ensure_series

logger = logging.getLogger(__name__)

# Sentinel "бесконечной" стоимости для недостижимых ячеек
UNREACHABLE_COST: Final[int] = UINT256_MAX


def build_cost_matrix(series_a: Sequence[int], series_b: Sequence[int]) -> list[list[int]]:
    """
    Полная матрица накопленных стоимостей выравнивания.

    Args:
        series_a: Первая серия (uint256)
        series_b: Вторая серия (uint256), длина может отличаться

    Returns:
        Матрица (len(a)+1) x (len(b)+1)

    Raises:
        IndexOutOfRangeError: Если любая из серий пустая
    """
    a = ensure_series(series_a, "series_a")
    b = ensure_series(series_b, "series_b")
    if not a or not b:
        raise IndexOutOfRangeError("dtw: both series must be non-empty")

    rows, cols = len(a) + 1, len(b) + 1
    cost = [[UNREACHABLE_COST] * cols for _ in range(rows)]
    cost[0][0] = 0

    for i in range(1, rows):
        previous_row = cost[i - 1]
        row = cost[i]
        for j in range(1, cols):
            best = min(previous_row[j], row[j - 1], previous_row[j - 1])
            row[j] = checked_add(abs_diff(a[i - 1], b[j - 1]), best)

    return cost


def dtw_distance(series_a: Sequence[int], series_b: Sequence[int]) -> int:
    """
    DTW расстояние между двумя сериями.

    Examples:
        >>> dtw_distance([1, 2, 3], [1, 2, 3])
        0
        >>> dtw_distance([1, 2, 3], [1, 2, 2, 3])
        0
        >>> dtw_distance([0, 0], [5])
        10
    """
    cost = build_cost_matrix(series_a, series_b)
    distance = cost[-1][-1]
    logger.debug(
        "DTW %dx%d alignment cost=%d", len(cost) - 1, len(cost[0]) - 1, distance
    )
    return distance
