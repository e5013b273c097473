"""
Fixed-Point Statistics — описательная статистика в целых числах

Примитивы ядра, на которых построены aligner, classifier и decomposer:
mean, median, mode, minimum, maximum, variance, standard_deviation,
sort, integer_sqrt.

Масштаб: все функции принимают и возвращают "сырые" (немасштабированные)
целые значения. Деление везде усекается к нулю.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустая серия → ошибка (DivideByZeroError для агрегатов с делением,
   IndexOutOfRangeError для выборки элемента), никогда не 0
2. Вход вызывающего кода не мутируется
3. Каждое сложение/умножение проверяется в домене
"""

import logging
from typing import Sequence

from src.core.errors import (
    ArithmeticUnderflowError,
    DivideByZeroError,
    IndexOutOfRangeError,
)
from src.core.math.checked import (
    UINT256,
    IntegerDomain,
    abs_diff,
    checked_add,
    checked_div,
    checked_mul,
    checked_sum,
    ensure_integer,
    ensure_series,
)
from src.core.math.sorting import partition_exchange_sort

logger = logging.getLogger(__name__)


def _require_elements(values: list[int], operation: str) -> None:
    if not values:
        raise IndexOutOfRangeError(f"{operation}: series is empty")


# =============================================================================
# ЦЕНТРАЛЬНАЯ ТЕНДЕНЦИЯ
# =============================================================================


def mean(series: Sequence[int], domain: IntegerDomain = UINT256) -> int:
    """
    Арифметическое среднее с усечением к нулю.

    Args:
        series: Входная серия
        domain: Домен значений (default: uint256)

    Returns:
        sum(series) / len(series), усечённое к нулю

    Raises:
        DivideByZeroError: Если серия пустая

    Examples:
        >>> mean([1, 2, 3, 4, 5])
        3
        >>> mean([1, 2])
        1
    """
    values = ensure_series(series, domain=domain)
    if not values:
        raise DivideByZeroError("mean: series is empty")

    return checked_div(checked_sum(values, domain), len(values), domain)


def median(series: Sequence[int], domain: IntegerDomain = UINT256) -> int:
    """
    Медиана: средний элемент отсортированной копии, либо усечённое среднее
    двух средних элементов для чётной длины.

    Examples:
        >>> median([5, 1, 3])
        3
        >>> median([1, 2, 4, 5])
        3
    """
    ordered = sort(series, domain)
    _require_elements(ordered, "median")

    middle = len(ordered) // 2
    if len(ordered) % 2 == 1:
        return ordered[middle]

    return checked_div(checked_add(ordered[middle - 1], ordered[middle], domain), 2, domain)


def mode(series: Sequence[int], domain: IntegerDomain = UINT256) -> int:
    """
    Наиболее частое значение.

    Частоты хранятся в dict по фактически встреченным значениям (а не в
    плотном массиве размером с домен). При равенстве частот побеждает
    значение, первым достигшее нового максимума при проходе слева направо.

    Examples:
        >>> mode([1, 2, 2, 3, 4])
        2
        >>> mode([1, 2, 2, 1])
        2
    """
    values = ensure_series(series, domain=domain)
    _require_elements(values, "mode")

    counts: dict[int, int] = {}
    best_value = values[0]
    best_count = 0
    for value in values:
        count = counts.get(value, 0) + 1
        counts[value] = count
        if count > best_count:
            best_count = count
            best_value = value

    return best_value


def minimum(series: Sequence[int], domain: IntegerDomain = UINT256) -> int:
    """Минимальное значение серии."""
    values = ensure_series(series, domain=domain)
    _require_elements(values, "minimum")

    result = values[0]
    for value in values[1:]:
        if value < result:
            result = value
    return result


def maximum(series: Sequence[int], domain: IntegerDomain = UINT256) -> int:
    """Максимальное значение серии."""
    values = ensure_series(series, domain=domain)
    _require_elements(values, "maximum")

    result = values[0]
    for value in values[1:]:
        if value > result:
            result = value
    return result


# =============================================================================
# РАЗБРОС
# =============================================================================


def variance(series: Sequence[int], domain: IntegerDomain = UINT256) -> int:
    """
    Популяционная дисперсия: среднее квадратов отклонений от mean.

    Отклонения берутся как |x - mean| (abs_diff), поэтому квадрат
    вычисляется в беззнаковом домене без потери знака.

    Raises:
        DivideByZeroError: Если серия пустая
    """
    values = ensure_series(series, domain=domain)
    center = mean(values, domain)

    squared = [checked_mul(abs_diff(v, center), abs_diff(v, center)) for v in values]
    return checked_div(checked_sum(squared), len(values))


def standard_deviation(series: Sequence[int], domain: IntegerDomain = UINT256) -> int:
    """
    Популяционное стандартное отклонение: integer_sqrt(variance).

    Examples:
        >>> standard_deviation([2, 4, 4, 4, 5, 5, 7, 9])
        2
    """
    return integer_sqrt(variance(series, domain))


# =============================================================================
# СОРТИРОВКА И КОРЕНЬ
# =============================================================================


def sort(series: Sequence[int], domain: IntegerDomain = UINT256) -> list[int]:
    """
    Новый список по возрастанию (partition-exchange sort, pivot = середина).

    Examples:
        >>> sort([3, 1, 2])
        [1, 2, 3]
    """
    values = ensure_series(series, domain=domain)
    partition_exchange_sort(values)
    return values


def integer_sqrt(x: int) -> int:
    """
    Целочисленный квадратный корень методом Ньютона: floor(sqrt(x)).

    Итерация z = (x // z + z) // 2 от начального z = ceil(x / 2);
    останавливается, как только итерация перестаёт убывать.

    Examples:
        >>> integer_sqrt(16)
        4
        >>> integer_sqrt(15)
        3
        >>> integer_sqrt(0)
        0

    Raises:
        ArithmeticUnderflowError: x < 0
    """
    x = ensure_integer(x, "x")
    if x < 0:
        raise ArithmeticUnderflowError(f"integer_sqrt: negative input {x}")
    if x == 0:
        return 0

    # ceil(x / 2) без x + 1, которое переполнило бы UINT256_MAX
    z = x // 2 + x % 2
    y = x
    while z < y:
        y = z
        z = (x // z + z) // 2
    return y
