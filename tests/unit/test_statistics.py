"""
Тесты для Fixed-Point Statistics и Partition-Exchange Sort

Проверяет:
1. mean / median / mode / minimum / maximum
2. variance / standard_deviation
3. sort: упорядоченность, перестановка, идемпотентность
4. integer_sqrt: floor(sqrt(x)) на всём диапазоне
5. Ошибки на пустых сериях и вне домена
"""

import pytest

from src.core.errors import (
    ArithmeticOverflowError,
    ArithmeticUnderflowError,
    DivideByZeroError,
    IndexOutOfRangeError,
)
from src.core.math.checked import INT256, UINT256_MAX
from src.core.math.sorting import partition_exchange_sort
from src.core.math.statistics import (
    integer_sqrt,
    maximum,
    mean,
    median,
    minimum,
    mode,
    sort,
    standard_deviation,
    variance,
)


# =============================================================================
# ЦЕНТРАЛЬНАЯ ТЕНДЕНЦИЯ
# =============================================================================


class TestMean:
    """Тесты для mean"""

    def test_simple_mean(self) -> None:
        assert mean([1, 2, 3, 4, 5]) == 3

    def test_truncated_mean(self) -> None:
        """(1 + 2) / 2 → 1"""
        assert mean([1, 2]) == 1

    def test_signed_mean_truncates_toward_zero(self) -> None:
        assert mean([-3, -4], INT256) == -3

    def test_empty_series(self) -> None:
        """Пустая серия → DivideByZeroError, а не 0"""
        with pytest.raises(DivideByZeroError, match="mean: series is empty"):
            mean([])

    def test_sum_overflow(self) -> None:
        with pytest.raises(ArithmeticOverflowError):
            mean([UINT256_MAX, 1])

    def test_negative_value_in_unsigned_domain(self) -> None:
        with pytest.raises(ArithmeticUnderflowError):
            mean([1, -2])


class TestMedian:
    """Тесты для median"""

    def test_odd_length(self) -> None:
        assert median([5, 1, 3]) == 3

    def test_even_length_averages_middle_pair(self) -> None:
        assert median([1, 2, 4, 5]) == 3

    def test_even_length_truncates(self) -> None:
        assert median([1, 2]) == 1

    def test_does_not_mutate_input(self) -> None:
        values = [5, 1, 3]
        median(values)
        assert values == [5, 1, 3]

    def test_empty_series(self) -> None:
        with pytest.raises(IndexOutOfRangeError):
            median([])


class TestMode:
    """Тесты для mode"""

    def test_single_mode(self) -> None:
        assert mode([1, 2, 2, 3, 4]) == 2

    def test_single_element(self) -> None:
        assert mode([5]) == 5

    def test_tie_first_to_reach_maximum_wins(self) -> None:
        """При равенстве побеждает значение, первым достигшее максимума"""
        assert mode([3, 3, 1, 1]) == 3
        assert mode([1, 2, 2, 1]) == 2

    def test_large_values(self) -> None:
        """Частоты не требуют плотного массива размером с домен"""
        assert mode([UINT256_MAX, 7, UINT256_MAX]) == UINT256_MAX

    def test_empty_series(self) -> None:
        with pytest.raises(IndexOutOfRangeError, match="mode: series is empty"):
            mode([])


class TestExtrema:
    """Тесты для minimum / maximum"""

    def test_minimum(self) -> None:
        assert minimum([4, 2, 9, 2]) == 2

    def test_maximum(self) -> None:
        assert maximum([4, 2, 9, 2]) == 9

    def test_empty_series(self) -> None:
        with pytest.raises(IndexOutOfRangeError):
            minimum([])
        with pytest.raises(IndexOutOfRangeError):
            maximum([])

    def test_empty_series_is_also_index_error(self) -> None:
        """IndexOutOfRangeError ловится как builtin IndexError"""
        with pytest.raises(IndexError):
            maximum([])


# =============================================================================
# РАЗБРОС
# =============================================================================


class TestDispersion:
    """Тесты для variance / standard_deviation"""

    def test_variance(self) -> None:
        assert variance([2, 4, 4, 4, 5, 5, 7, 9]) == 4

    def test_standard_deviation(self) -> None:
        assert standard_deviation([2, 4, 4, 4, 5, 5, 7, 9]) == 2

    def test_constant_series(self) -> None:
        assert variance([5, 5, 5]) == 0
        assert standard_deviation([5]) == 0

    def test_empty_series(self) -> None:
        with pytest.raises(DivideByZeroError):
            variance([])


# =============================================================================
# СОРТИРОВКА
# =============================================================================


class TestSort:
    """Тесты для sort / partition_exchange_sort"""

    def test_simple(self) -> None:
        assert sort([3, 1, 2]) == [1, 2, 3]

    def test_duplicates(self) -> None:
        assert sort([2, 1, 2, 1, 2]) == [1, 1, 2, 2, 2]

    def test_returns_new_list(self) -> None:
        values = [3, 1, 2]
        result = sort(values)
        assert values == [3, 1, 2]
        assert result is not values

    def test_idempotent(self) -> None:
        once = sort([9, 4, 7, 1, 8, 2])
        assert sort(once) == once

    def test_is_permutation(self) -> None:
        values = [5, 3, 9, 3, 0, 12, 7, 5]
        result = sort(values)
        assert sorted(values) == result

    def test_long_reverse_series(self) -> None:
        """Явный стек разделов справляется с длинной серией"""
        values = list(range(2000, 0, -1))
        assert sort(values) == list(range(1, 2001))

    def test_empty_and_single(self) -> None:
        assert sort([]) == []
        assert sort([7]) == [7]

    def test_swap_callback_moves_parallel_array(self) -> None:
        """swap-callback переставляет параллельный массив синхронно"""
        keys = [3, 1, 2]
        tags = ["c", "a", "b"]

        def swap(i: int, j: int) -> None:
            keys[i], keys[j] = keys[j], keys[i]
            tags[i], tags[j] = tags[j], tags[i]

        partition_exchange_sort(keys, swap)
        assert keys == [1, 2, 3]
        assert tags == ["a", "b", "c"]


# =============================================================================
# КОРЕНЬ
# =============================================================================


class TestIntegerSqrt:
    """Тесты для integer_sqrt"""

    def test_perfect_squares(self) -> None:
        assert integer_sqrt(0) == 0
        assert integer_sqrt(1) == 1
        assert integer_sqrt(16) == 4
        assert integer_sqrt(10**36) == 10**18

    def test_floor_of_non_squares(self) -> None:
        assert integer_sqrt(2) == 1
        assert integer_sqrt(3) == 1
        assert integer_sqrt(15) == 3

    def test_floor_property(self) -> None:
        """r² <= x < (r + 1)² для всех малых x"""
        for x in range(0, 3000):
            r = integer_sqrt(x)
            assert r * r <= x < (r + 1) * (r + 1)

    def test_domain_maximum(self) -> None:
        """Начальное приближение не переполняет uint256"""
        assert integer_sqrt(UINT256_MAX) == 2**128 - 1

    def test_negative_input(self) -> None:
        with pytest.raises(ArithmeticUnderflowError):
            integer_sqrt(-1)
