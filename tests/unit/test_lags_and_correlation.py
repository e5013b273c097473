"""
Тесты для Lag transforms и Autocorrelation / Partial Autocorrelation

Проверяет:
1. lag возвращает первые len - k значений (партнёр series[k:])
2. lag_difference / signed_difference
3. autocovariance и autocorrelation в масштабе U
4. Отрицательную корреляцию без underflow
5. PACF: pacf(1) == acf(1), рекурсия Дурбина-Левинсона на lag 2
6. Ошибки: недостаточная длина, постоянная серия
"""

import pytest

from src.core.domain import ScaledValue
from src.core.errors import DivideByZeroError, InsufficientLengthError, OutOfRangeError
from src.core.math.checked import FIXED_POINT_UNIT
from src.timeseries import (
    autocorrelation,
    autocorrelation_function,
    autocovariance,
    deviations,
    lag,
    lag_difference,
    partial_autocorrelation,
    signed_difference,
)

U = FIXED_POINT_UNIT


# =============================================================================
# LAGS
# =============================================================================


class TestLag:
    """Тесты для lag"""

    def test_first_values(self) -> None:
        assert lag([1, 2, 3, 4, 5], 2) == [1, 2, 3]

    def test_zero_lag_is_copy(self) -> None:
        values = [4, 5, 6]
        result = lag(values, 0)
        assert result == values
        assert result is not values

    def test_pairs_with_tail_slice(self) -> None:
        """(series[k:][i], lag(series, k)[i]) == (x[t], x[t-k])"""
        series = [10, 20, 30, 40, 50]
        k = 2
        for i, (current, previous) in enumerate(zip(series[k:], lag(series, k))):
            assert current == series[i + k]
            assert previous == series[i]

    def test_lag_equal_to_length(self) -> None:
        with pytest.raises(InsufficientLengthError, match="must exceed lag"):
            lag([1, 2, 3], 3)

    def test_negative_lag(self) -> None:
        with pytest.raises(OutOfRangeError):
            lag([1, 2, 3], -1)


class TestDifferences:
    """Тесты для lag_difference / signed_difference"""

    def test_lag_difference(self) -> None:
        assert lag_difference([1, 4, 2, 8], 1) == [3, 2, 6]

    def test_lag_difference_two(self) -> None:
        assert lag_difference([1, 4, 2, 8], 2) == [1, 4]

    def test_signed_difference_keeps_sign(self) -> None:
        assert signed_difference([1, 4, 2, 8], 1) == [3, -2, 6]

    def test_difference_too_short(self) -> None:
        with pytest.raises(InsufficientLengthError):
            lag_difference([1], 1)


# =============================================================================
# AUTOCORRELATION
# =============================================================================


class TestAutocovariance:
    """Тесты для deviations / autocovariance"""

    def test_deviations_are_signed(self) -> None:
        assert deviations([1, 2, 3, 4, 5]) == [-2, -1, 0, 1, 2]

    def test_autocovariance(self) -> None:
        assert autocovariance([1, 2, 3, 4, 5], 1) == 4

    def test_lag_zero_is_sum_of_squares(self) -> None:
        assert autocovariance([1, 2, 3, 4, 5], 0) == 10


class TestAutocorrelation:
    """Тесты для autocorrelation / autocorrelation_function"""

    def test_lag_zero_is_unit(self) -> None:
        result = autocorrelation([1, 2, 3, 4], 0)
        assert isinstance(result, ScaledValue)
        assert result.value == U
        assert result.scale == U

    def test_trend_lag_one(self) -> None:
        """Σ d[t]·d[t-1] = 4, Σ d² = 10 → 0.4"""
        assert autocorrelation([1, 2, 3, 4, 5], 1).value == 4 * 10**17

    def test_alternating_series_is_negative(self) -> None:
        """Знаковые отклонения: -5/6 вместо underflow"""
        assert autocorrelation([1, 3, 1, 3, 1, 3], 1).value == -833333333333333333

    def test_values_within_unit_range(self) -> None:
        series = [5, 1, 4, 2, 8, 3]
        for value in autocorrelation_function(series, 5):
            assert -U <= value <= U

    def test_function(self) -> None:
        assert autocorrelation_function([1, 2, 3, 4, 5], 2) == [U, 4 * 10**17, -(10**17)]

    def test_function_negative_max_lag(self) -> None:
        with pytest.raises(OutOfRangeError):
            autocorrelation_function([1, 2, 3], -1)

    def test_constant_series(self) -> None:
        with pytest.raises(DivideByZeroError, match="zero variance"):
            autocorrelation([7, 7, 7, 7], 1)

    def test_lag_too_large(self) -> None:
        with pytest.raises(InsufficientLengthError):
            autocorrelation([1, 2, 3], 3)


class TestPartialAutocorrelation:
    """Тесты для partial_autocorrelation"""

    def test_lag_zero_is_unit(self) -> None:
        assert partial_autocorrelation([1, 2, 3, 4], 0).value == U

    def test_lag_one_equals_acf(self) -> None:
        series = [5, 1, 4, 2, 8, 3, 6]
        assert partial_autocorrelation(series, 1) == autocorrelation(series, 1)

    def test_lag_two(self) -> None:
        """φ22 = (ρ2 - ρ1²) / (1 - ρ1²) = (-0.1 - 0.16) / 0.84"""
        assert partial_autocorrelation([1, 2, 3, 4, 5], 2).value == -309523809523809523

    def test_constant_series(self) -> None:
        with pytest.raises(DivideByZeroError):
            partial_autocorrelation([2, 2, 2, 2], 2)
