"""
Moving Averages — SMA по окну и EMA с fixed-point множителем

Масштаб:
- window_mean / simple_moving_average / exponential_moving_average:
  сырые целые в масштабе входа
- ema_multiplier: ScaledValue в FIXED_POINT_UNIT (2·U / (period + 1))
"""

from typing import Sequence

from src.core.domain.series import ScaledValue, Window
from src.core.errors import InsufficientLengthError, OutOfRangeError
from src.core.math.checked import (
    FIXED_POINT_UNIT,
    checked_add,
    checked_div,
    checked_mul,
    checked_sub,
    ensure_integer,
    ensure_series,
)
from src.core.math.statistics import mean


def _check_window_size(length: int, window_size: int, operation: str) -> None:
    ensure_integer(window_size, "window_size")
    if window_size < 1:
        raise OutOfRangeError(f"{operation}: window size must be >= 1, got {window_size}")
    if length <= window_size:
        raise InsufficientLengthError(
            f"{operation}: series length {length} must exceed window size {window_size}"
        )


def window_mean(series: Sequence[int], window: Window) -> int:
    """
    Среднее значений внутри окна.

    Raises:
        OutOfRangeError: Окно выходит за конец серии
    """
    values = ensure_series(series)
    start, stop = window.bounds(len(values))
    return mean(values[start:stop])


def simple_moving_average(series: Sequence[int], window_size: int) -> list[int]:
    """
    SMA для каждого полного окна: len(series) - window_size + 1 значений.

    Examples:
        >>> simple_moving_average([1, 2, 3, 4, 5], 2)
        [1, 2, 3, 4]

    Raises:
        InsufficientLengthError: len(series) <= window_size
    """
    values = ensure_series(series)
    _check_window_size(len(values), window_size, "simple_moving_average")

    return [
        window_mean(values, Window(start=start, size=window_size))
        for start in range(len(values) - window_size + 1)
    ]


def ema_multiplier(period: int) -> ScaledValue:
    """
    Сглаживающий множитель EMA: 2 / (period + 1) в масштабе U.

    Examples:
        >>> ema_multiplier(1).value == FIXED_POINT_UNIT
        True
    """
    ensure_integer(period, "period")
    if period < 1:
        raise OutOfRangeError(f"ema_multiplier: period must be >= 1, got {period}")
    return ScaledValue(value=checked_div(checked_mul(2, FIXED_POINT_UNIT), period + 1))


def exponential_moving_average(series: Sequence[int], period: int) -> list[int]:
    """
    EMA, засеянная SMA первых period значений.

        ema[t] = (x[t]·α + ema[t-1]·(U - α)) / U

    Returns:
        len(series) - period + 1 значений; первое относится к индексу period - 1

    Raises:
        InsufficientLengthError: len(series) <= period
    """
    values = ensure_series(series)
    _check_window_size(len(values), period, "exponential_moving_average")

    alpha = ema_multiplier(period).value
    complement = checked_sub(FIXED_POINT_UNIT, alpha)

    current = mean(values[:period])
    result = [current]
    for value in values[period:]:
        weighted = checked_add(checked_mul(value, alpha), checked_mul(current, complement))
        current = checked_div(weighted, FIXED_POINT_UNIT)
        result.append(current)
    return result
