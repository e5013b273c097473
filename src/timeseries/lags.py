"""
Lag transforms

lag(series, k) возвращает первые len - k значений серии — это партнёр
series[k:] с лагом k: пара (series[k:][i], lag(series, k)[i]) = (x[t], x[t-k]).
Потребители (корреляции, stationarity) всегда сопоставляют результат
именно со срезом series[k:], а не сдвигают его повторно.
"""

from typing import Sequence

from src.core.errors import InsufficientLengthError, OutOfRangeError
from src.core.math.checked import (
    INT256,
    UINT256,
    IntegerDomain,
    abs_diff,
    checked_sub,
    ensure_integer,
    ensure_series,
)


def _check_lag(length: int, k: int, operation: str) -> None:
    ensure_integer(k, "lag")
    if k < 0:
        raise OutOfRangeError(f"{operation}: lag must be non-negative, got {k}")
    if length <= k:
        raise InsufficientLengthError(
            f"{operation}: series length {length} must exceed lag {k}"
        )


def lag(series: Sequence[int], k: int, domain: IntegerDomain = UINT256) -> list[int]:
    """
    Первые len - k значений серии.

    Examples:
        >>> lag([1, 2, 3, 4, 5], 2)
        [1, 2, 3]

    Raises:
        InsufficientLengthError: len(series) <= k
    """
    values = ensure_series(series, domain=domain)
    _check_lag(len(values), k, "lag")
    return values[: len(values) - k]


def lag_difference(series: Sequence[int], k: int) -> list[int]:
    """
    |x[t] - x[t-k]| для t = k..n-1.

    Examples:
        >>> lag_difference([1, 4, 2, 8], 1)
        [3, 2, 6]
    """
    values = ensure_series(series)
    lagged = lag(values, k)
    return [abs_diff(current, previous) for current, previous in zip(values[k:], lagged)]


def signed_difference(series: Sequence[int], k: int) -> list[int]:
    """
    x[t] - x[t-k] для t = k..n-1 в знаковом домене int256.

    Examples:
        >>> signed_difference([1, 4, 2, 8], 1)
        [3, -2, 6]
    """
    values = ensure_series(series, domain=INT256)
    lagged = lag(values, k, INT256)
    return [checked_sub(current, previous, INT256) for current, previous in zip(values[k:], lagged)]
