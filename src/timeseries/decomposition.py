"""
Decomposition — разложение серии на trend / seasonal / residual

Аддитивная схема в целых числах (m = season_length):

- trend: центрированное скользящее среднее по окну [i - m//2, i - m//2 + m).
  На границе, где окно выходит за серию, среднее не определено: там trend
  продолжается ближайшим определённым значением
- seasonal: x - trend в центральной области; на границе seasonal = 0
- residual: x - trend - seasonal (в центральной области это 0,
  на границе это x - trend)

Инвариант для каждого индекса: trend[i] + seasonal[i] + residual[i] == x[i].

Сглаженный сезонный профиль (усечённое среднее seasonal по каждой фазе
i mod m) вычисляется отдельно через seasonal_profile.

Масштаб: сырые целые; seasonal и residual знаковые (int256).
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from src.core.errors import InsufficientLengthError, OutOfRangeError
from src.core.math.checked import INT256, checked_sub, ensure_integer, ensure_series
from src.core.math.statistics import mean

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecompositionResult:
    """Три параллельные серии той же длины, что и исходная."""

    trend: tuple[int, ...]
    seasonal: tuple[int, ...]
    residual: tuple[int, ...]
    # Центральная область [central_start, central_stop), где trend определён
    central_start: int
    central_stop: int

    def __len__(self) -> int:
        return len(self.trend)


def _check_season(length: int, season_length: int) -> None:
    ensure_integer(season_length, "season_length")
    if season_length < 1:
        raise OutOfRangeError(f"decompose: season_length must be >= 1, got {season_length}")
    if length < 2 * season_length:
        raise InsufficientLengthError(
            f"decompose: series length {length} must be at least 2 x season_length {season_length}"
        )


def centered_moving_average(series: Sequence[int], season_length: int) -> list[int]:
    """
    Центрированное скользящее среднее для индексов m//2 .. n - m + m//2.

    Returns:
        n - m + 1 значений; значение r относится к индексу r + m//2

    Raises:
        InsufficientLengthError: len(series) < 2 * season_length
    """
    values = ensure_series(series)
    _check_season(len(values), season_length)

    return [
        mean(values[start : start + season_length])
        for start in range(len(values) - season_length + 1)
    ]


def decompose(series: Sequence[int], season_length: int) -> DecompositionResult:
    """
    Аддитивное разложение серии.

    Raises:
        InsufficientLengthError: len(series) < 2 * season_length
        OutOfRangeError: season_length < 1

    Examples:
        >>> result = decompose([1, 2, 3, 10, 5, 6], 2)
        >>> result.trend
        (1, 1, 2, 6, 7, 5)
        >>> result.seasonal
        (0, 1, 1, 4, -2, 1)
    """
    values = ensure_series(series)
    averages = centered_moving_average(values, season_length)

    n = len(values)
    central_start = season_length // 2
    central_stop = central_start + len(averages)

    trend = [averages[0]] * central_start + averages + [averages[-1]] * (n - central_stop)
    detrended = [checked_sub(x, t, INT256) for x, t in zip(values, trend)]

    seasonal = [
        detrended[i] if central_start <= i < central_stop else 0
        for i in range(n)
    ]
    residual = [checked_sub(d, s, INT256) for d, s in zip(detrended, seasonal)]

    logger.debug(
        "Decomposed %d points, season_length=%d, central region [%d, %d)",
        n,
        season_length,
        central_start,
        central_stop,
    )
    return DecompositionResult(
        trend=tuple(trend),
        seasonal=tuple(seasonal),
        residual=tuple(residual),
        central_start=central_start,
        central_stop=central_stop,
    )


def seasonal_profile(result: DecompositionResult, season_length: int) -> list[int]:
    """
    Усечённое среднее seasonal по каждой фазе p = i mod m центральной области.

    Returns:
        m значений (int256); значение p — средний сезонный эффект фазы p

    Raises:
        OutOfRangeError: season_length < 1

    Examples:
        >>> seasonal_profile(decompose([1, 3, 1, 3, 1, 3], 2), 2)
        [-1, 1]
    """
    ensure_integer(season_length, "season_length")
    if season_length < 1:
        raise OutOfRangeError(
            f"seasonal_profile: season_length must be >= 1, got {season_length}"
        )

    phases: list[list[int]] = [[] for _ in range(season_length)]
    for i in range(result.central_start, result.central_stop):
        phases[i % season_length].append(result.seasonal[i])
    return [mean(group, INT256) for group in phases]
