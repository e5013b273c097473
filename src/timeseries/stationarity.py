"""
Stationarity — упрощённая эвристика в духе Dickey-Fuller

Регрессия лаговых разностей на лаговые уровни сводится к знаку
агрегированного перекрёстного члена:

    S = Σ_{t=k}^{n-1} (x[t] - x[t-k]) · (x[t-k] - mean(x[0..n-k-1]))

S < 0 означает возврат к среднему (уровень выше среднего сопровождается
падением) → серия объявляется стационарной.

ВНИМАНИЕ: это эвристика, а не калиброванный статистический тест:
нет критических значений, p-value и поправки на автокорреляцию ошибок.
"""

import logging
from typing import Sequence

from src.core.math.checked import INT256, checked_dot, checked_sub, ensure_series
from src.core.math.statistics import mean
from src.timeseries.lags import lag, signed_difference

logger = logging.getLogger(__name__)


def dickey_fuller_statistic(series: Sequence[int], k: int = 1) -> int:
    """
    Перекрёстный член S (int256, сырой масштаб²).

    Raises:
        InsufficientLengthError: len(series) <= k
    """
    values = ensure_series(series)
    levels = lag(values, k)
    differences = signed_difference(values, k)

    level_mean = mean(levels)
    centered_levels = [checked_sub(level, level_mean, INT256) for level in levels]
    return checked_dot(differences, centered_levels)


def stationarity_test(series: Sequence[int], k: int = 1) -> bool:
    """
    True если серия объявляется стационарной (S < 0).

    Examples:
        >>> stationarity_test([1, 5, 1, 5, 1, 5, 1, 5])
        True
        >>> stationarity_test([1, 2, 3, 4, 5, 6, 7, 8])
        False
    """
    statistic = dickey_fuller_statistic(series, k)
    logger.debug("Dickey-Fuller cross term lag=%d -> %d", k, statistic)
    return statistic < 0
