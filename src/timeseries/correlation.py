"""
Autocorrelation & Partial Autocorrelation — корреляции в fixed-point

Отклонения от среднего вычисляются в знаковом домене int256, поэтому
отрицательная корреляция — это корректный результат, а не underflow.
Среднее — усечённое mean() ядра.

    acf(k) = Σ_{t=k}^{n-1} d[t]·d[t-k] · U / Σ_{t=0}^{n-1} d[t]²,  d = x - mean(x)

PACF вычисляется рекурсией Дурбина-Левинсона над acf(0..k); та же рекурсия
даёт коэффициенты Юла-Уокера для autoregression.

Масштаб: результаты корреляций — ScaledValue в FIXED_POINT_UNIT,
ожидаемый диапазон [-U, U]. autocovariance — сырая сумма произведений.
"""

import logging
from typing import Sequence

from src.core.domain.series import ScaledValue
from src.core.errors import DivideByZeroError, OutOfRangeError
from src.core.math.checked import (
    FIXED_POINT_UNIT,
    INT256,
    checked_dot,
    checked_sub,
    ensure_integer,
    ensure_series,
    fixed_mul,
    mul_div,
)
from src.core.math.statistics import mean
from src.timeseries.lags import lag

logger = logging.getLogger(__name__)


def deviations(series: Sequence[int]) -> list[int]:
    """Знаковые отклонения x[t] - mean(x)."""
    values = ensure_series(series)
    center = mean(values)
    return [checked_sub(value, center, INT256) for value in values]


def autocovariance(series: Sequence[int], k: int) -> int:
    """
    Σ d[t]·d[t-k] по t = k..n-1 (без нормировки на n).

    Raises:
        InsufficientLengthError: len(series) <= k
    """
    centered = deviations(series)
    lagged = lag(centered, k, INT256)
    return checked_dot(centered[k:], lagged)


def autocorrelation(series: Sequence[int], k: int) -> ScaledValue:
    """
    Автокорреляция с лагом k в масштабе U.

    Examples:
        >>> autocorrelation([1, 2, 3, 4], 0).value == FIXED_POINT_UNIT
        True

    Raises:
        InsufficientLengthError: len(series) <= k
        DivideByZeroError: Серия постоянна (нулевая дисперсия)
    """
    centered = deviations(series)
    numerator = checked_dot(centered[k:], lag(centered, k, INT256))
    denominator = checked_dot(centered, centered)
    if denominator == 0:
        raise DivideByZeroError("autocorrelation: series has zero variance")

    return ScaledValue(value=mul_div(numerator, FIXED_POINT_UNIT, denominator, INT256))


def autocorrelation_function(series: Sequence[int], max_lag: int) -> list[int]:
    """
    acf(0), acf(1), ..., acf(max_lag) как сырые целые масштаба U.

    Raises:
        InsufficientLengthError: len(series) <= max_lag
    """
    ensure_integer(max_lag, "max_lag")
    if max_lag < 0:
        raise OutOfRangeError(f"autocorrelation_function: max_lag must be non-negative, got {max_lag}")
    return [autocorrelation(series, k).value for k in range(max_lag + 1)]


def durbin_levinson(rho: Sequence[int], order: int) -> tuple[list[int], list[int]]:
    """
    Рекурсия Дурбина-Левинсона в fixed-point.

        φ[1][1] = ρ1
        φ[k][k] = (ρk - Σ φ[k-1][j]·ρ[k-j]) / (1 - Σ φ[k-1][j]·ρj)
        φ[k][j] = φ[k-1][j] - φ[k][k]·φ[k-1][k-j]

    Args:
        rho: acf(0..order) в масштабе U
        order: Порядок (>= 1)

    Returns:
        (pacf, phi): pacf[i] = φ[i+1][i+1]; phi — коэффициенты порядка order

    Raises:
        DivideByZeroError: Вырожденный знаменатель (|ρ| = 1 на промежуточном шаге)
    """
    phi = [rho[1]]
    pacf = [rho[1]]

    for k in range(2, order + 1):
        numerator = rho[k]
        denominator = FIXED_POINT_UNIT
        for j in range(1, k):
            numerator = checked_sub(numerator, fixed_mul(phi[j - 1], rho[k - j]), INT256)
            denominator = checked_sub(denominator, fixed_mul(phi[j - 1], rho[j]), INT256)
        if denominator == 0:
            raise DivideByZeroError(f"durbin_levinson: singular recursion at order {k}")

        phi_kk = mul_div(numerator, FIXED_POINT_UNIT, denominator, INT256)
        phi = [
            checked_sub(phi[j - 1], fixed_mul(phi_kk, phi[k - j - 1]), INT256)
            for j in range(1, k)
        ] + [phi_kk]
        pacf.append(phi_kk)

    return pacf, phi


def partial_autocorrelation(series: Sequence[int], k: int) -> ScaledValue:
    """
    Частная автокорреляция с лагом k в масштабе U.

    pacf(0) = U; pacf(1) совпадает с acf(1).

    Raises:
        InsufficientLengthError: len(series) <= k
        DivideByZeroError: Серия постоянна или рекурсия вырождена
    """
    rho = autocorrelation_function(series, k)
    if k == 0:
        return ScaledValue(value=rho[0])

    pacf, _ = durbin_levinson(rho, k)
    logger.debug("PACF lag=%d -> %d", k, pacf[-1])
    return ScaledValue(value=pacf[-1])
