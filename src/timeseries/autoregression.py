"""
Autoregression — AR(p) прогноз по взвешенной сумме предыдущих значений

    x̂[t] = Σ_{j=1}^{p} w[j] · x[t-j] / U,   t = p..n-1

Веса — в масштабе FIXED_POINT_UNIT и задаются снаружи. Без весов все
прогнозы равны нулю: autoregress не подбирает модель. Оценка весов по
Юлу-Уокеру доступна отдельно через estimate_weights.
"""

import logging
from typing import Optional, Sequence

from src.core.errors import InsufficientLengthError, LengthMismatchError, OutOfRangeError
from src.core.math.checked import INT256, checked_add, ensure_integer, ensure_series, fixed_mul
from src.timeseries.correlation import autocorrelation_function, durbin_levinson

logger = logging.getLogger(__name__)


def _check_order(length: int, order: int, operation: str) -> None:
    ensure_integer(order, "order")
    if order < 1:
        raise OutOfRangeError(f"{operation}: order must be >= 1, got {order}")
    if length <= order:
        raise InsufficientLengthError(
            f"{operation}: series length {length} must exceed order {order}"
        )


def autoregress(
    series: Sequence[int],
    order: int,
    weights: Optional[Sequence[int]] = None,
) -> list[int]:
    """
    Прогнозы AR(order) для t = order..n-1.

    Args:
        series: Входная серия (uint256)
        order: Порядок модели p
        weights: p весов в масштабе U; w[0] относится к x[t-1]

    Returns:
        len(series) - order прогнозов (int256, масштаб входа)

    Raises:
        InsufficientLengthError: len(series) <= order
        LengthMismatchError: len(weights) != order

    Examples:
        >>> autoregress([1, 2, 3, 4], 1, [10**18])
        [1, 2, 3]
        >>> autoregress([1, 2, 3, 4], 2)
        [0, 0]
    """
    values = ensure_series(series)
    _check_order(len(values), order, "autoregress")

    if weights is None:
        logger.warning(
            "autoregress called without weights: all %d predictions are zero",
            len(values) - order,
        )
        coefficients = [0] * order
    else:
        coefficients = ensure_series(weights, "weights", INT256)
        if len(coefficients) != order:
            raise LengthMismatchError(
                f"autoregress: {len(coefficients)} weights for order {order}"
            )

    predictions = []
    for t in range(order, len(values)):
        prediction = 0
        for j, weight in enumerate(coefficients):
            prediction = checked_add(prediction, fixed_mul(weight, values[t - 1 - j]), INT256)
        predictions.append(prediction)
    return predictions


def estimate_weights(series: Sequence[int], order: int) -> list[int]:
    """
    Веса Юла-Уокера AR(order) из рекурсии Дурбина-Левинсона (масштаб U).

    Raises:
        InsufficientLengthError: len(series) <= order
        DivideByZeroError: Серия постоянна
    """
    values = ensure_series(series)
    _check_order(len(values), order, "estimate_weights")

    rho = autocorrelation_function(values, order)
    _, phi = durbin_levinson(rho, order)
    logger.debug("Yule-Walker AR(%d) weights=%s", order, phi)
    return phi
