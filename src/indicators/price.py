"""
Price indicators — Bollinger Bands и TWAP поверх статистик ядра

Масштаб: сырые целые в масштабе входных цен. Нижняя полоса Боллинджера
может быть отрицательной и возвращается в int256.
"""

from dataclasses import dataclass
from typing import Final, Sequence

from src.core.errors import InsufficientLengthError, LengthMismatchError, OutOfRangeError
from src.core.math.checked import (
    INT256,
    checked_add,
    checked_div,
    checked_mul,
    checked_sub,
    ensure_integer,
    ensure_series,
)
from src.core.math.statistics import standard_deviation
from src.indicators.moving_average import simple_moving_average

# Ширина полос в стандартных отклонениях по умолчанию
DEFAULT_BAND_WIDTH: Final[int] = 2


@dataclass(frozen=True)
class BollingerBands:
    """Параллельные серии middle / upper / lower, по одному значению на окно."""

    middle: tuple[int, ...]
    upper: tuple[int, ...]
    lower: tuple[int, ...]


def bollinger_bands(
    series: Sequence[int],
    window_size: int,
    width: int = DEFAULT_BAND_WIDTH,
) -> BollingerBands:
    """
    SMA ± width · σ для каждого полного окна.

    Raises:
        InsufficientLengthError: len(series) <= window_size
        OutOfRangeError: width < 0
    """
    ensure_integer(width, "width")
    if width < 0:
        raise OutOfRangeError(f"bollinger_bands: width must be non-negative, got {width}")

    values = ensure_series(series)
    middle = simple_moving_average(values, window_size)

    upper = []
    lower = []
    for start, center in enumerate(middle):
        spread = checked_mul(width, standard_deviation(values[start : start + window_size]))
        upper.append(checked_add(center, spread))
        lower.append(checked_sub(center, spread, INT256))

    return BollingerBands(middle=tuple(middle), upper=tuple(upper), lower=tuple(lower))


def time_weighted_average_price(prices: Sequence[int], timestamps: Sequence[int]) -> int:
    """
    TWAP: каждая цена взвешивается длительностью до следующей отметки.

        twap = Σ_{i<n-1} p[i] · (t[i+1] - t[i]) / (t[n-1] - t[0])

    Raises:
        LengthMismatchError: len(prices) != len(timestamps)
        InsufficientLengthError: Меньше двух точек
        ArithmeticUnderflowError: Отметки времени убывают
        DivideByZeroError: Нулевой общий интервал

    Examples:
        >>> time_weighted_average_price([100, 200], [0, 10])
        100
        >>> time_weighted_average_price([100, 200, 300], [0, 10, 40])
        175
    """
    price_values = ensure_series(prices, "prices")
    time_values = ensure_series(timestamps, "timestamps")
    if len(price_values) != len(time_values):
        raise LengthMismatchError(
            f"twap: {len(price_values)} prices but {len(time_values)} timestamps"
        )
    if len(price_values) < 2:
        raise InsufficientLengthError(
            f"twap: need at least 2 points, got {len(price_values)}"
        )

    weighted = 0
    for i in range(len(price_values) - 1):
        duration = checked_sub(time_values[i + 1], time_values[i])
        weighted = checked_add(weighted, checked_mul(price_values[i], duration))

    span = checked_sub(time_values[-1], time_values[0])
    return checked_div(weighted, span)
