"""Indicators built on the fixed-point statistics kernel."""

from .moving_average import (
    ema_multiplier,
    exponential_moving_average,
    simple_moving_average,
    window_mean,
)
from .price import (
    DEFAULT_BAND_WIDTH,
    BollingerBands,
    bollinger_bands,
    time_weighted_average_price,
)

__all__ = [
    # Moving averages
    "ema_multiplier",
    "exponential_moving_average",
    "simple_moving_average",
    "window_mean",
    # Price indicators
    "DEFAULT_BAND_WIDTH",
    "BollingerBands",
    "bollinger_bands",
    "time_weighted_average_price",
]
