"""
Time-series analysis — lags, correlations, autoregression, stationarity,
decomposition.

Все операции — чистые функции над целочисленными сериями поверх
src.core.math.
"""

from .autoregression import autoregress, estimate_weights
from .correlation import (
    autocorrelation,
    autocorrelation_function,
    autocovariance,
    deviations,
    durbin_levinson,
    partial_autocorrelation,
)
from .decomposition import (
    DecompositionResult,
    centered_moving_average,
    decompose,
    seasonal_profile,
)
from .lags import lag, lag_difference, signed_difference
from .stationarity import dickey_fuller_statistic, stationarity_test

__all__ = [
    # Lags
    "lag",
    "lag_difference",
    "signed_difference",
    # Correlation
    "autocorrelation",
    "autocorrelation_function",
    "autocovariance",
    "deviations",
    "durbin_levinson",
    "partial_autocorrelation",
    # Autoregression
    "autoregress",
    "estimate_weights",
    # Stationarity
    "dickey_fuller_statistic",
    "stationarity_test",
    # Decomposition
    "DecompositionResult",
    "centered_moving_average",
    "decompose",
    "seasonal_profile",
]
