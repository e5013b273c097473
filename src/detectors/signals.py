"""
Signal detectors — пороговые детекторы поверх статистик ядра

Детекторы:
- threshold_match: поэлементное совпадение с шаблоном с допуском
- volume_spike: последний объём выше baseline × порог
- outlier_indices: |x - mean| > width · σ
- moving_average_crossover: пересечение короткой и длинной SMA

Все пороги — целые: процентные множители задаются в процентах
(200 → ×2.00), ширина — в целых σ.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from src.core.errors import InsufficientLengthError, LengthMismatchError, OutOfRangeError
from src.core.math.checked import (
    abs_diff,
    checked_div,
    checked_mul,
    ensure_integer,
    ensure_series,
)
from src.core.math.statistics import mean, standard_deviation
from src.indicators.moving_average import simple_moving_average


# =============================================================================
# ENUMS
# =============================================================================


class Crossover(str, Enum):
    """Направление пересечения скользящих средних"""

    BULLISH = "bullish"
    BEARISH = "bearish"
    NONE = "none"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SpikeConfig:
    """Конфигурация детектора всплеска объёма."""

    # Количество предыдущих значений для baseline
    lookback: int = 20
    # Порог в процентах от baseline (300 → объём > 3× среднего)
    threshold_pct: int = 300


# =============================================================================
# DETECTORS
# =============================================================================


def threshold_match(series: Sequence[int], pattern: Sequence[int], tolerance: int = 0) -> bool:
    """
    True если |series[i] - pattern[i]| <= tolerance для всех i.

    tolerance = 0 — точное совпадение.

    Raises:
        LengthMismatchError: Длины серии и шаблона различаются
    """
    values = ensure_series(series)
    template = ensure_series(pattern, "pattern")
    ensure_integer(tolerance, "tolerance")
    if len(values) != len(template):
        raise LengthMismatchError(
            f"threshold_match: series has {len(values)} values, pattern has {len(template)}"
        )
    return all(abs_diff(x, p) <= tolerance for x, p in zip(values, template))


def volume_spike(volumes: Sequence[int], config: SpikeConfig = SpikeConfig()) -> bool:
    """
    Всплеск: последний объём > mean(предыдущие lookback) × threshold_pct / 100.

    Raises:
        InsufficientLengthError: len(volumes) <= lookback
    """
    values = ensure_series(volumes, "volumes")
    if config.lookback < 1:
        raise OutOfRangeError(f"volume_spike: lookback must be >= 1, got {config.lookback}")
    if len(values) <= config.lookback:
        raise InsufficientLengthError(
            f"volume_spike: {len(values)} volumes, need more than lookback {config.lookback}"
        )

    baseline = mean(values[-config.lookback - 1 : -1])
    threshold = checked_div(checked_mul(baseline, config.threshold_pct), 100)
    return values[-1] > threshold


def outlier_indices(series: Sequence[int], width: int = 3) -> list[int]:
    """
    Индексы значений дальше width · σ от среднего.

    Examples:
        >>> outlier_indices([10, 10, 10, 10, 10, 10, 10, 10, 10, 100], width=2)
        [9]
    """
    values = ensure_series(series)
    ensure_integer(width, "width")
    center = mean(values)
    limit = checked_mul(width, standard_deviation(values))
    return [i for i, value in enumerate(values) if abs_diff(value, center) > limit]


def moving_average_crossover(
    series: Sequence[int],
    short_window: int,
    long_window: int,
) -> Crossover:
    """
    Пересечение SMA(short) и SMA(long) на последнем шаге серии.

    Raises:
        OutOfRangeError: short_window >= long_window
        InsufficientLengthError: len(series) <= long_window
    """
    if short_window >= long_window:
        raise OutOfRangeError(
            f"moving_average_crossover: short window {short_window} must be shorter than {long_window}"
        )

    short_ma = simple_moving_average(series, short_window)
    long_ma = simple_moving_average(series, long_window)

    previous_above = short_ma[-2] > long_ma[-2]
    current_above = short_ma[-1] > long_ma[-1]
    if not previous_above and current_above:
        return Crossover.BULLISH
    if previous_above and not current_above:
        return Crossover.BEARISH
    return Crossover.NONE
