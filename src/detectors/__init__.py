"""Detectors — пороговые и сравнивающие детекторы сигналов."""

from .signals import (
    Crossover,
    SpikeConfig,
    moving_average_crossover,
    outlier_indices,
    threshold_match,
    volume_spike,
)

__all__ = [
    "Crossover",
    "SpikeConfig",
    "moving_average_crossover",
    "outlier_indices",
    "threshold_match",
    "volume_spike",
]
