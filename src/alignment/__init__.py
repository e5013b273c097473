"""Sequence alignment — dynamic time warping over integer series."""

from .dtw import UNREACHABLE_COST, build_cost_matrix, dtw_distance

__all__ = [
    "UNREACHABLE_COST",
    "build_cost_matrix",
    "dtw_distance",
]
