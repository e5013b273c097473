"""Nearest-neighbour classification over integer feature vectors."""

from .knn import (
    DEFAULT_LABEL_DOMAIN,
    classify,
    classify_training_set,
    manhattan_distance,
    sort_indices_by_distance,
)

__all__ = [
    "DEFAULT_LABEL_DOMAIN",
    "classify",
    "classify_training_set",
    "manhattan_distance",
    "sort_indices_by_distance",
]
