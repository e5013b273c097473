"""
Domain models and value objects.

Contains the value objects shared by the analysis layers: Window, ScaledValue,
Series, TrainingSet and TransitionMatrix.
"""

from src.core.domain.series import (
    Int256,
    ScaledValue,
    Series,
    TrainingExample,
    TrainingSet,
    UInt256,
    Window,
)
from src.core.domain.transitions import TransitionMatrix, is_valid_sequence

__all__ = [
    # Series value objects
    "Int256",
    "UInt256",
    "Window",
    "ScaledValue",
    "Series",
    "TrainingExample",
    "TrainingSet",
    # Transitions
    "TransitionMatrix",
    "is_valid_sequence",
]
