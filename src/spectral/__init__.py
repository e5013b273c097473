"""Spectral transform — fixed-point radix-2 FFT and integer trigonometry."""

from .fft import (
    ComplexSequence,
    bit_reversal_permutation,
    bit_reverse,
    dominant_frequency_bin,
    fft,
    inverse_fft,
    is_power_of_two,
    power_spectrum,
)
from .trigonometry import (
    HALF_PI,
    PI,
    QUARTER_PI,
    TAYLOR_TERMS,
    TWO_PI,
    sin_cos,
    taylor_cos,
    taylor_sin,
)

__all__ = [
    # Trigonometry — Constants
    "PI",
    "TWO_PI",
    "HALF_PI",
    "QUARTER_PI",
    "TAYLOR_TERMS",
    # Trigonometry — Functions
    "sin_cos",
    "taylor_cos",
    "taylor_sin",
    # FFT
    "ComplexSequence",
    "bit_reversal_permutation",
    "bit_reverse",
    "dominant_frequency_bin",
    "fft",
    "inverse_fft",
    "is_power_of_two",
    "power_spectrum",
]
