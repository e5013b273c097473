"""
Fixed-Point FFT — итеративный radix-2 Cooley–Tukey в целых числах

Алгоритм:
1. Bit-reversal перестановка: для каждого i вычисляется j = reverse(i, log2 n),
   пара (real, imag) меняется местами один раз при i < j
2. Стадии butterfly для len = 2, 4, ..., n с углом стадии θ = -2π/len;
   twiddle k стадии — sin_cos(θ·k)
3. v = x[b] · w; x[a] = u + v; x[b] = u - v; каждое произведение
   возвращается в исходный масштаб делением на U сразу после умножения

Масштаб: входные значения — произвольного (но одного) масштаба, выход —
в том же масштабе; twiddle-множители — в FIXED_POINT_UNIT.

Точность ограничена 4-членным рядом Тейлора и усечением в каждом умножении.
Это детерминированный компромисс: результат бит-в-бит воспроизводим.

Вход вызывающего кода не мутируется: преобразование выполняется "in place"
над валидированной копией и возвращается как ComplexSequence.
"""

import logging
from dataclasses import dataclass
from typing import Any, Sequence

from src.core.contracts.validators import validate_complex_sequence
from src.core.errors import (
    InsufficientLengthError,
    InvalidLengthError,
    LengthMismatchError,
)
from src.core.math.checked import (
    INT256,
    checked_add,
    checked_div,
    checked_mul,
    checked_sub,
    ensure_series,
    fixed_mul,
)
from src.spectral.trigonometry import TWO_PI, sin_cos

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComplexSequence:
    """Дискретный сигнал в частотной области: равные по длине real/imag."""

    real: tuple[int, ...]
    imag: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.real) != len(self.imag):
            raise LengthMismatchError(
                f"ComplexSequence: real has {len(self.real)} values, imag has {len(self.imag)}"
            )

    def __len__(self) -> int:
        return len(self.real)

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "ComplexSequence":
        """
        Построение из JSON payload (complex_sequence.json).

        Raises:
            jsonschema.ValidationError: Payload не соответствует контракту
            LengthMismatchError: len(real) != len(imag)
        """
        validate_complex_sequence(data)
        return cls(real=tuple(data["real"]), imag=tuple(data["imag"]))


# =============================================================================
# BIT REVERSAL
# =============================================================================


def is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def bit_reverse(index: int, bits: int) -> int:
    """
    Индекс с обратным порядком младших bits бит.

    Examples:
        >>> bit_reverse(1, 3)
        4
        >>> bit_reverse(6, 3)
        3
    """
    result = 0
    for _ in range(bits):
        result = (result << 1) | (index & 1)
        index >>= 1
    return result


def bit_reversal_permutation(real: list[int], imag: list[int]) -> None:
    """In-place bit-reversal перестановка пары массивов длины 2^k."""
    n = len(real)
    bits = n.bit_length() - 1
    for i in range(n):
        j = bit_reverse(i, bits)
        if i < j:
            real[i], real[j] = real[j], real[i]
            imag[i], imag[j] = imag[j], imag[i]


# =============================================================================
# TRANSFORM
# =============================================================================


def _validated_pair(real: Sequence[int], imag: Sequence[int]) -> tuple[list[int], list[int]]:
    re = ensure_series(real, "real", INT256)
    im = ensure_series(imag, "imag", INT256)
    if len(re) != len(im):
        raise LengthMismatchError(
            f"fft: real has {len(re)} values, imag has {len(im)}"
        )
    if not is_power_of_two(len(re)):
        raise InvalidLengthError(f"fft: length {len(re)} is not a power of two")
    return re, im


def _stage_twiddles(size: int, inverse: bool) -> list[tuple[int, int]]:
    """Twiddle-множители (cos, sin) для k = 0..size/2-1 стадии длины size."""
    direction = 1 if inverse else -1
    twiddles = []
    for k in range(size // 2):
        angle = checked_div(checked_mul(direction * TWO_PI, k, INT256), size, INT256)
        twiddles.append(sin_cos(angle))
    return twiddles


def _transform(real: Sequence[int], imag: Sequence[int], inverse: bool) -> ComplexSequence:
    re, im = _validated_pair(real, imag)
    n = len(re)

    bit_reversal_permutation(re, im)

    size = 2
    while size <= n:
        half = size // 2
        twiddles = _stage_twiddles(size, inverse)
        for start in range(0, n, size):
            for k in range(half):
                w_re, w_im = twiddles[k]
                a = start + k
                b = a + half

                v_re = checked_sub(fixed_mul(re[b], w_re), fixed_mul(im[b], w_im), INT256)
                v_im = checked_add(fixed_mul(re[b], w_im), fixed_mul(im[b], w_re), INT256)
                u_re, u_im = re[a], im[a]

                re[a] = checked_add(u_re, v_re, INT256)
                im[a] = checked_add(u_im, v_im, INT256)
                re[b] = checked_sub(u_re, v_re, INT256)
                im[b] = checked_sub(u_im, v_im, INT256)
        size *= 2

    if inverse:
        re = [checked_div(value, n, INT256) for value in re]
        im = [checked_div(value, n, INT256) for value in im]

    logger.debug("%s FFT over %d points", "Inverse" if inverse else "Forward", n)
    return ComplexSequence(real=tuple(re), imag=tuple(im))


def fft(real: Sequence[int], imag: Sequence[int]) -> ComplexSequence:
    """
    Прямое дискретное преобразование Фурье.

    Args:
        real: Действительная часть (int256), длина — степень двойки
        imag: Мнимая часть (int256), той же длины

    Returns:
        ComplexSequence в масштабе входа

    Raises:
        LengthMismatchError: len(real) != len(imag)
        InvalidLengthError: Длина не степень двойки (или 0)

    Examples:
        >>> spectrum = fft([1, 2, 3, 4], [0, 0, 0, 0])
        >>> spectrum.real, spectrum.imag
        ((10, -2, -2, -2), (0, 2, 0, -2))
    """
    return _transform(real, imag, inverse=False)


def inverse_fft(real: Sequence[int], imag: Sequence[int]) -> ComplexSequence:
    """
    Обратное преобразование: сопряжённые twiddle (θ = +2π/len) и деление на n
    с усечением к нулю.
    """
    return _transform(real, imag, inverse=True)


# =============================================================================
# SPECTRUM
# =============================================================================


def power_spectrum(series: Sequence[int]) -> list[int]:
    """
    Мощность каждого бина: re² + im² прямого FFT действительной серии.

    Масштаб: квадрат масштаба входа.
    """
    values = ensure_series(series, "series", INT256)
    spectrum = fft(values, [0] * len(values))
    return [
        checked_add(
            checked_mul(re, re, INT256), checked_mul(im, im, INT256), INT256
        )
        for re, im in zip(spectrum.real, spectrum.imag)
    ]


def dominant_frequency_bin(series: Sequence[int]) -> int:
    """
    Индекс бина с максимальной мощностью среди 1..n/2 (DC исключён).

    При равенстве мощностей выбирается наименьший бин.

    Raises:
        InsufficientLengthError: Серия короче 2 точек
    """
    if len(series) < 2:
        raise InsufficientLengthError(
            f"dominant_frequency_bin: need at least 2 points, got {len(series)}"
        )

    power = power_spectrum(series)
    best_bin = 1
    for index in range(2, len(power) // 2 + 1):
        if power[index] > power[best_bin]:
            best_bin = index
    return best_bin
