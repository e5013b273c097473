"""
Fixed-Point Trigonometry — синус и косинус рядом Тейлора в целых числах

Масштаб: углы и результаты — в FIXED_POINT_UNIT (10**18), т.е. целое v
представляет v / 10**18 радиан (или значение функции).

Ряды (по 4 члена каждый, порядок усечения фиксирован):
    cos x = 1 - x²/2! + x⁴/4! - x⁶/6!
    sin x = x - x³/3! + x⁵/5! - x⁷/7!

Каждая степень x вычисляется умножением предыдущей на x² (или x) с
немедленным возвратом в масштаб U через mul_div — масштаб не накапливается.

taylor_cos/taylor_sin — прямое вычисление ряда (точность резко падает при
|x| > π/4: taylor_cos(π) ≈ -1.21). sin_cos — замена повышенной точности:
сначала симметриями сводит угол в [0, π/4], затем использует те же ряды.
"""

from typing import Final

from src.core.math.checked import (
    FIXED_POINT_UNIT,
    INT256,
    checked_add,
    checked_div,
    checked_sub,
    ensure_in_domain,
    fixed_mul,
)

# =============================================================================
# КОНСТАНТЫ (масштаб 10**18, усечены)
# =============================================================================

PI: Final[int] = 3_141592653589793238
TWO_PI: Final[int] = 6_283185307179586476
HALF_PI: Final[int] = 1_570796326794896619
QUARTER_PI: Final[int] = 785398163397448309

# Количество членов ряда Тейлора для sin и cos
TAYLOR_TERMS: Final[int] = 4


# =============================================================================
# РЯДЫ ТЕЙЛОРА
# =============================================================================


def taylor_cos(theta: int) -> int:
    """
    cos(theta) четырьмя членами ряда Тейлора без приведения угла.

    Examples:
        >>> taylor_cos(0) == FIXED_POINT_UNIT
        True
    """
    x = ensure_in_domain(theta, "theta", INT256)
    x2 = fixed_mul(x, x)
    x4 = fixed_mul(x2, x2)
    x6 = fixed_mul(x4, x2)

    result = checked_sub(FIXED_POINT_UNIT, checked_div(x2, 2, INT256), INT256)
    result = checked_add(result, checked_div(x4, 24, INT256), INT256)
    return checked_sub(result, checked_div(x6, 720, INT256), INT256)


def taylor_sin(theta: int) -> int:
    """
    sin(theta) четырьмя членами ряда Тейлора без приведения угла.

    Examples:
        >>> taylor_sin(0)
        0
    """
    x = ensure_in_domain(theta, "theta", INT256)
    x2 = fixed_mul(x, x)
    x3 = fixed_mul(x2, x)
    x5 = fixed_mul(x3, x2)
    x7 = fixed_mul(x5, x2)

    result = checked_sub(x, checked_div(x3, 6, INT256), INT256)
    result = checked_add(result, checked_div(x5, 120, INT256), INT256)
    return checked_sub(result, checked_div(x7, 5040, INT256), INT256)


# =============================================================================
# ПРИВЕДЕНИЕ УГЛА
# =============================================================================


def sin_cos(theta: int) -> tuple[int, int]:
    """
    (cos(theta), sin(theta)) с приведением угла в [0, π/4].

    Шаги приведения (все в целых числах):
    1. t = theta mod 2π ∈ [0, 2π)
    2. t ≥ π: t -= π, оба знака инвертируются
    3. t > π/2: t = π - t, инвертируется знак cos
    4. t > π/4: cos и sin меняются местами относительно π/2 - t

    Returns:
        (cos, sin) в масштабе U

    Examples:
        >>> sin_cos(HALF_PI) == (0, FIXED_POINT_UNIT)
        True
        >>> sin_cos(-PI) == (-FIXED_POINT_UNIT, 0)
        True
    """
    t = ensure_in_domain(theta, "theta", INT256) % TWO_PI
    cos_sign = 1
    sin_sign = 1

    if t >= PI:
        t -= PI
        cos_sign = -cos_sign
        sin_sign = -sin_sign

    if t > HALF_PI:
        t = PI - t
        cos_sign = -cos_sign

    if t > QUARTER_PI:
        complement = HALF_PI - t
        cos_value = taylor_sin(complement)
        sin_value = taylor_cos(complement)
    else:
        cos_value = taylor_cos(t)
        sin_value = taylor_sin(t)

    return cos_sign * cos_value, sin_sign * sin_value
