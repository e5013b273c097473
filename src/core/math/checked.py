"""
Checked Arithmetic — 256-битная целочисленная арифметика с контролем переполнения

Модуль обеспечивает детерминированную арифметику для всех вычислений ядра:
- Явный домен значений (uint256 / int256) вместо wraparound Python int
- Checked add/sub/mul: выход за домен → ArithmeticOverflowError / ArithmeticUnderflowError
- Деление с усечением к нулю (не floor division Python)
- Fixed-point масштаб FIXED_POINT_UNIT = 10**18

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна операция не возвращает значение вне домена (ошибка вместо wraparound)
2. Деление всегда усекается к нулю: -7 / 2 == -3
3. Вычитание в беззнаковом домене, уходящее в минус, — это underflow
4. Все операции детерминированы и воспроизводимы (никаких float)
"""

from dataclasses import dataclass
from typing import Final, Iterable, Sequence

from src.core.errors import (
    ArithmeticOverflowError,
    ArithmeticUnderflowError,
    DivideByZeroError,
)

# =============================================================================
# ДОМЕН И МАСШТАБ
# =============================================================================

# Ширина слова (бит)
WORD_BITS: Final[int] = 256

UINT256_MAX: Final[int] = 2**WORD_BITS - 1
INT256_MIN: Final[int] = -(2 ** (WORD_BITS - 1))
INT256_MAX: Final[int] = 2 ** (WORD_BITS - 1) - 1

# Fixed-point единица: целое v представляет вещественное v / 10**18.
# Используется тригонометрией FFT, EMA multiplier и корреляциями.
FIXED_POINT_UNIT: Final[int] = 10**18


@dataclass(frozen=True)
class IntegerDomain:
    """Замкнутый диапазон допустимых целых значений [min_value, max_value]."""

    name: str
    min_value: int
    max_value: int

    @property
    def signed(self) -> bool:
        return self.min_value < 0

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def check(self, value: int, operation: str) -> int:
        """
        Проверка результата операции на принадлежность домену.

        Args:
            value: Результат операции (Python int произвольной точности)
            operation: Имя операции для сообщения об ошибке

        Returns:
            value без изменений

        Raises:
            ArithmeticOverflowError: value > max_value
            ArithmeticUnderflowError: value < min_value
        """
        if value > self.max_value:
            raise ArithmeticOverflowError(
                f"{operation}: result exceeds {self.name} maximum"
            )
        if value < self.min_value:
            raise ArithmeticUnderflowError(
                f"{operation}: result below {self.name} minimum ({value} < {self.min_value})"
            )
        return value


UINT256: Final[IntegerDomain] = IntegerDomain("uint256", 0, UINT256_MAX)
INT256: Final[IntegerDomain] = IntegerDomain("int256", INT256_MIN, INT256_MAX)


# =============================================================================
# ВАЛИДАЦИЯ ВХОДОВ
# =============================================================================


def ensure_integer(value: object, name: str) -> int:
    """
    Проверка, что значение — целое число (bool и float запрещены).

    Raises:
        TypeError: Если значение не int
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return value


def ensure_in_domain(value: object, name: str, domain: IntegerDomain = UINT256) -> int:
    """Проверка типа и принадлежности значения домену."""
    return domain.check(ensure_integer(value, name), f"{name}")


def ensure_series(
    values: Iterable[int],
    name: str = "series",
    domain: IntegerDomain = UINT256,
) -> list[int]:
    """
    Валидация серии: каждый элемент — int внутри домена.

    Args:
        values: Исходная последовательность
        name: Имя параметра (для сообщения об ошибке)
        domain: Домен значений (default: uint256)

    Returns:
        Новый список (копия) — вызывающий код никогда не видит мутаций

    Raises:
        TypeError: Если элемент не int
        ArithmeticOverflowError / ArithmeticUnderflowError: Элемент вне домена
    """
    return [ensure_in_domain(v, f"{name}[{i}]", domain) for i, v in enumerate(values)]


# =============================================================================
# CHECKED ОПЕРАЦИИ
# =============================================================================


def checked_add(a: int, b: int, domain: IntegerDomain = UINT256) -> int:
    """Сложение с проверкой домена."""
    return domain.check(a + b, "add")


def checked_sub(a: int, b: int, domain: IntegerDomain = UINT256) -> int:
    """
    Вычитание с проверкой домена.

    Examples:
        >>> checked_sub(5, 3)
        2
        >>> checked_sub(3, 5, INT256)
        -2
        >>> checked_sub(3, 5)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ArithmeticUnderflowError: sub: result below uint256 minimum (-2 < 0)
    """
    return domain.check(a - b, "sub")


def checked_mul(a: int, b: int, domain: IntegerDomain = UINT256) -> int:
    """Умножение с проверкой домена."""
    return domain.check(a * b, "mul")


def checked_div(a: int, b: int, domain: IntegerDomain = UINT256) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Python `//` округляет к минус бесконечности; здесь знак восстанавливается
    после деления модулей, как в checked-рантайме с truncating division.

    Examples:
        >>> checked_div(7, 2)
        3
        >>> checked_div(-7, 2, INT256)
        -3

    Raises:
        DivideByZeroError: b == 0
        ArithmeticOverflowError: INT256_MIN / -1
    """
    if b == 0:
        raise DivideByZeroError("div: division by zero")

    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient

    return domain.check(quotient, "div")


def mul_div(a: int, b: int, denominator: int, domain: IntegerDomain = UINT256) -> int:
    """
    (a * b) / denominator с проверкой промежуточного произведения.

    Основной примитив fixed-point: умножение двух значений в масштабе U
    и возврат результата в тот же масштаб через mul_div(a, b, U).
    """
    return checked_div(checked_mul(a, b, domain), denominator, domain)


def fixed_mul(a: int, b: int) -> int:
    """Произведение двух значений масштаба U, возвращённое в масштаб U (int256)."""
    return mul_div(a, b, FIXED_POINT_UNIT, INT256)


def abs_diff(a: int, b: int) -> int:
    """|a - b| — беззнаковая величина разности, никогда не уходит в underflow."""
    return a - b if a >= b else b - a


def checked_sum(values: Iterable[int], domain: IntegerDomain = UINT256) -> int:
    """Сумма с проверкой домена на каждом шаге аккумуляции."""
    total = 0
    for value in values:
        total = checked_add(total, value, domain)
    return total


def checked_dot(
    left: Sequence[int],
    right: Sequence[int],
    domain: IntegerDomain = INT256,
) -> int:
    """Скалярное произведение двух последовательностей равной длины."""
    total = 0
    for a, b in zip(left, right):
        total = checked_add(total, checked_mul(a, b, domain), domain)
    return total
