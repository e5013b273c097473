"""
Errors — Таксономия ошибок fixed-point ядра

Все операции ядра падают целиком (fail fast): никаких частичных результатов,
clamp-значений или sentinel-возвратов. Каждая ошибка несёт стабильный
машиночитаемый `code` и наследует соответствующий builtin Python, чтобы
generic-обработчики (`except ValueError`, `except OverflowError`) продолжали
работать.

Таксономия:
- InsufficientLengthError: вход короче окна/лага/порядка
- LengthMismatchError: парные входы разной длины
- DivideByZeroError: агрегат по пустой серии, нулевой знаменатель
- ArithmeticOverflowError / ArithmeticUnderflowError: выход за 256-битный домен
- InvalidLengthError: длина не степень двойки
- OutOfRangeError: параметр (k, индекс, метка) вне допустимого диапазона
- IndexOutOfRangeError: обращение к элементу пустой серии
"""

from typing import Final


class FixedPointError(Exception):
    """Базовая ошибка всех операций fixed-point ядра."""

    code: str = "fixed_point_error"


class InsufficientLengthError(FixedPointError, ValueError):
    """Серия короче, чем требует окно / лаг / порядок модели."""

    code = "insufficient_length"


class LengthMismatchError(FixedPointError, ValueError):
    """Поэлементно связанные входы имеют разную длину."""

    code = "length_mismatch"


class DivideByZeroError(FixedPointError, ZeroDivisionError):
    """Деление на ноль (включая mean/variance пустой серии)."""

    code = "divide_by_zero"


class ArithmeticOverflowError(FixedPointError, OverflowError):
    """Результат checked-операции выше максимума домена."""

    code = "arithmetic_overflow"


class ArithmeticUnderflowError(FixedPointError, ArithmeticError):
    """
    Результат checked-операции ниже минимума домена.

    Для беззнакового домена сюда попадает любое вычитание, уходящее в минус.
    """

    code = "arithmetic_underflow"


class InvalidLengthError(FixedPointError, ValueError):
    """Длина последовательности недопустима (например, не степень двойки)."""

    code = "invalid_length"


class OutOfRangeError(FixedPointError, ValueError):
    """Параметр или вычисленный из данных индекс вне допустимого диапазона."""

    code = "out_of_range"


class IndexOutOfRangeError(OutOfRangeError, IndexError):
    """Обращение к элементу, которого нет (min/max/median пустой серии)."""

    code = "index_out_of_range"


ERROR_CODES: Final[tuple[str, ...]] = (
    InsufficientLengthError.code,
    LengthMismatchError.code,
    DivideByZeroError.code,
    ArithmeticOverflowError.code,
    ArithmeticUnderflowError.code,
    InvalidLengthError.code,
    OutOfRangeError.code,
    IndexOutOfRangeError.code,
)
