"""
Primitives — арифметические и элементарные функции калькулятора

Чистые функции без состояния: float на входе, float на выходе.
Каждая операция сама валидирует аргументы и поднимает ошибку из
src.core.math.errors в точке нарушения.

| Операция     | Ошибки                                                  |
|--------------|---------------------------------------------------------|
| add/sub/mul  | нет                                                     |
| div          | DivideByZero (b == 0)                                   |
| fact         | InvalidArgument (a < 0, нецелое), Overflow              |
| power        | InvalidArgument (b нецелое или b < 0)                   |
| root         | InvalidArgument (b не целое > 0, чётная b при a < 0)    |
| modulo       | DivideByZero (b == 0), InvalidArgument (нецелые a, b)   |

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нет глобального изменяемого состояния (безопасно из любых потоков)
2. "Целое" всегда проверяется через is_integer (допуск EPS_INTEGER)
3. root ограничен ROOT_MAX_ITERATIONS итерациями
"""

import math

from src.core.math.errors import DivideByZero, InvalidArgument, Overflow
from src.core.math.numerical_safeguards import (
    EPS_INTEGER,
    ROOT_MAX_ITERATIONS,
    has_converged,
    is_effectively_integer,
    is_valid_float,
    nearest_integer,
)

# =============================================================================
# БАЗОВАЯ АРИФМЕТИКА
# =============================================================================


def add(a: float, b: float) -> float:
    """Сложение."""
    return a + b


def sub(a: float, b: float) -> float:
    """Вычитание."""
    return a - b


def mul(a: float, b: float) -> float:
    """Умножение."""
    return a * b


def div(a: float, b: float) -> float:
    """
    Деление.

    Raises:
        DivideByZero: если b точно равен 0
    """
    if b == 0:
        raise DivideByZero(f"Division by zero: {a} / {b}")

    return a / b


# =============================================================================
# ПРОВЕРКА ЦЕЛОГО
# =============================================================================


def is_integer(a: float) -> bool:
    """
    Проверка "эффективно целого" значения.

    Общий шлюз для fact/power/root/modulo: принимает значения, которые
    математически целые, но несут шум float (например, 5.0000000000001
    после предыдущих делений).

    Args:
        a: Проверяемое значение

    Returns:
        True если a конечное и отстоит от ближайшего целого не более чем
        на EPS_INTEGER

    Examples:
        >>> is_integer(1e12)
        True
        >>> is_integer(1e12 + 0.0001)
        False
    """
    return is_effectively_integer(a, EPS_INTEGER)


# =============================================================================
# ФАКТОРИАЛ И СТЕПЕНЬ
# =============================================================================


def fact(a: float) -> float:
    """
    Факториал a! в double.

    Переполнение определяется по ходу накопления: после каждого умножения
    произведение проверяется на выход за конечный диапазон double. Первое
    переполнение наступает при a = 171.

    Args:
        a: Неотрицательное эффективно целое значение

    Returns:
        a! как float (0! = 1! = 1)

    Raises:
        InvalidArgument: если a < 0 или a не эффективно целое
        Overflow: если произведение превысило максимальный конечный double

    Examples:
        >>> fact(5)
        120.0
        >>> fact(0)
        1.0
    """
    if a < 0:
        raise InvalidArgument(f"Factorial not defined for negative numbers, got {a}")

    if not is_integer(a):
        raise InvalidArgument(f"Factorial requires integer value, got {a}")

    n = nearest_integer(a)
    result = 1.0

    for i in range(2, n + 1):
        result *= i

        if not is_valid_float(result):
            raise Overflow(f"Factorial overflow: {n}! exceeds double range (at {i}!)")

    return result


def power(a: float, b: float) -> float:
    """
    Целая неотрицательная степень a^b через повторное умножение.

    Библиотечное возведение в степень не используется: показатель
    ограничен неотрицательными целыми, отрицательные и дробные
    показатели отклоняются. Умножения выполняются по схеме
    square-and-multiply по битам показателя.

    Args:
        a: Основание
        b: Показатель (эффективно целое, >= 0)

    Returns:
        a^b; при b == 0 всегда 1.0 (включая 0^0)

    Raises:
        InvalidArgument: если b не эффективно целое или b < 0

    Examples:
        >>> power(5, 2)
        25.0
        >>> power(0, 0)
        1.0
    """
    if not is_integer(b):
        raise InvalidArgument(f"Power exponent must be an integer, got {b}")

    if b < 0:
        raise InvalidArgument(f"Power exponent must be non-negative, got {b}")

    exponent = nearest_integer(b)
    result = 1.0
    base = float(a)

    while exponent > 0:
        if exponent & 1:
            result *= base
        exponent >>= 1
        if exponent:
            base *= base

    return result


# =============================================================================
# КОРЕНЬ
# =============================================================================


def _root_start(a: float, degree: int) -> float:
    """Степень двойки со знаком a, не меньшая |a|^(1/degree) по модулю."""
    # |a| = m * 2^e, m in [0.5, 1)  =>  |a|^(1/degree) < 2^ceil(e/degree)
    _, exponent = math.frexp(a)
    return math.copysign(math.ldexp(1.0, -(-exponent // degree)), a)


def root(a: float, b: float) -> float:
    """
    Вещественный корень степени b из a методом Newton–Raphson.

    Итерация: x <- ((b - 1) * x + a / power(x, b - 1)) / b. Старт с
    ближайшей сверху степени двойки (_root_start): для выпуклой x^b
    приближения тогда монотонно убывают к корню при любом |a|, в том
    числе |a| < 1 и денормализованных a. Не более ROOT_MAX_ITERATIONS
    итераций; остановка, когда соседние приближения отличаются меньше
    чем на EPS_ROOT_CONVERGENCE относительно текущего.
    Использует power, поэтому степень корня тоже только целая.

    Args:
        a: Подкоренное выражение (a >= 0 для чётной степени)
        b: Степень корня (эффективно целое, > 0)

    Returns:
        Приближение корня; root(0, b) = 0.0

    Raises:
        InvalidArgument: если b не положительное целое, или b чётная и a < 0

    Examples:
        >>> abs(root(8, 3) - 2.0) < 1e-9
        True
        >>> abs(root(0.1, 50) - 0.954992586021436) < 1e-9
        True
    """
    if not is_integer(b) or b <= 0:
        raise InvalidArgument(f"Root degree must be a positive integer, got {b}")

    degree = nearest_integer(b)

    if degree % 2 == 0 and a < 0:
        raise InvalidArgument(f"Even root ({degree}) of negative number {a} is not real")

    if a == 0:
        return 0.0

    x = _root_start(a, degree)

    for _ in range(ROOT_MAX_ITERATIONS):
        x_next = ((degree - 1) * x + a / power(x, degree - 1)) / degree

        if has_converged(x, x_next):
            return x_next

        x = x_next

    return x


# =============================================================================
# MODULO
# =============================================================================


def modulo(a: float, b: float) -> float:
    """
    Математический (евклидов) остаток a mod b.

    Остаток усечённого деления приводится к диапазону [0, |b|):
    к отрицательному остатку прибавляется |b|.

    Args:
        a: Делимое (эффективно целое)
        b: Делитель (эффективно целое, != 0)

    Returns:
        Неотрицательный остаток как float

    Raises:
        DivideByZero: если b == 0
        InvalidArgument: если a или b не эффективно целые

    Examples:
        >>> modulo(10, 3)
        1.0
        >>> modulo(-10, 3)
        2.0
    """
    if b == 0:
        raise DivideByZero(f"Modulo by zero: {a} % {b}")

    if not is_integer(a) or not is_integer(b):
        raise InvalidArgument(f"Modulo requires integer operands, got {a} and {b}")

    dividend = nearest_integer(a)
    divisor = nearest_integer(b)

    # Усечённый остаток: знак делимого
    remainder = abs(dividend) % abs(divisor)
    if dividend < 0:
        remainder = -remainder

    if remainder < 0:
        remainder += abs(divisor)

    return float(remainder)
