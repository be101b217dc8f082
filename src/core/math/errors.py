"""
Calculator Errors — таксономия ошибок вычислений

Каждая ошибка поднимается в точке нарушения и пропагирует без изменений
через вычислитель выражений к вызывающей стороне. Повторов, clamp-а и
частичных результатов нет.

Ошибки дополнительно наследуют встроенные исключения Python
(ValueError, ZeroDivisionError, OverflowError), чтобы вызывающий код,
знающий только builtin-типы, тоже мог их перехватить.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Вид ошибки вычисления."""

    DIVIDE_BY_ZERO = "DIVIDE_BY_ZERO"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    OVERFLOW = "OVERFLOW"
    PARSE_ERROR = "PARSE_ERROR"


class CalculatorError(Exception):
    """Базовый класс всех ошибок ядра калькулятора."""

    kind: ErrorKind


class DivideByZero(CalculatorError, ZeroDivisionError):
    """Делитель точно равен нулю (div, modulo)."""

    kind = ErrorKind.DIVIDE_BY_ZERO


class InvalidArgument(CalculatorError, ValueError):
    """
    Нарушение области определения.

    - Отрицательный или нецелый аргумент факториала
    - Отрицательный или нецелый показатель степени
    - Неположительная или нецелая степень корня
    - Корень чётной степени из отрицательного числа
    - Нецелые операнды modulo
    """

    kind = ErrorKind.INVALID_ARGUMENT


class Overflow(CalculatorError, OverflowError):
    """Результат вышел за пределы конечного диапазона double."""

    kind = ErrorKind.OVERFLOW


class ParseError(CalculatorError, ValueError):
    """Некорректный числовой токен при разборе выражения."""

    kind = ErrorKind.PARSE_ERROR
