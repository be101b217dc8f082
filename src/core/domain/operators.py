"""
Operators — классы операторов выражения

Каждый символ оператора соответствует ровно одной функции из
src.core.math.primitives. "!" унарный, остальные бинарные.
"""

from enum import Enum
from typing import Final


class OperatorClass(str, Enum):
    """
    Класс оператора выражения.

    Значение — символ оператора во входной строке.
    """

    FACTORIAL = "!"
    ROOT = "r"
    POWER = "^"
    MODULO = "%"
    DIVIDE = "/"
    MULTIPLY = "*"
    SUBTRACT = "-"
    ADD = "+"

    @property
    def arity(self) -> int:
        """Количество потребляемых операндов."""
        return 1 if self is OperatorClass.FACTORIAL else 2

    @property
    def is_unary(self) -> bool:
        return self.arity == 1


# Порядок разрешения: от высшего приоритета к низшему
RESOLUTION_ORDER: Final[tuple[OperatorClass, ...]] = (
    OperatorClass.FACTORIAL,
    OperatorClass.ROOT,
    OperatorClass.POWER,
    OperatorClass.MODULO,
    OperatorClass.DIVIDE,
    OperatorClass.MULTIPLY,
    OperatorClass.SUBTRACT,
    OperatorClass.ADD,
)

OPERATOR_SYMBOLS: Final[frozenset[str]] = frozenset(op.value for op in OperatorClass)

BINARY_OPERATORS: Final[frozenset[OperatorClass]] = frozenset(
    op for op in OperatorClass if not op.is_unary
)
