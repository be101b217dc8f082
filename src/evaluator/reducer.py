"""Reducer — свёртка последовательностей операндов и операторов.

Порядок разрешения фиксирован (от высшего к низшему):
    ! > r > ^ > % > / > * > - > +

Внутри одного класса первым разрешается ПОСЛЕДНЕЕ (самое правое)
вхождение, поэтому "10-3-2" = 10-(3-2) = 9, а "2^3^2" = 2^9 = 512.
"""

import logging
from typing import Callable, Dict, Final, Optional, Sequence

from src.core.domain.operators import RESOLUTION_ORDER, OperatorClass
from src.core.math import primitives
from src.core.math.errors import ParseError

logger = logging.getLogger(__name__)

BINARY_FUNCTIONS: Final[Dict[OperatorClass, Callable[[float, float], float]]] = {
    OperatorClass.ROOT: primitives.root,
    OperatorClass.POWER: primitives.power,
    OperatorClass.MODULO: primitives.modulo,
    OperatorClass.DIVIDE: primitives.div,
    OperatorClass.MULTIPLY: primitives.mul,
    OperatorClass.SUBTRACT: primitives.sub,
    OperatorClass.ADD: primitives.add,
}

UNARY_FUNCTIONS: Final[Dict[OperatorClass, Callable[[float], float]]] = {
    OperatorClass.FACTORIAL: primitives.fact,
}


def apply_operator(
    operator: OperatorClass, left: float, right: Optional[float] = None
) -> float:
    """
    Применение одного оператора к операндам.

    Ошибки примитивов пропагируют без обёртки.
    """
    if operator.is_unary:
        return UNARY_FUNCTIONS[operator](left)

    if right is None:
        raise ParseError(f"Operator {operator.value!r} requires a right operand")

    return BINARY_FUNCTIONS[operator](left, right)


def _last_index(operators: Sequence[OperatorClass], target: OperatorClass) -> int:
    for position in range(len(operators) - 1, -1, -1):
        if operators[position] is target:
            return position
    raise ValueError(f"{target.value!r} not in operator sequence")


def _operand_index(operators: Sequence[OperatorClass], position: int) -> int:
    # "!" не занимает промежуток между операндами
    return position - sum(1 for op in operators[:position] if op.is_unary)


def reduce_expression(
    operands: Sequence[float],
    operators: Sequence[OperatorClass],
    resolution_order: Sequence[OperatorClass] = RESOLUTION_ORDER,
) -> float:
    """
    Полная свёртка выражения до одного значения.

    Args:
        operands: Операнды в порядке появления
        operators: Операторы в порядке появления
        resolution_order: Порядок классов операторов (от высшего приоритета)

    Returns:
        Единственный оставшийся операнд

    Raises:
        ParseError: Если число операндов не согласовано с бинарными операторами
        CalculatorError: Любая ошибка примитива (без изменений)
    """
    operands = list(operands)
    operators = list(operators)

    binary_count = sum(1 for op in operators if not op.is_unary)
    if len(operands) != binary_count + 1:
        raise ParseError(
            f"Operand/operator mismatch: {len(operands)} operands "
            f"for {binary_count} binary operators"
        )

    for operator in resolution_order:
        while operator in operators:
            position = _last_index(operators, operator)
            index = _operand_index(operators, position)

            if operator.is_unary:
                operands[index] = apply_operator(operator, operands[index])
            else:
                operands[index] = apply_operator(operator, operands[index], operands[index + 1])
                del operands[index + 1]

            del operators[position]

            logger.debug(
                "Resolved %r at %d: operands=%s operators=%s",
                operator.value,
                position,
                operands,
                [op.value for op in operators],
            )

    if operators:
        raise ParseError(
            f"Unresolved operators {[op.value for op in operators]}: "
            f"not in resolution order"
        )

    return operands[0]
