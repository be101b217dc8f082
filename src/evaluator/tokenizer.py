"""Tokenizer — разбор плоской строки выражения на операнды и операторы.

Правила разбора:
- Символ из "+-*/%^r!" является границей оператора
- "-" в начале выражения или сразу после оператора (кроме "!") — знак
  следующего числа, а не вычитание
- "!" не потребляет правый операнд: следующий символ обязан быть
  оператором, следующий операнд начинается после него
- Токен, содержащий "pi", заменяется на π, иначе содержащий "e" — на e
  (поиск подстроки, поэтому "1e5" тоже читается как e); ведущий минус
  сохраняется
"""

import logging
import math
import re
from dataclasses import dataclass, field
from typing import List

from src.core.domain.operators import OPERATOR_SYMBOLS, OperatorClass
from src.core.math.errors import ParseError

logger = logging.getLogger(__name__)

NUMBER_PATTERN = re.compile(r"^-?(\d+\.?\d*|\.\d+)$")


@dataclass
class TokenizedExpression:
    """Параллельные рабочие последовательности одного выражения."""

    operands: List[float] = field(default_factory=list)
    operators: List[OperatorClass] = field(default_factory=list)


def parse_operand(token: str, pi_value: float = math.pi, e_value: float = math.e) -> float:
    """
    Разбор одного операнда с подстановкой констант.

    Args:
        token: Подстрока между операторами (может начинаться с "-")
        pi_value: Значение константы pi
        e_value: Значение константы e

    Returns:
        Числовое значение операнда

    Raises:
        ParseError: Если токен пустой или не является числом

    Examples:
        >>> parse_operand("-pi") == -math.pi
        True
        >>> parse_operand("2.5")
        2.5
    """
    if not token:
        raise ParseError("Empty operand")

    negative = token.startswith("-")

    if "pi" in token:
        value = pi_value
    elif "e" in token:
        value = e_value
    else:
        if not NUMBER_PATTERN.match(token):
            raise ParseError(f"Malformed number: {token!r}")
        return float(token)

    return -value if negative else value


def tokenize(
    expression: str,
    pi_value: float = math.pi,
    e_value: float = math.e,
) -> TokenizedExpression:
    """
    Разбор строки выражения слева направо.

    Пробельные символы игнорируются.

    Args:
        expression: Строка выражения (например, "3+5*2" или "5!-pi")
        pi_value: Значение константы pi
        e_value: Значение константы e

    Returns:
        TokenizedExpression: операнды и операторы в порядке появления

    Raises:
        ParseError: Пустое выражение, пустой или некорректный операнд,
            не-оператор сразу после "!"
    """
    if not isinstance(expression, str):
        raise ParseError(f"Expression must be a string, got {type(expression).__name__}")

    text = "".join(expression.split())
    if not text:
        raise ParseError("Empty expression")

    result = TokenizedExpression()
    operand_start = 0
    expect_operator = False

    for i, ch in enumerate(text):
        if expect_operator:
            if ch not in OPERATOR_SYMBOLS:
                raise ParseError(f"Expected operator after '!' at position {i} in {text!r}")
            result.operators.append(OperatorClass(ch))
            operand_start = i + 1
            expect_operator = ch == OperatorClass.FACTORIAL.value
            continue

        if ch not in OPERATOR_SYMBOLS:
            continue

        # Унарный минус: операнд ещё не начался
        if ch == OperatorClass.SUBTRACT.value and i == operand_start:
            continue

        result.operands.append(parse_operand(text[operand_start:i], pi_value, e_value))
        result.operators.append(OperatorClass(ch))
        operand_start = i + 1
        expect_operator = ch == OperatorClass.FACTORIAL.value

    if not expect_operator:
        result.operands.append(parse_operand(text[operand_start:], pi_value, e_value))

    logger.debug(
        "Tokenized %r: operands=%s operators=%s",
        text,
        result.operands,
        [op.value for op in result.operators],
    )

    return result
