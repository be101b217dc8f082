"""Expression Evaluator — разбор и вычисление плоских выражений калькулятора.

- tokenize: строка → операнды и операторы
- reduce_expression: свёртка по фиксированному порядку классов операторов
- evaluate / try_evaluate: точки входа без состояния
"""

from .expression import (
    EvaluatorConfig,
    ExpressionEvaluator,
    evaluate,
    try_evaluate,
)
from .reducer import (
    BINARY_FUNCTIONS,
    UNARY_FUNCTIONS,
    apply_operator,
    reduce_expression,
)
from .tokenizer import TokenizedExpression, parse_operand, tokenize

__all__ = [
    "EvaluatorConfig",
    "ExpressionEvaluator",
    "evaluate",
    "try_evaluate",
    "BINARY_FUNCTIONS",
    "UNARY_FUNCTIONS",
    "apply_operator",
    "reduce_expression",
    "TokenizedExpression",
    "parse_operand",
    "tokenize",
]
