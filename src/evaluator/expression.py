"""Expression Evaluator — вычисление плоских арифметических выражений.

Точки входа:
- evaluate(expression) -> float: поднимает CalculatorError
- try_evaluate(expression) -> EvaluationOutcome: tagged union без exception

Вычислитель не хранит состояния между вызовами: последовательности
операндов и операторов строятся заново на каждый вызов, конфигурация
неизменяема. Вызовы из нескольких потоков не требуют синхронизации.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

from src.core.domain.operators import RESOLUTION_ORDER, OperatorClass
from src.core.contracts.validators import check_model
from src.core.domain.outcome import EvaluationOutcome
from src.core.math.errors import CalculatorError
from src.evaluator.reducer import reduce_expression
from src.evaluator.tokenizer import TokenizedExpression, tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluatorConfig:
    """Конфигурация вычислителя.

    - pi_value / e_value: значения именованных констант
    - resolution_order: порядок классов операторов (перестановка всех восьми)
    - check_contracts: проверять результаты try_evaluate против
      evaluation_outcome.json
    """

    pi_value: float = math.pi
    e_value: float = math.e
    resolution_order: tuple[OperatorClass, ...] = RESOLUTION_ORDER
    check_contracts: bool = False

    def __post_init__(self):
        order = tuple(OperatorClass(op) for op in self.resolution_order)
        object.__setattr__(self, "resolution_order", order)

        if sorted(order) != sorted(OperatorClass):
            raise ValueError(
                "resolution_order must list every operator class exactly once, "
                f"got {[op.value for op in self.resolution_order]}"
            )


class ExpressionEvaluator:
    """Вычислитель выражений с операторами + - * / % ^ r ! и константами pi, e.

    Алгоритм:
    1. tokenize: строка → операнды + операторы (константы подставлены)
    2. reduce_expression: свёртка по классам операторов, внутри класса
       справа налево
    """

    def __init__(self, config: Optional[EvaluatorConfig] = None):
        """
        Args:
            config: конфигурация вычислителя (default: EvaluatorConfig())
        """
        self.config = config or EvaluatorConfig()

    def tokenize(self, expression: str) -> TokenizedExpression:
        return tokenize(expression, self.config.pi_value, self.config.e_value)

    def evaluate(self, expression: str) -> float:
        """
        Вычисление выражения.

        Args:
            expression: строка выражения (например, "3+5*2")

        Returns:
            Результат как float

        Raises:
            ParseError: некорректный токен
            DivideByZero, InvalidArgument, Overflow: ошибки примитивов
        """
        tokens = self.tokenize(expression)
        value = reduce_expression(tokens.operands, tokens.operators, self.config.resolution_order)
        logger.debug("Evaluated %r = %r", expression, value)
        return value

    def try_evaluate(self, expression: str) -> EvaluationOutcome:
        """Вычисление с результатом в виде EvaluationOutcome вместо exception."""
        try:
            value = self.evaluate(expression)
        except CalculatorError as e:
            logger.debug("Evaluation of %r failed: %s (%s)", expression, e, e.kind.value)
            outcome = EvaluationOutcome.failure(str(expression), e)
        else:
            outcome = EvaluationOutcome.success(expression, value)

        if self.config.check_contracts:
            check_model(outcome)
        return outcome


# Вычислитель по умолчанию (неизменяемый, общий для всех вызовов)
_DEFAULT_EVALUATOR = ExpressionEvaluator()


def evaluate(expression: str) -> float:
    """Вычисление выражения вычислителем по умолчанию."""
    return _DEFAULT_EVALUATOR.evaluate(expression)


def try_evaluate(expression: str) -> EvaluationOutcome:
    """Вычисление выражения вычислителем по умолчанию без exception."""
    return _DEFAULT_EVALUATOR.try_evaluate(expression)
