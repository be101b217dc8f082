"""Calculator Session — сессия ввода калькулятора.

Явный объект сессии вместо глобального состояния GUI:
- Аккумулятор (stored_value) + один отложенный бинарный оператор
- Буфер вводимого операнда (current_input)
- Полный текст выражения и строка дисплея

Переходы:
- NORMAL → AWAITING_OPERAND: бинарный оператор
- AWAITING_OPERAND → NORMAL: "=" (один шаг вычисления)
- C: полный сброс, CE: оставить текущий ответ

Каждый операнд вычисляется через stateless evaluate(), отложенный
оператор применяется через apply_operator. Ошибки вычислений не
поднимаются наружу: дисплей показывает "ERR", в снапшоте фиксируется
ErrorKind.

Сессия хранит состояние и не предназначена для одновременного
использования из нескольких потоков.
"""

import logging
from dataclasses import dataclass
from typing import Final, Optional

from src.core.contracts.validators import check_model
from src.core.domain.operators import BINARY_OPERATORS, OperatorClass
from src.core.domain.session_state import InputState, SessionSnapshot
from src.core.math.errors import CalculatorError, ErrorKind, ParseError
from src.core.math.numerical_safeguards import EPS_DISPLAY_ZERO, snap_to_zero
from src.core.math.primitives import fact
from src.evaluator.expression import ExpressionEvaluator
from src.evaluator.reducer import apply_operator

logger = logging.getLogger(__name__)

DIGIT_INPUTS: Final[frozenset[str]] = frozenset("0123456789.")
CONSTANT_INPUTS: Final[frozenset[str]] = frozenset({"pi", "e"})
BINARY_INPUTS: Final[frozenset[str]] = frozenset(op.value for op in BINARY_OPERATORS)
CONTROL_INPUTS: Final[frozenset[str]] = frozenset({"=", "C", "CE", "!"})

VALID_INPUTS: Final[frozenset[str]] = (
    DIGIT_INPUTS | CONSTANT_INPUTS | BINARY_INPUTS | CONTROL_INPUTS
)


@dataclass(frozen=True)
class SessionConfig:
    """Конфигурация сессии ввода.

    - display_decimals: знаков после точки до обрезки нулей
    - error_text: текст дисплея при ошибке
    - zero_snap_eps: результаты "=" ближе к нулю показываются как 0
    - check_contracts: проверять каждый снапшот против session_snapshot.json
    """

    display_decimals: int = 6
    error_text: str = "ERR"
    zero_snap_eps: float = EPS_DISPLAY_ZERO
    check_contracts: bool = False


def format_value(value: float, decimals: int = 6) -> str:
    """
    Форматирование значения для дисплея.

    Examples:
        >>> format_value(2.5)
        '2.5'
        >>> format_value(120.0)
        '120'
        >>> format_value(-0.0)
        '0'
    """
    text = f"{value:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


class CalculatorSession:
    """Сессия ввода: нажатия кнопок → снапшоты состояния.

    Принимаемые метки: 0-9 . pi e + - * / % ^ r ! = C CE.
    Прочие метки логируются и игнорируются.
    """

    def __init__(
        self,
        evaluator: Optional[ExpressionEvaluator] = None,
        config: Optional[SessionConfig] = None,
    ):
        """
        Args:
            evaluator: вычислитель операндов (default: ExpressionEvaluator())
            config: конфигурация сессии (default: SessionConfig())
        """
        self.evaluator = evaluator or ExpressionEvaluator()
        self.config = config or SessionConfig()
        self.reset()

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    @property
    def state(self) -> InputState:
        if self._pending_operator is not None:
            return InputState.AWAITING_OPERAND
        return InputState.NORMAL

    def reset(self) -> SessionSnapshot:
        """Полный сброс (кнопка C)."""
        self._stored_value = 0.0
        self._pending_operator: Optional[OperatorClass] = None
        self._current_input = ""
        self._full_expression = "0"
        self._display = "0"
        self._display_value: Optional[float] = 0.0
        self._just_evaluated = False
        self._error_kind: Optional[ErrorKind] = None
        return self.snapshot()

    def snapshot(self) -> SessionSnapshot:
        snapshot = SessionSnapshot(
            state=self.state,
            stored_value=self._stored_value,
            pending_operator=self._pending_operator,
            current_input=self._current_input,
            full_expression=self._full_expression,
            display=self._display,
            just_evaluated=self._just_evaluated,
            error_kind=self._error_kind,
        )
        if self.config.check_contracts:
            check_model(snapshot)
        return snapshot

    def press(self, label: str) -> SessionSnapshot:
        """
        Обработка одного нажатия.

        Args:
            label: метка кнопки или клавиши ("7", "+", "pi", "=", "C", ...)

        Returns:
            SessionSnapshot после обработки
        """
        if label not in VALID_INPUTS:
            logger.warning("Ignored invalid input: %r", label)
            return self.snapshot()

        if label == "C":
            return self.reset()

        if label == "CE":
            self._clear_entry()
        elif label in CONSTANT_INPUTS:
            self._append_operand_text(label)
        elif label == "=":
            self._equals()
        elif label == "!":
            self._factorial()
        elif label == OperatorClass.SUBTRACT.value and self._starts_negative_operand():
            self._append_sign()
        elif label in BINARY_INPUTS:
            self._binary_operator(OperatorClass(label))
        else:
            self._append_operand_text(label)

        return self.snapshot()

    def press_many(self, labels) -> SessionSnapshot:
        """Последовательность нажатий; возвращает последний снапшот."""
        snapshot = self.snapshot()
        for label in labels:
            snapshot = self.press(label)
        return snapshot

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    def _show_value(self, value: float) -> None:
        self._display = format_value(value, self.config.display_decimals)
        self._display_value = value
        self._error_kind = None

    def _show_text(self, text: str) -> None:
        self._display = text or "0"
        self._display_value = None
        self._error_kind = None

    def _show_operand(self) -> None:
        # Незавершённый операнд ("-", ".") показывается как есть
        try:
            value = self.evaluator.evaluate(self._current_input)
        except ParseError:
            self._show_text(self._current_input)
            return
        self._show_value(value)

    def _fail(self, error: CalculatorError) -> None:
        logger.info("Calculation failed: %s (%s)", error, error.kind.value)
        self._stored_value = 0.0
        self._pending_operator = None
        self._current_input = ""
        self._full_expression = "0"
        self._display = self.config.error_text
        self._display_value = None
        self._just_evaluated = True
        self._error_kind = error.kind

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def _start_fresh_if_evaluated(self) -> None:
        if not self._just_evaluated:
            return
        self._stored_value = 0.0
        self._pending_operator = None
        self._current_input = ""
        self._full_expression = ""
        self._just_evaluated = False

    def _append_operand_text(self, label: str) -> None:
        """Цифры, "." и константы дописываются в буфер операнда."""
        self._start_fresh_if_evaluated()

        negative = self._current_input.startswith("-")
        if label == "." and self._full_expression in ("", "0", "-0"):
            self._full_expression = "-0." if negative else "0."
        elif self._full_expression in ("0", "-0"):
            self._full_expression = ("-" if negative else "") + label
        else:
            self._full_expression += label

        self._current_input += label
        try:
            self._show_operand()
        except CalculatorError as e:
            self._fail(e)

    def _starts_negative_operand(self) -> bool:
        if self._current_input:
            return False
        return (
            self._full_expression in ("", "0")
            or self._pending_operator is not None
            and not self._just_evaluated
        )

    def _append_sign(self) -> None:
        if self._full_expression == "0":
            self._full_expression = ""
        self._current_input += OperatorClass.SUBTRACT.value
        self._full_expression += OperatorClass.SUBTRACT.value
        self._just_evaluated = False
        self._show_text(self._current_input)

    def _fold_current(self) -> bool:
        """Свернуть буфер операнда в аккумулятор отложенным оператором."""
        try:
            value = self.evaluator.evaluate(self._current_input)
            if self._pending_operator is None:
                result = value
            else:
                result = apply_operator(self._pending_operator, self._stored_value, value)
        except CalculatorError as e:
            self._fail(e)
            return False

        self._stored_value = result
        self._current_input = ""
        self._show_value(result)
        return True

    def _binary_operator(self, operator: OperatorClass) -> None:
        if self._current_input == OperatorClass.SUBTRACT.value:
            # Один знак ещё не операнд: оператор игнорируется
            return

        if self._current_input:
            if not self._fold_current():
                return
        elif self._full_expression and self._full_expression[-1] in BINARY_INPUTS:
            # Повторный оператор подряд игнорируется
            return

        self._pending_operator = operator
        self._full_expression += operator.value
        self._just_evaluated = False

    def _equals(self) -> None:
        if not self._current_input:
            return

        if not self._fold_current():
            return

        self._pending_operator = None
        self._stored_value = snap_to_zero(self._stored_value, self.config.zero_snap_eps)
        self._show_value(self._stored_value)
        self._full_expression = self._display
        self._just_evaluated = True

    def _factorial(self) -> None:
        bang = OperatorClass.FACTORIAL.value

        if self._current_input:
            self._current_input += bang
            self._full_expression += bang
            try:
                self._show_value(self.evaluator.evaluate(self._current_input))
            except CalculatorError as e:
                self._fail(e)
            return

        if self._pending_operator is not None:
            return

        # Факториал текущего ответа
        try:
            result = fact(self._stored_value)
        except CalculatorError as e:
            self._fail(e)
            return

        self._stored_value = result
        self._show_value(result)
        self._full_expression = self._display
        self._just_evaluated = True

    def _clear_entry(self) -> None:
        """CE: текущий ответ остаётся единственным содержимым выражения."""
        if self._display_value is not None:
            self._stored_value = self._display_value
            self._full_expression = self._display
        else:
            self._stored_value = 0.0
            self._full_expression = "0"
            self._show_value(0.0)

        self._current_input = ""
        self._pending_operator = None
        self._just_evaluated = True
