"""Session — сессия ввода калькулятора поверх stateless вычислителя.

- CalculatorSession: аккумулятор + отложенный оператор + буфер операнда
- SessionConfig: параметры дисплея
"""

from .state_machine import (
    VALID_INPUTS,
    CalculatorSession,
    SessionConfig,
    format_value,
)

__all__ = [
    "VALID_INPUTS",
    "CalculatorSession",
    "SessionConfig",
    "format_value",
]
