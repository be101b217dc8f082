"""
SessionSnapshot — снапшот сессии ввода калькулятора

Immutable Pydantic модель, представляющая видимое состояние сессии
после очередного нажатия.
Полная совместимость с JSON Schema (contracts/schema/session_snapshot.json).
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from src.core.domain.operators import OperatorClass
from src.core.math.errors import ErrorKind


# =============================================================================
# ENUMS
# =============================================================================


class InputState(str, Enum):
    """
    Состояние сессии ввода.

    NORMAL → AWAITING_OPERAND (после бинарного оператора) → NORMAL (после "=")
    """

    NORMAL = "NORMAL"
    AWAITING_OPERAND = "AWAITING_OPERAND"


# =============================================================================
# SESSION SNAPSHOT MODEL
# =============================================================================


class SessionSnapshot(BaseModel):
    """
    Снапшот сессии ввода.

    Immutable модель (frozen=True). Содержит:
    - Аккумулятор и отложенный бинарный оператор
    - Буфер вводимого операнда
    - Полный текст выражения и строку дисплея
    """

    state: InputState = Field(..., description="Состояние сессии")
    stored_value: float = Field(..., description="Аккумулятор (левый операнд)")
    pending_operator: Optional[OperatorClass] = Field(
        None, description="Отложенный бинарный оператор"
    )
    current_input: str = Field(..., description="Буфер вводимого операнда")
    full_expression: str = Field(..., description="Полный набранный текст")
    display: str = Field(..., description="Строка дисплея (значение или ERR)")
    just_evaluated: bool = Field(..., description="Последним было вычисление")
    error_kind: Optional[ErrorKind] = Field(
        None, description="Вид последней ошибки (если дисплей показывает ERR)"
    )

    model_config = {"frozen": True, "ser_json_inf_nan": "constants"}

    @field_validator("pending_operator")
    @classmethod
    def validate_pending_is_binary(
        cls, v: Optional[OperatorClass]
    ) -> Optional[OperatorClass]:
        """Отложенным может быть только бинарный оператор"""
        if v is not None and v.is_unary:
            raise ValueError(f"pending_operator must be binary, got {v.value!r}")
        return v
