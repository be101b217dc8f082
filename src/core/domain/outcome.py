"""
EvaluationOutcome — результат вычисления выражения

Immutable Pydantic модель: tagged union "значение или вид ошибки".
Полная совместимость с JSON Schema (contracts/schema/evaluation_outcome.json).
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from src.core.math.errors import CalculatorError, ErrorKind


class EvaluationOutcome(BaseModel):
    """
    Результат одного вычисления.

    ok=True  → value задан, error_kind/error_message пусты
    ok=False → error_kind задан, value пуст

    value может быть inf/nan (power за пределами double, inf - inf).
    В JSON такие значения пишутся константами Infinity / -Infinity / NaN,
    как это делает json.dumps, и читаются обратно model_validate_json.

    Immutable модель (frozen=True).
    """

    expression: str = Field(..., description="Исходная строка выражения")
    ok: bool = Field(..., description="True если вычисление успешно")
    value: Optional[float] = Field(None, description="Результат (только при ok)")
    error_kind: Optional[ErrorKind] = Field(
        None, description="Вид ошибки (только при not ok)"
    )
    error_message: Optional[str] = Field(
        None, description="Текст ошибки для диагностики"
    )

    model_config = {"frozen": True, "ser_json_inf_nan": "constants"}

    @model_validator(mode="after")
    def validate_tagged_union(self) -> "EvaluationOutcome":
        """Ровно одна ветка: значение или ошибка"""
        if self.ok:
            if self.value is None:
                raise ValueError("successful outcome requires value")
            if self.error_kind is not None or self.error_message is not None:
                raise ValueError("successful outcome must not carry an error")
        else:
            if self.error_kind is None:
                raise ValueError("failed outcome requires error_kind")
            if self.value is not None:
                raise ValueError("failed outcome must not carry a value")
        return self

    @classmethod
    def success(cls, expression: str, value: float) -> "EvaluationOutcome":
        return cls(expression=expression, ok=True, value=value)

    @classmethod
    def failure(cls, expression: str, error: CalculatorError) -> "EvaluationOutcome":
        return cls(
            expression=expression,
            ok=False,
            error_kind=error.kind,
            error_message=str(error),
        )
