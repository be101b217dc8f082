"""
Domain models and value objects.

Contains operator classes, evaluation outcomes and session snapshots.
"""

from src.core.domain.operators import (
    BINARY_OPERATORS,
    OPERATOR_SYMBOLS,
    RESOLUTION_ORDER,
    OperatorClass,
)
from src.core.domain.outcome import EvaluationOutcome
from src.core.domain.session_state import InputState, SessionSnapshot

__all__ = [
    # Operators module
    "BINARY_OPERATORS",
    "OPERATOR_SYMBOLS",
    "RESOLUTION_ORDER",
    "OperatorClass",
    # Outcome model
    "EvaluationOutcome",
    # Session snapshot model
    "InputState",
    "SessionSnapshot",
]
