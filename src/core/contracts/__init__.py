"""
Contract Validation Module

Проверка моделей калькулятора против JSON Schema контрактов.
"""

from .validators import (
    MODEL_CONTRACTS,
    SCHEMA_DIR,
    check_model,
    contract_errors,
    contract_validator,
    load_schema,
    to_contract_data,
    validate_contract,
    validate_evaluation_outcome,
    validate_session_snapshot,
)

__all__ = [
    # Schemas
    "SCHEMA_DIR",
    "MODEL_CONTRACTS",
    "load_schema",
    "contract_validator",
    # Raw data
    "contract_errors",
    "validate_contract",
    "validate_evaluation_outcome",
    "validate_session_snapshot",
    # Domain models
    "to_contract_data",
    "check_model",
]
