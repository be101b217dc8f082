"""
Contracts — проверка моделей калькулятора против JSON Schema

Каждой модели домена соответствует файл contracts/schema/<name>.json:
- EvaluationOutcome → evaluation_outcome.json
- SessionSnapshot   → session_snapshot.json

Модель проверяется в том виде, в каком уходит наружу: через
model_dump_json и json.loads, поэтому inf/nan проверяются так же, как их
увидит потребитель JSON.

Используется вычислителем (EvaluatorConfig.check_contracts) и сессией
(SessionConfig.check_contracts).
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, List

from jsonschema import Draft202012Validator, SchemaError
from pydantic import BaseModel

from src.core.domain.outcome import EvaluationOutcome
from src.core.domain.session_state import SessionSnapshot

logger = logging.getLogger(__name__)

# Корень проекта: 4 уровня вверх от этого файла
SCHEMA_DIR: Final[Path] = Path(__file__).resolve().parents[3] / "contracts" / "schema"

MODEL_CONTRACTS: Final[Dict[type, str]] = {
    EvaluationOutcome: "evaluation_outcome",
    SessionSnapshot: "session_snapshot",
}


# =============================================================================
# ЗАГРУЗКА СХЕМ
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(name: str) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация схемы.

    Args:
        name: Имя контракта без расширения (например, 'evaluation_outcome')

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если файл не является валидной JSON Schema
    """
    path = SCHEMA_DIR / f"{name}.json"
    if not path.exists():
        raise FileNotFoundError(f"Schema not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {name}.json: {e.message}") from e

    logger.debug("Loaded contract %s from %s", name, path)
    return schema


@lru_cache(maxsize=None)
def contract_validator(name: str) -> Draft202012Validator:
    return Draft202012Validator(load_schema(name))


# =============================================================================
# ПРОВЕРКА ДАННЫХ
# =============================================================================


def contract_errors(name: str, data: Dict[str, Any]) -> List[str]:
    """Все нарушения контракта в виде '<json path>: <message>'."""
    errors = sorted(contract_validator(name).iter_errors(data), key=lambda e: e.json_path)
    return [f"{e.json_path}: {e.message}" for e in errors]


def validate_contract(name: str, data: Dict[str, Any]) -> None:
    """
    Raises:
        jsonschema.ValidationError: Первое найденное нарушение контракта
    """
    contract_validator(name).validate(data)


def validate_evaluation_outcome(data: Dict[str, Any]) -> None:
    validate_contract("evaluation_outcome", data)


def validate_session_snapshot(data: Dict[str, Any]) -> None:
    validate_contract("session_snapshot", data)


# =============================================================================
# МОДЕЛИ ДОМЕНА
# =============================================================================


def to_contract_data(model: BaseModel) -> Dict[str, Any]:
    """JSON-представление модели, как его получит внешний потребитель."""
    return json.loads(model.model_dump_json())


def check_model(model: BaseModel) -> BaseModel:
    """
    Проверка модели домена против её контракта.

    Returns:
        Ту же модель (для использования в return)

    Raises:
        KeyError: Если для типа модели нет контракта
        jsonschema.ValidationError: Если JSON модели нарушает контракт
    """
    name = MODEL_CONTRACTS[type(model)]
    validate_contract(name, to_contract_data(model))
    return model
