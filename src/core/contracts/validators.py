"""
Evaluation Result Contract

Проверка машиночитаемого вывода shell (--json) по JSON Schema
schema/evaluation_result.json (Draft 2020-12).

Схема загружается один раз и проходит meta-validation при загрузке.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

SCHEMA_DIR = Path(__file__).parent / "schema"

EVALUATION_RESULT_SCHEMA = "evaluation_result"


@lru_cache(maxsize=None)
def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Загрузка и meta-validation JSON Schema.

    Args:
        schema_name: Имя схемы без расширения
        schema_dir: Каталог со схемами

    Raises:
        FileNotFoundError: Файл схемы не найден
        ValueError: Файл не является валидной JSON Schema
    """
    schema_path = schema_dir / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

    return schema


class EvaluationResultValidator:
    """Валидатор EvaluationResult документов."""

    def __init__(self):
        self.validator = Draft202012Validator(load_schema(EVALUATION_RESULT_SCHEMA))

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Документ не соответствует схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


def validate_evaluation_result(data: Dict[str, Any]) -> None:
    """Валидация evaluation_result документа (ValidationError при нарушении)."""
    EvaluationResultValidator().validate(data)
