"""
Contract Validation Module

Модуль для валидации JSON контрактов калькулятора.
"""

from .validators import (
    EVALUATION_RESULT_SCHEMA,
    EvaluationResultValidator,
    load_schema,
    validate_evaluation_result,
)

__all__ = [
    # Constants
    "EVALUATION_RESULT_SCHEMA",
    # Classes
    "EvaluationResultValidator",
    # Functions
    "load_schema",
    "validate_evaluation_result",
]
