"""
EvaluationResult — Модель результата вычисления выражения

Immutable Pydantic модель, представляющая исход одного вызова evaluate():
либо отформатированное значение, либо вид и текст ошибки.
Полная совместимость с JSON Schema (src/core/contracts/schema/evaluation_result.json).
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from src.core.errors import CalculatorError
from src.core.math.big_decimal import BigDecimal


# =============================================================================
# ENUMS
# =============================================================================


class ErrorKind(str, Enum):
    """Вид ошибки вычисления (совпадает с именем класса исключения)."""

    INVALID_NUMBER = "InvalidNumber"
    INVALID_EXPRESSION = "InvalidExpression"
    EXPRESSION_TOO_DEEP = "ExpressionTooDeep"
    MISMATCHED_PARENTHESES = "MismatchedParentheses"
    DIVISION_BY_ZERO = "DivisionByZero"
    INVALID_EXPONENT = "InvalidExponent"


# =============================================================================
# EVALUATION RESULT MODEL
# =============================================================================


class EvaluationResult(BaseModel):
    """
    Результат вычисления выражения.

    Immutable модель (frozen=True). Согласованность полей:
    - ok=True  → result задан, error_kind/error_message пусты
    - ok=False → error_kind и error_message заданы, result пуст
    """

    expression: str = Field(..., description="Исходный текст выражения")
    ok: bool = Field(..., description="True если выражение вычислено")
    result: Optional[str] = Field(
        None, pattern=r"^-?[0-9]+(\.[0-9]+)?$", description="Отформатированное значение"
    )
    error_kind: Optional[ErrorKind] = Field(None, description="Вид ошибки")
    error_message: Optional[str] = Field(None, min_length=1, description="Текст ошибки")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_outcome(self) -> "EvaluationResult":
        """Поля результата и ошибки взаимоисключающие."""
        if self.ok:
            if self.result is None:
                raise ValueError("result is required when ok is true")
            if self.error_kind is not None or self.error_message is not None:
                raise ValueError("error fields must be empty when ok is true")
        else:
            if self.error_kind is None or self.error_message is None:
                raise ValueError("error_kind and error_message are required when ok is false")
            if self.result is not None:
                raise ValueError("result must be empty when ok is false")
        return self

    @classmethod
    def success(cls, expression: str, value: BigDecimal) -> "EvaluationResult":
        return cls(expression=expression, ok=True, result=str(value))

    @classmethod
    def failure(cls, expression: str, error: CalculatorError) -> "EvaluationResult":
        return cls(
            expression=expression,
            ok=False,
            error_kind=ErrorKind(type(error).__name__),
            error_message=error.message,
        )
