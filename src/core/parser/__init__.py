"""
Expression Parser — вычисление арифметических выражений над BigDecimal.
"""

from .expression_parser import (
    ADDITIVE_OPERATORS,
    MULTIPLICATIVE_OPERATORS,
    ExpressionParser,
    evaluate,
)

__all__ = [
    # Constants
    "ADDITIVE_OPERATORS",
    "MULTIPLICATIVE_OPERATORS",
    # Classes
    "ExpressionParser",
    # Functions
    "evaluate",
]
