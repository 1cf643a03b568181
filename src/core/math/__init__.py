"""
Core math modules для калькулятора произвольной точности

Точная десятичная арифметика и примитивы над последовательностями цифр.
"""

# Digits — magnitude arithmetic
from src.core.math.digits import (
    KARATSUBA_THRESHOLD_DEFAULT,
    add_digits,
    compare_digits,
    divide_digits,
    karatsuba_multiply,
    multiply_digits,
    schoolbook_multiply,
    shift_digits,
    strip_leading_zeros,
    subtract_digits,
)

# BigDecimal
from src.core.math.big_decimal import (
    ONE,
    ZERO,
    BigDecimal,
    align,
)

__all__ = [
    # Digits — Constants
    "KARATSUBA_THRESHOLD_DEFAULT",
    # Digits — Functions
    "add_digits",
    "compare_digits",
    "divide_digits",
    "karatsuba_multiply",
    "multiply_digits",
    "schoolbook_multiply",
    "shift_digits",
    "strip_leading_zeros",
    "subtract_digits",
    # BigDecimal — Constants
    "ONE",
    "ZERO",
    # BigDecimal — Types
    "BigDecimal",
    # BigDecimal — Functions
    "align",
]
