"""
Errors — иерархия исключений калькулятора

Все ошибки вычисления наследуют CalculatorError, поэтому вызывающий код
(shell) ловит один базовый класс. Каждое исключение дополнительно наследует
подходящий встроенный тип (ValueError, ZeroDivisionError), чтобы библиотека
вела себя привычно для Python-кода.

Ошибки поднимаются в точке обнаружения и пропагируют без локального
восстановления: parser rule → parser rule → арифметика → вызывающий код.
"""

from typing import Optional


class CalculatorError(Exception):
    """Базовое исключение для всех ошибок разбора и арифметики."""

    default_message: str = "Calculator error"

    def __init__(self, message: Optional[str] = None, position: Optional[int] = None):
        self.position = position
        text = message or self.default_message
        if position is not None:
            text = f"{text} at position {position}"
        super().__init__(text)

    @property
    def message(self) -> str:
        return str(self)


# =============================================================================
# ОШИБКИ РАЗБОРА ВЫРАЖЕНИЙ
# =============================================================================


class InvalidNumber(CalculatorError, ValueError):
    """Литерал числа без единой цифры (например, одиночный '-')."""

    default_message = "Invalid number"


class InvalidExpression(CalculatorError, ValueError):
    """
    Неожиданный символ в позиции factor или непоглощённый хвост ввода.
    """

    default_message = "Invalid expression"


class ExpressionTooDeep(InvalidExpression):
    """Вложенность скобок превышает max_nesting_depth."""

    default_message = "Expression nesting too deep"


class MismatchedParentheses(CalculatorError, ValueError):
    """'(' без соответствующей ')'."""

    default_message = "Mismatched parentheses"


# =============================================================================
# АРИФМЕТИЧЕСКИЕ ОШИБКИ
# =============================================================================


class DivisionByZero(CalculatorError, ZeroDivisionError):
    """Делитель с нулевым модулем в делении или взятии остатка."""

    default_message = "Division by zero"


class InvalidExponent(CalculatorError, ValueError):
    """Отрицательный или нецелый показатель степени."""

    default_message = "Negative exponent not supported"
