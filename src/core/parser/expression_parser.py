"""
Expression Parser — рекурсивный спуск над BigDecimal

Грамматика (стандартный приоритет, левая ассоциативность):

    expression := term (('+' | '-') term)*
    term       := factor (('*' | '/' | '%') factor)*
    factor     := number | '(' expression ')'
    number     := ['-'] digit+ ['.' digit+]

Разбор идёт по индексу символа с просмотром на один символ вперёд.
Ни потока токенов, ни AST: каждое правило сразу вычисляет и возвращает
BigDecimal. Пробелы и посторонние символы не пропускаются и приводят
к ошибке в той позиции, где грамматика ждёт конкретный символ.

Ошибки:
- InvalidNumber: литерал без цифр ('-', '-.')
- InvalidExpression: неожиданный символ или непоглощённый хвост
- MismatchedParentheses: '(' без ')'
- ExpressionTooDeep: вложенность скобок больше max_nesting_depth
- DivisionByZero / InvalidExponent пропагируют из BigDecimal без изменений
"""

from typing import Final, Optional

import structlog

from src.core.config import CalculatorSettings
from src.core.errors import (
    CalculatorError,
    ExpressionTooDeep,
    InvalidExpression,
    InvalidNumber,
    MismatchedParentheses,
)
from src.core.math.big_decimal import DIGIT_CHARS, BigDecimal

logger = structlog.get_logger(__name__)

ADDITIVE_OPERATORS: Final[str] = "+-"
MULTIPLICATIVE_OPERATORS: Final[str] = "*/%"


def _is_digit(ch: str) -> bool:
    # str.isdigit() пропускает не-ASCII цифры ('²', '٣')
    return ch != "" and ch in DIGIT_CHARS


class ExpressionParser:
    """
    Парсер и вычислитель арифметических выражений.

    Экземпляр хранит только текст и курсор; evaluate() сбрасывает курсор,
    поэтому один экземпляр можно вычислять повторно.
    """

    def __init__(self, expression: str, settings: Optional[CalculatorSettings] = None):
        """
        Args:
            expression: Текст выражения (без trimming)
            settings: Настройки (порог Karatsuba, предел вложенности)
        """
        self.expression = expression
        self.settings = settings or CalculatorSettings()
        self._pos = 0
        self._depth = 0

    @property
    def position(self) -> int:
        return self._pos

    def _peek(self) -> str:
        if self._pos < len(self.expression):
            return self.expression[self._pos]
        return ""

    def _consume(self) -> str:
        ch = self._peek()
        if ch:
            self._pos += 1
        return ch

    def _parse_number(self) -> BigDecimal:
        start = self._pos
        if self._peek() == "-":
            self._consume()

        while _is_digit(self._peek()):
            self._consume()

        if self._peek() == ".":
            self._consume()
            while _is_digit(self._peek()):
                self._consume()

        literal = self.expression[start : self._pos]
        if not any(ch in DIGIT_CHARS for ch in literal):
            raise InvalidNumber(position=start)

        return BigDecimal(literal)

    def _parse_factor(self) -> BigDecimal:
        ch = self._peek()
        if _is_digit(ch) or ch == "-":
            return self._parse_number()

        if ch == "(":
            if self._depth >= self.settings.max_nesting_depth:
                raise ExpressionTooDeep(position=self._pos)

            self._consume()
            self._depth += 1
            result = self._parse_expression()
            self._depth -= 1

            closing_pos = self._pos
            if self._consume() != ")":
                raise MismatchedParentheses(position=closing_pos)
            return result

        raise InvalidExpression(position=self._pos)

    def _parse_term(self) -> BigDecimal:
        result = self._parse_factor()
        while self._peek() and self._peek() in MULTIPLICATIVE_OPERATORS:
            op = self._consume()
            operand = self._parse_factor()
            if op == "*":
                result = result.multiply(
                    operand, karatsuba_threshold=self.settings.karatsuba_threshold
                )
            elif op == "/":
                result = result.divide(operand)
            else:
                result = result.mod(operand)
        return result

    def _parse_expression(self) -> BigDecimal:
        result = self._parse_term()
        while self._peek() and self._peek() in ADDITIVE_OPERATORS:
            op = self._consume()
            operand = self._parse_term()
            if op == "+":
                result = result.add(operand)
            else:
                result = result.subtract(operand)
        return result

    def evaluate(self) -> BigDecimal:
        """
        Вычисление всего выражения.

        Returns:
            Значение выражения

        Raises:
            CalculatorError: Любая ошибка разбора или арифметики
        """
        self._pos = 0
        self._depth = 0

        try:
            result = self._parse_expression()
        except RecursionError as e:
            # Стек интерпретатора закончился раньше max_nesting_depth
            raise ExpressionTooDeep(position=self._pos) from e
        if self._pos < len(self.expression):
            raise InvalidExpression(position=self._pos)

        return result


def evaluate(expression: str, settings: Optional[CalculatorSettings] = None) -> BigDecimal:
    """
    Вычисление выражения.

    Examples:
        >>> str(evaluate("2+3*4"))
        '14'
        >>> str(evaluate("(2+3)*4"))
        '20'
    """
    parser = ExpressionParser(expression, settings=settings)
    try:
        result = parser.evaluate()
    except CalculatorError as exc:
        logger.debug(
            "expression_failed",
            length=len(expression),
            error_kind=type(exc).__name__,
            position=exc.position,
        )
        raise

    logger.debug(
        "expression_evaluated",
        length=len(expression),
        result_digits=result.digit_count(),
    )
    return result
