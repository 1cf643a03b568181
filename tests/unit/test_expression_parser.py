"""
Тесты для Expression Parser — рекурсивный спуск над BigDecimal

Проверяет:
1. Приоритет и левую ассоциативность операторов
2. Литералы чисел (знак, дробная часть)
3. Все виды ошибок и их позиции
4. Предел вложенности скобок
5. Передачу порога Karatsuba из настроек
6. Структурные события логирования
"""

import pytest
from structlog.testing import capture_logs

from src.core.config import MAX_NESTING_DEPTH_LIMIT, CalculatorSettings
from src.core.errors import (
    CalculatorError,
    DivisionByZero,
    ExpressionTooDeep,
    InvalidExpression,
    InvalidNumber,
    MismatchedParentheses,
)
from src.core.parser import ExpressionParser, evaluate


# =============================================================================
# ТЕСТЫ: Вычисление
# =============================================================================


class TestPrecedence:
    """Приоритет и ассоциативность."""

    @pytest.mark.parametrize(
        "expression, expected",
        [
            ("2+3*4", "14"),
            ("(2+3)*4", "20"),
            ("10/2-3", "2"),
            ("1-2-3", "-4"),
            ("100/10/5", "2"),
            ("2*3%4", "2"),
            ("10%3", "1"),
            ("((((7))))", "7"),
            ("2*(3+(4-1)*2)", "18"),
        ],
    )
    def test_evaluates(self, expression: str, expected: str) -> None:
        assert str(evaluate(expression)) == expected


class TestNumbers:
    """Литералы и унарный минус."""

    @pytest.mark.parametrize(
        "expression, expected",
        [
            ("123.45+67.89*(2-1)", "191.34"),
            ("999/7", "142"),
            ("0.1+0.2", "0.3"),
            ("1.5*1.5", "2.25"),
            ("-5+3", "-2"),
            ("5--3", "8"),
            ("2*-3", "-6"),
            ("-.5", "-0.5"),
            ("5.", "5"),
            ("007.50", "7.5"),
            ("10.00/3", "3.33"),
        ],
    )
    def test_literals(self, expression: str, expected: str) -> None:
        assert str(evaluate(expression)) == expected

    def test_large_operands(self) -> None:
        a = "9" * 120
        b = "1" + "0" * 80 + "7"
        assert str(evaluate(f"{a}*{b}")) == str(int(a) * int(b))


# =============================================================================
# ТЕСТЫ: Ошибки
# =============================================================================


class TestErrors:
    """Виды ошибок разбора."""

    @pytest.mark.parametrize(
        "expression, error",
        [
            ("(2+3", MismatchedParentheses),
            ("(2+3]", MismatchedParentheses),
            ("((1)", MismatchedParentheses),
            ("2+3)", InvalidExpression),
            ("", InvalidExpression),
            ("2+", InvalidExpression),
            ("*5", InvalidExpression),
            ("2 + 3", InvalidExpression),
            (" 2", InvalidExpression),
            ("2^3", InvalidExpression),
            ("abc", InvalidExpression),
            ("-", InvalidNumber),
            ("-(2)", InvalidNumber),
            ("3*-", InvalidNumber),
            ("5/0", DivisionByZero),
            ("5%0", DivisionByZero),
            ("5%(2-2)", DivisionByZero),
        ],
    )
    def test_error_kind(self, expression: str, error: type) -> None:
        with pytest.raises(error):
            evaluate(expression)

    def test_trailing_input_position(self) -> None:
        with pytest.raises(InvalidExpression) as exc_info:
            evaluate("2+3)")
        assert exc_info.value.position == 3
        assert str(exc_info.value) == "Invalid expression at position 3"

    def test_mismatched_parentheses_position(self) -> None:
        with pytest.raises(MismatchedParentheses, match="Mismatched parentheses at position 4"):
            evaluate("(2+3")

    def test_invalid_number_position(self) -> None:
        with pytest.raises(InvalidNumber, match="Invalid number at position 2"):
            evaluate("3*-")

    def test_whitespace_not_skipped(self) -> None:
        with pytest.raises(InvalidExpression) as exc_info:
            evaluate(" 2")
        assert exc_info.value.position == 0

    def test_all_errors_are_calculator_errors(self) -> None:
        for expression in ["(1", "1)", "-", "1/0"]:
            with pytest.raises(CalculatorError):
                evaluate(expression)

    def test_parse_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            evaluate("2+")


class TestNestingLimit:
    """Предел вложенности скобок."""

    def test_within_limit(self) -> None:
        settings = CalculatorSettings(max_nesting_depth=3)
        assert str(evaluate("(((1)))", settings=settings)) == "1"

    def test_exceeding_limit(self) -> None:
        settings = CalculatorSettings(max_nesting_depth=3)
        with pytest.raises(ExpressionTooDeep, match="at position 3"):
            evaluate("((((1))))", settings=settings)

    def test_too_deep_is_invalid_expression(self) -> None:
        settings = CalculatorSettings(max_nesting_depth=1)
        with pytest.raises(InvalidExpression):
            evaluate("((1))", settings=settings)

    def test_default_limit(self) -> None:
        depth = CalculatorSettings().max_nesting_depth
        assert str(evaluate("(" * depth + "1" + ")" * depth)) == "1"
        with pytest.raises(ExpressionTooDeep):
            evaluate("(" * (depth + 1) + "1" + ")" * (depth + 1))

    def test_max_limit_fits_interpreter_stack(self) -> None:
        depth = MAX_NESTING_DEPTH_LIMIT
        settings = CalculatorSettings(max_nesting_depth=depth)
        assert str(evaluate("(" * depth + "1" + ")" * depth, settings=settings)) == "1"

    def test_stack_overflow_reported_as_too_deep(self) -> None:
        # Настройки в обход валидации: предел выше, чем выдержит стек
        settings = CalculatorSettings.model_construct(max_nesting_depth=5000)
        with pytest.raises(ExpressionTooDeep):
            evaluate("(" * 2000 + "1" + ")" * 2000, settings=settings)

    def test_parser_reusable_after_stack_overflow(self) -> None:
        settings = CalculatorSettings.model_construct(max_nesting_depth=5000)
        parser = ExpressionParser("(" * 2000 + "1" + ")" * 2000, settings=settings)
        with pytest.raises(ExpressionTooDeep):
            parser.evaluate()
        parser.expression = "(2)*3"
        assert str(parser.evaluate()) == "6"

    def test_sequential_groups_do_not_accumulate_depth(self) -> None:
        settings = CalculatorSettings(max_nesting_depth=1)
        assert str(evaluate("(1)+(2)+(3)", settings=settings)) == "6"


# =============================================================================
# ТЕСТЫ: Парсер как объект
# =============================================================================


class TestExpressionParser:
    """Повторное использование и настройки."""

    def test_evaluate_is_repeatable(self) -> None:
        parser = ExpressionParser("(1+2)*3")
        assert str(parser.evaluate()) == "9"
        assert str(parser.evaluate()) == "9"
        assert parser.position == len("(1+2)*3")

    def test_karatsuba_threshold_from_settings(self) -> None:
        settings = CalculatorSettings(karatsuba_threshold=1)
        result = evaluate("123456789*987654321", settings=settings)
        assert str(result) == str(123456789 * 987654321)


# =============================================================================
# ТЕСТЫ: Логирование
# =============================================================================


class TestLogging:
    """Структурные события evaluate()."""

    def test_success_event(self) -> None:
        with capture_logs() as logs:
            evaluate("1+1")
        events = [entry for entry in logs if entry["event"] == "expression_evaluated"]
        assert len(events) == 1
        assert events[0]["log_level"] == "debug"
        assert events[0]["length"] == 3

    def test_failure_event(self) -> None:
        with capture_logs() as logs:
            with pytest.raises(DivisionByZero):
                evaluate("1/0")
        events = [entry for entry in logs if entry["event"] == "expression_failed"]
        assert len(events) == 1
        assert events[0]["error_kind"] == "DivisionByZero"
