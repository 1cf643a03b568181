"""
Shell — консольная оболочка калькулятора

Читает одно выражение (аргумент командной строки или строка из stdin),
вычисляет его и печатает:
- успех:  "Result: <значение>" в stdout, exit status 0
- ошибка: "Error: <сообщение>" в stderr, exit status 1

С флагом --json печатает EvaluationResult в JSON (проверенный по контракту
evaluation_result) в stdout; exit status тот же.
"""

import argparse
import sys
from typing import Final, Optional, Sequence, TextIO

import structlog

from src.core.config import LOG_LEVELS, CalculatorSettings, get_settings
from src.core.contracts import validate_evaluation_result
from src.core.domain import EvaluationResult
from src.core.errors import CalculatorError
from src.core.logging_config import configure_logging
from src.core.parser import evaluate

logger = structlog.get_logger(__name__)

PROMPT: Final[str] = "Enter expression (e.g., 123.45 + 67.89 * (2 - 1) or 999 / 7): "

EXIT_OK: Final[int] = 0
EXIT_ERROR: Final[int] = 1


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mpcalc",
        description="Exact arbitrary-precision decimal calculator.",
    )
    parser.add_argument(
        "expression",
        nargs="?",
        help="expression to evaluate; read one line from stdin when omitted",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="print the outcome as a JSON document",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=sorted(LOG_LEVELS),
        help="override MPCALC_LOG_LEVEL",
    )
    return parser


def read_expression(stream: TextIO) -> str:
    """Одна строка ввода без завершающего перевода строки, без trimming."""
    line = stream.readline()
    if line.endswith("\n"):
        line = line[:-1]
    return line


def run(expression: str, settings: CalculatorSettings, json_output: bool = False) -> int:
    """
    Вычисление выражения и печать результата.

    Returns:
        Exit status (EXIT_OK / EXIT_ERROR)
    """
    try:
        value = evaluate(expression, settings=settings)
    except CalculatorError as exc:
        logger.info("evaluation_failed", error_kind=type(exc).__name__)
        outcome = EvaluationResult.failure(expression, exc)
    else:
        logger.info("evaluation_succeeded", result_digits=value.digit_count())
        outcome = EvaluationResult.success(expression, value)

    if json_output:
        payload = outcome.model_dump(mode="json")
        validate_evaluation_result(payload)
        print(outcome.model_dump_json())
    elif outcome.ok:
        print(f"Result: {outcome.result}")
    else:
        print(f"Error: {outcome.error_message}", file=sys.stderr)

    return EXIT_OK if outcome.ok else EXIT_ERROR


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    settings = get_settings()
    if args.log_level is not None:
        settings = settings.model_copy(update={"log_level": args.log_level})
    configure_logging(settings.log_level, json_output=args.json_output)

    if args.expression is not None:
        expression = args.expression
    else:
        if not args.json_output:
            print(PROMPT, end="", flush=True)
        expression = read_expression(sys.stdin)

    return run(expression, settings, json_output=args.json_output)


if __name__ == "__main__":
    sys.exit(main())
