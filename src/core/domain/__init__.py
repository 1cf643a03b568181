"""
Domain models and value objects.

Contains the evaluation outcome model shared by the shell and the contracts.
"""

from src.core.domain.evaluation import ErrorKind, EvaluationResult

__all__ = [
    # Evaluation model
    "EvaluationResult",
    "ErrorKind",
]
