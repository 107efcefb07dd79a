"""Calculator — request evaluation and the interactive session around the core."""

from .evaluator import (
    CalculationResult,
    ErrorKind,
    Operator,
    ResultStatus,
    UnsupportedOperator,
    evaluate,
    evaluate_request,
    parse_operator,
)
from .session import EXIT_SENTINEL, SessionConfig, run_session

__all__ = [
    # Evaluator
    "Operator",
    "ResultStatus",
    "ErrorKind",
    "UnsupportedOperator",
    "CalculationResult",
    "parse_operator",
    "evaluate",
    "evaluate_request",
    # Session
    "EXIT_SENTINEL",
    "SessionConfig",
    "run_session",
]
