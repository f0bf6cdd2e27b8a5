"""Core lrexpr functionality: IR, tokenizer, parser, evaluator, settings."""

from . import ir
from .environment import EvaluatorSettings, get_settings
from .errors import (
    ErrorContext,
    EvaluationError,
    IntegerOverflow,
    InvalidNumber,
    InvalidOperator,
    LrexprError,
    ParseError,
    UnexpectedEndOfInput,
)

__all__ = [
    "ir",
    "EvaluatorSettings",
    "get_settings",
    "LrexprError",
    "ParseError",
    "InvalidNumber",
    "InvalidOperator",
    "UnexpectedEndOfInput",
    "EvaluationError",
    "IntegerOverflow",
    "ErrorContext",
]
