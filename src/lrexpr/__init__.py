"""
lrexpr - left-to-right integer expression interpreter.

Evaluates strings like "5 + 3 - 2 + 10 - 4" by building a left-leaning
expression tree and reducing it to an integer.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.environment import EvaluatorSettings
from .core.errors import (
    EvaluationError,
    IntegerOverflow,
    InvalidNumber,
    InvalidOperator,
    LrexprError,
    ParseError,
    UnexpectedEndOfInput,
)
from .core.expression_lang import evaluate, interpret, parse, parse_expr, tokenize

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "evaluate",
    "interpret",
    "parse",
    "parse_expr",
    "tokenize",
    "EvaluatorSettings",
    "LrexprError",
    "ParseError",
    "InvalidNumber",
    "InvalidOperator",
    "UnexpectedEndOfInput",
    "EvaluationError",
    "IntegerOverflow",
]
