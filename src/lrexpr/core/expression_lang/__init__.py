"""
lrexpr expression language.

Tokenizer, parser, and evaluator for left-to-right integer arithmetic.

Usage:
    from lrexpr.core.expression_lang import parse_expr, interpret

    expr = parse_expr("5 + 3 - 2")
    result = interpret(expr)
    # result == 6
"""

from lrexpr.core.expression_lang.evaluator import evaluate, interpret
from lrexpr.core.expression_lang.parser import parse, parse_expr
from lrexpr.core.expression_lang.tokenizer import Token, tokenize

__all__ = ["Token", "evaluate", "interpret", "parse", "parse_expr", "tokenize"]
