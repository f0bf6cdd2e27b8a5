"""
Expression evaluator for the lrexpr expression language.

Reduces an expression tree to an integer. Pure evaluation: no I/O, no
side effects, no shared state between calls.
"""

from __future__ import annotations

import logging

from lrexpr.core.environment import EvaluatorSettings
from lrexpr.core.errors import EvaluationError, IntegerOverflow
from lrexpr.core.expression_lang.parser import parse_expr
from lrexpr.core.ir.expressions import BinaryExpr, BinaryOp, Expr, Literal

logger = logging.getLogger(__name__)


def interpret(expr: Expr, settings: EvaluatorSettings | None = None) -> int:
    """Evaluate an expression tree.

    A Literal yields its value; a BinaryExpr yields left op right, with the
    left side evaluated first. The left spine is walked iteratively so long
    chains do not hit the recursion limit.

    Args:
        expr: Parsed expression AST.
        settings: Optional integer width bounds. Unbounded by default.

    Returns:
        The computed integer.

    Raises:
        IntegerOverflow: If a value leaves the configured integer range.
        EvaluationError: If the tree contains an unknown node or operator.
    """
    spine: list[BinaryExpr] = []
    node = expr
    while isinstance(node, BinaryExpr):
        spine.append(node)
        node = node.left

    result = _check(_interpret_literal(node), settings)
    for binary in reversed(spine):
        right = _check(interpret(binary.right, settings), settings)
        result = _check(_apply(binary.op, result, right), settings)
    return result


def _interpret_literal(expr: Expr) -> int:
    if isinstance(expr, Literal):
        return expr.value
    raise EvaluationError(f"Unknown expression type: {type(expr).__name__}")


def _apply(op: BinaryOp, left: int, right: int) -> int:
    if op == BinaryOp.ADD:
        return left + right
    if op == BinaryOp.SUB:
        return left - right
    raise EvaluationError(f"Unknown binary op: {op}")


def _check(value: int, settings: EvaluatorSettings | None) -> int:
    if settings is None or settings.int_bits is None:
        return value
    low, high = settings.bounds
    if not low <= value <= high:
        raise IntegerOverflow(value, settings.int_bits)
    return value


def evaluate(source: str, settings: EvaluatorSettings | None = None) -> int:
    """Parse and evaluate an expression string.

    Usage:
        evaluate("5 + 3 - 2 + 10 - 4")  # 12

    Raises:
        ParseError: If the expression is malformed.
        IntegerOverflow: If settings bound the integer width and it is exceeded.
    """
    expr = parse_expr(source)
    if isinstance(expr, BinaryExpr) and logger.isEnabledFor(logging.DEBUG):
        logger.debug("Parsed %d operators: %s", expr.depth, expr)
    result = interpret(expr, settings)
    logger.debug("%s = %d", source, result)
    return result
