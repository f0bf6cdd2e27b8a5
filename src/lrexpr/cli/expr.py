"""
lrexpr expression commands.

- eval:   Evaluate an expression and print "EXPRESSION = RESULT"
- parse:  Show the parsed expression tree
- tokens: Show the token stream with character offsets
"""

from __future__ import annotations

import sys
from typing import NoReturn

import typer
from rich.console import Console
from rich.tree import Tree

from lrexpr.core.environment import get_settings
from lrexpr.core.errors import LrexprError
from lrexpr.core.expression_lang import evaluate, parse_expr, tokenize
from lrexpr.core.ir.expressions import BinaryExpr, Expr

DEFAULT_EXPRESSION = "5 + 3 - 2 + 10 - 4"

# pydantic serializes nested models recursively
MAX_JSON_DEPTH = 100

console = Console(highlight=False)


def _fail(error: LrexprError) -> NoReturn:
    _fail_message(error.describe())


def _fail_message(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


def eval_command(
    expression: str = typer.Argument(
        DEFAULT_EXPRESSION,
        help="Whitespace-separated expression, e.g. '5 + 3 - 2'. "
        "Put '--' before an expression that starts with a negative number.",
    ),
) -> None:
    """Evaluate an expression left to right."""
    try:
        result = evaluate(expression, get_settings())
    except LrexprError as e:
        _fail(e)
    try:
        text = str(result)
    except ValueError:
        _fail_message(
            f"Result has more than {sys.get_int_max_str_digits()} digits and cannot be printed"
        )
    typer.echo(f"{expression} = {text}")


def parse_command(
    expression: str = typer.Argument(..., help="Expression to parse"),
    as_json: bool = typer.Option(False, "--json", help="Print the tree as JSON"),
    as_tree: bool = typer.Option(False, "--tree", help="Render the tree with indentation"),
) -> None:
    """Show the expression tree the parser builds."""
    try:
        expr = parse_expr(expression)
    except LrexprError as e:
        _fail(e)

    if as_json:
        depth = expr.depth if isinstance(expr, BinaryExpr) else 0
        if depth > MAX_JSON_DEPTH:
            _fail_message(
                f"Expression has {depth} operators; --json supports at most {MAX_JSON_DEPTH}"
            )
        typer.echo(expr.model_dump_json(indent=2))
    elif as_tree:
        console.print(_build_tree(expr))
    else:
        typer.echo(str(expr))


def tokens_command(
    expression: str = typer.Argument(..., help="Expression to tokenize"),
) -> None:
    """List tokens with their character offsets."""
    for tok in tokenize(expression):
        typer.echo(f"{tok.pos}\t{tok.value}")


def _label(expr: Expr) -> str:
    return expr.op.value if isinstance(expr, BinaryExpr) else str(expr)


def _build_tree(expr: Expr) -> Tree:
    """Build the rich Tree down the left spine without recursing."""
    root = Tree(_label(expr))
    current = root
    node = expr
    while isinstance(node, BinaryExpr):
        left = current.add(_label(node.left))
        current.add(_label(node.right))
        current = left
        node = node.left
    return root
