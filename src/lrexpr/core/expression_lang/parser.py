"""
Parser for the lrexpr expression language.

Grammar:
    expr  → term (op term)*
    op    → "+" | "-"
    term  → INT

There is no precedence: operators combine strictly left to right, so the
resulting tree always leans left and each right child is a Literal.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from lrexpr.core.errors import (
    InvalidNumber,
    InvalidOperator,
    UnexpectedEndOfInput,
    make_context,
)
from lrexpr.core.expression_lang.tokenizer import Token, tokenize
from lrexpr.core.ir.expressions import BinaryExpr, BinaryOp, Expr, Literal

logger = logging.getLogger(__name__)

# Optional sign followed by ASCII digits
_INT_RE = re.compile(r"[+-]?[0-9]+")

_OPERATORS: dict[str, BinaryOp] = {
    "+": BinaryOp.ADD,
    "-": BinaryOp.SUB,
}


class _Parser:
    """Single-use parser; the cursor lives only as long as one parse call."""

    def __init__(self, tokens: Sequence[Token], source: str | None = None) -> None:
        self.tokens = tokens
        self.source = source
        self.pos = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def advance(self) -> Token:
        if self.at_end:
            end = len(self.source) if self.source is not None else 0
            raise UnexpectedEndOfInput(make_context(self.source, end))
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    # -- Grammar rules --

    def parse_expr(self) -> Expr:
        """term (op term)*"""
        left: Expr = self.parse_term()
        while not self.at_end:
            op = self.parse_operator()
            right = self.parse_term()
            left = BinaryExpr(op=op, left=left, right=right)
        return left

    def parse_term(self) -> Literal:
        """INT"""
        tok = self.advance()
        if not _INT_RE.fullmatch(tok.value):
            raise InvalidNumber(tok.value, make_context(self.source, tok.pos))
        try:
            value = int(tok.value)
        except ValueError:
            # Longer than sys.get_int_max_str_digits()
            raise InvalidNumber(tok.value, make_context(self.source, tok.pos)) from None
        return Literal(value=value)

    def parse_operator(self) -> BinaryOp:
        """'+' | '-'"""
        tok = self.advance()
        op = _OPERATORS.get(tok.value)
        if op is None:
            raise InvalidOperator(tok.value, make_context(self.source, tok.pos))
        return op


def parse(tokens: Sequence[Token], source: str | None = None) -> Expr:
    """Parse a token sequence into an expression tree.

    Args:
        tokens: Tokens from tokenize().
        source: The original string, used only to locate errors.

    Returns:
        A Literal for a single number, otherwise a left-leaning BinaryExpr.

    Raises:
        InvalidNumber: If a term is not an integer.
        InvalidOperator: If an operator is not '+' or '-'.
        UnexpectedEndOfInput: If the tokens end where a term is expected.
    """
    return _Parser(tokens, source).parse_expr()


def parse_expr(source: str) -> Expr:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "5 + 3 - 2")

    Returns:
        Parsed expression AST.

    Raises:
        ParseError: If the expression is invalid.
    """
    tokens = tokenize(source)
    logger.debug("Tokenized %r into %d tokens", source, len(tokens))
    return parse(tokens, source)
