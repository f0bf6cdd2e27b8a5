"""
Tokenizer for the lrexpr expression language.

Splits an expression string on runs of whitespace. Tokens are not classified
here: whether a token is a number or an operator depends on where the parser
finds it.
"""

from __future__ import annotations

import re

# Token: a maximal run of non-whitespace characters
_TOKEN_RE = re.compile(r"\S+")


class Token:
    """A single token from the expression tokenizer."""

    __slots__ = ("value", "pos")

    def __init__(self, value: str, pos: int) -> None:
        self.value = value
        self.pos = pos

    def __repr__(self) -> str:
        return f"Token({self.value!r}, pos={self.pos})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.value == other.value and self.pos == other.pos

    def __hash__(self) -> int:
        return hash((self.value, self.pos))


def tokenize(source: str) -> tuple[Token, ...]:
    """Tokenize an expression string into an immutable token sequence.

    Empty or whitespace-only input yields an empty tuple.
    """
    return tuple(Token(m.group(0), m.start()) for m in _TOKEN_RE.finditer(source))
