"""
Error types for lrexpr tokenizing, parsing, and evaluation.
"""

from dataclasses import dataclass
from typing import Optional


class LrexprError(Exception):
    """Base exception for all lrexpr errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(message)

    def describe(self) -> str:
        """Message followed by the source snippet, when a context is attached."""
        if self.context:
            return f"{self.message}\n{self.context.format()}"
        return self.message


class ParseError(LrexprError):
    """
    Raised when an expression string cannot be parsed.

    Examples:
    - A term that is not an integer
    - An operator other than + or -
    - Input that ends where a term is expected
    """

    pass


class InvalidNumber(ParseError):
    """A token in term position is not an integer literal."""

    def __init__(self, token: str, context: Optional["ErrorContext"] = None):
        self.token = token
        super().__init__(f"Invalid number: {token!r}", context)


class InvalidOperator(ParseError):
    """A token in operator position is neither '+' nor '-'."""

    def __init__(self, token: str, context: Optional["ErrorContext"] = None):
        self.token = token
        super().__init__(f"Invalid operator: {token!r}", context)


class UnexpectedEndOfInput(ParseError):
    """The token stream ran out while a term was still expected."""

    def __init__(self, context: Optional["ErrorContext"] = None):
        super().__init__("Unexpected end of input: expected a number", context)


class EvaluationError(LrexprError):
    """Raised when a parsed expression cannot be reduced to a value."""

    pass


class IntegerOverflow(EvaluationError):
    """A literal or intermediate result falls outside the configured integer width."""

    def __init__(self, value: int, bits: int):
        self.value = value
        self.bits = bits
        super().__init__(f"Integer overflow: {value} does not fit in a signed {bits}-bit integer")


@dataclass
class ErrorContext:
    """
    Location of an error inside the expression source.

    Attributes:
        source: The full expression string
        pos: Character offset (0-indexed) of the offending token, or the
            end of the source for end-of-input errors
    """

    source: str
    pos: int

    @property
    def column(self) -> int:
        """1-indexed column of the error."""
        return self.pos + 1

    def format(self) -> str:
        """
        Format the source with a marker under the error position.

        Returns:
            Two lines, e.g.::

                5 * 3
                  ^
        """
        line = self.source.replace("\n", " ").replace("\t", " ")
        return f"{line}\n{' ' * self.pos}^"


def make_context(source: str | None, pos: int) -> ErrorContext | None:
    """
    Helper to build an ErrorContext when the source text is known.

    Args:
        source: Expression string, or None when parsing bare tokens
        pos: Character offset of the error

    Returns:
        ErrorContext, or None without a source
    """
    if source is None:
        return None
    return ErrorContext(source=source, pos=pos)
