"""Tests for lrexpr error types and their location context."""

import pytest

from lrexpr.core.errors import (
    ErrorContext,
    EvaluationError,
    IntegerOverflow,
    InvalidNumber,
    InvalidOperator,
    LrexprError,
    ParseError,
    UnexpectedEndOfInput,
    make_context,
)
from lrexpr.core.expression_lang.parser import parse_expr


class TestErrorHierarchy:
    def test_parse_errors(self) -> None:
        for cls in (InvalidNumber, InvalidOperator, UnexpectedEndOfInput):
            assert issubclass(cls, ParseError)
            assert issubclass(cls, LrexprError)

    def test_overflow_is_evaluation_error(self) -> None:
        assert issubclass(IntegerOverflow, EvaluationError)
        assert not issubclass(IntegerOverflow, ParseError)

    def test_messages(self) -> None:
        assert str(InvalidNumber("five")) == "Invalid number: 'five'"
        assert str(InvalidOperator("*")) == "Invalid operator: '*'"
        assert str(UnexpectedEndOfInput()) == "Unexpected end of input: expected a number"
        assert str(IntegerOverflow(128, 8)) == (
            "Integer overflow: 128 does not fit in a signed 8-bit integer"
        )


class TestErrorContext:
    def test_format_marks_position(self) -> None:
        ctx = ErrorContext(source="5 * 3", pos=2)
        assert ctx.format() == "5 * 3\n  ^"
        assert ctx.column == 3

    def test_format_flattens_whitespace(self) -> None:
        ctx = ErrorContext(source="5\t*\n3", pos=2)
        assert ctx.format() == "5 * 3\n  ^"

    def test_make_context_without_source(self) -> None:
        assert make_context(None, 4) is None

    def test_describe_includes_snippet(self) -> None:
        with pytest.raises(UnexpectedEndOfInput) as exc_info:
            parse_expr("5 +")
        assert exc_info.value.describe() == (
            "Unexpected end of input: expected a number\n5 +\n   ^"
        )

    def test_describe_without_context(self) -> None:
        assert InvalidOperator("*").describe() == "Invalid operator: '*'"
