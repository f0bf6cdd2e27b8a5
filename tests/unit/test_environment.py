"""Tests for integer width configuration and overflow checks."""

import logging

import pytest
from pydantic import ValidationError

from lrexpr.core.environment import (
    INT_BITS_ENV_VAR,
    EvaluatorSettings,
    get_int_bits,
    get_settings,
)
from lrexpr.core.errors import IntegerOverflow
from lrexpr.core.expression_lang.evaluator import evaluate


class TestGetIntBits:
    def test_unset(self) -> None:
        assert get_int_bits() is None

    def test_empty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(INT_BITS_ENV_VAR, "  ")
        assert get_int_bits() is None

    def test_valid(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(INT_BITS_ENV_VAR, "32")
        assert get_int_bits() == 32
        assert get_settings() == EvaluatorSettings(int_bits=32)

    @pytest.mark.parametrize("raw", ["abc", "0", "-8"])
    def test_invalid_warns(
        self, raw: str, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv(INT_BITS_ENV_VAR, raw)
        with caplog.at_level(logging.WARNING, logger="lrexpr.core.environment"):
            assert get_int_bits() is None
        assert INT_BITS_ENV_VAR in caplog.text


class TestEvaluatorSettings:
    def test_default_unbounded(self) -> None:
        settings = EvaluatorSettings()
        assert settings.int_bits is None
        assert settings.bounds is None

    def test_bounds(self) -> None:
        assert EvaluatorSettings(int_bits=8).bounds == (-128, 127)
        assert EvaluatorSettings(int_bits=32).bounds == (-2147483648, 2147483647)

    def test_rejects_non_positive(self) -> None:
        with pytest.raises(ValidationError):
            EvaluatorSettings(int_bits=0)


class TestOverflow:
    int32 = EvaluatorSettings(int_bits=32)

    def test_within_range(self) -> None:
        assert evaluate("2147483647 - 1 + 1", self.int32) == 2147483647
        assert evaluate("-2147483648", self.int32) == -2147483648

    def test_result_overflow(self) -> None:
        with pytest.raises(IntegerOverflow) as exc_info:
            evaluate("2147483647 + 1", self.int32)
        assert exc_info.value.value == 2147483648
        assert exc_info.value.bits == 32

    def test_intermediate_overflow(self) -> None:
        with pytest.raises(IntegerOverflow):
            evaluate("2147483647 + 1 - 1", self.int32)

    def test_underflow(self) -> None:
        with pytest.raises(IntegerOverflow):
            evaluate("-2147483648 - 1", self.int32)

    def test_literal_out_of_range(self) -> None:
        with pytest.raises(IntegerOverflow):
            evaluate("2147483648", self.int32)

    def test_unbounded_by_default(self) -> None:
        assert evaluate("2147483647 + 1") == 2147483648
