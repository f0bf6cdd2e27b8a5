"""Shared pytest fixtures for lrexpr tests."""

import pytest

from lrexpr.core.environment import INT_BITS_ENV_VAR


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test without an integer width configured."""
    monkeypatch.delenv(INT_BITS_ENV_VAR, raising=False)


@pytest.fixture
def sample_expression() -> str:
    """The expression the interpreter demo evaluates."""
    return "5 + 3 - 2 + 10 - 4"
