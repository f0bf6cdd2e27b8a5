"""
Environment configuration for lrexpr evaluation.

Evaluation is unbounded by default: Python integers never overflow. Setting
LREXPR_INT_BITS bounds every literal and intermediate result to a signed
integer of that width, and out-of-range values raise IntegerOverflow instead
of wrapping.

Usage:
    from lrexpr.core.environment import get_settings

    settings = get_settings()  # reads LREXPR_INT_BITS
    evaluate("2147483647 + 1", settings)
"""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

# Environment variable name
INT_BITS_ENV_VAR = "LREXPR_INT_BITS"


class EvaluatorSettings(BaseModel):
    """Settings applied while interpreting an expression tree."""

    int_bits: int | None = Field(
        default=None,
        gt=0,
        description="Signed integer width for overflow checks; None means unbounded",
    )

    model_config = ConfigDict(frozen=True)

    @property
    def bounds(self) -> tuple[int, int] | None:
        """Inclusive (min, max) range, or None when unbounded."""
        if self.int_bits is None:
            return None
        return -(1 << (self.int_bits - 1)), (1 << (self.int_bits - 1)) - 1


def get_int_bits() -> int | None:
    """Get the configured integer width from LREXPR_INT_BITS.

    Returns:
        The width in bits, or None if the variable is unset, empty or invalid.

    Examples:
        >>> import os
        >>> os.environ["LREXPR_INT_BITS"] = "32"
        >>> get_int_bits()
        32
    """
    raw = os.environ.get(INT_BITS_ENV_VAR, "").strip()
    if raw == "":
        return None
    try:
        bits = int(raw)
    except ValueError:
        bits = 0
    if bits <= 0:
        logger.warning(
            "Invalid %s value '%s'. Expected a positive integer. Defaulting to unbounded.",
            INT_BITS_ENV_VAR,
            raw,
        )
        return None
    return bits


def get_settings() -> EvaluatorSettings:
    """Build EvaluatorSettings from the environment."""
    return EvaluatorSettings(int_bits=get_int_bits())
