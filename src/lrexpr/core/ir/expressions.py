"""
Expression types for lrexpr IR.

An expression is either an integer literal or a binary addition/subtraction.
The parser only ever produces left-leaning chains:

    "5 + 3 - 2"  ->  BinaryExpr(SUB, BinaryExpr(ADD, 5, 3), 2)

Nodes are frozen; a tree is built for one input, evaluated once and dropped.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary operators for expressions."""

    ADD = "+"
    SUB = "-"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Literal(BaseModel):
    """An integer literal."""

    value: int = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.value)


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOp
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        spine: list[BinaryExpr] = []
        node: Expr = self
        while isinstance(node, BinaryExpr):
            spine.append(node)
            node = node.left
        parts = ["(" * len(spine), str(node)]
        for binary in reversed(spine):
            parts.append(f" {binary.op.value} {binary.right})")
        return "".join(parts)

    @property
    def depth(self) -> int:
        """Number of operators along the left spine, this node included."""
        count = 0
        node: Expr = self
        while isinstance(node, BinaryExpr):
            count += 1
            node = node.left
        return count


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Literal | BinaryExpr

# Rebuild models for recursive forward references
BinaryExpr.model_rebuild()
