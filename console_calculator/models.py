"""Data models for the expression tree.

Operand, OperatorItem and Group are the three variants of ExpressionItem,
the typed structures that flow through parser → evaluator → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union

import numpy as np

from console_calculator.operators import Operator


# Shortest decimal literal that rounds past float32 max, i.e. to infinity.
OVERFLOW_LITERAL = "34028237" + "0" * 31


def format_value(value: float) -> str:
    """Render a float32 as its shortest positional decimal text.

    Exponent notation is never used, so the output is always re-parseable:
    1.0 → '1', 2.5 → '2.5', 1e-3 → '0.001'. An infinite value (only
    produced by an out-of-range literal) renders as OVERFLOW_LITERAL with
    its sign, which parses back to the same infinity.
    """
    value = np.float32(value)
    if np.isinf(value):
        return OVERFLOW_LITERAL if value > 0 else "-" + OVERFLOW_LITERAL
    return np.format_float_positional(value, trim="-")


@dataclass(frozen=True)
class Operand:
    """A literal number, stored at single precision."""

    value: np.float32

    def __post_init__(self) -> None:
        with np.errstate(over="ignore"):
            object.__setattr__(self, "value", np.float32(self.value))

    def __str__(self) -> str:
        return format_value(self.value)


@dataclass(frozen=True)
class OperatorItem:
    """A binary operator token."""

    op: Operator

    def __str__(self) -> str:
        return self.op.symbol


@dataclass(frozen=True)
class Group:
    """A parenthesized sub-expression owning its children.

    The parser also returns the whole input as a Group (the implicit
    top-level parenthesis).
    """

    children: tuple[ExpressionItem, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))

    def __iter__(self) -> Iterator[ExpressionItem]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def inner_text(self) -> str:
        """Children rendered back to back, without the outer parentheses."""
        return "".join(str(child) for child in self.children)

    def __str__(self) -> str:
        return f"({self.inner_text()})"


ExpressionItem = Union[Operand, OperatorItem, Group]
