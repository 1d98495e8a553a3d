"""Checked single-precision arithmetic.

Each operation runs with plain IEEE-754 float32 semantics and then
classifies the outcome: NaN, the infinities and the two finite boundary
values become MathError instead of flowing on as sentinel values.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from console_calculator.errors import MathError, MathErrorKind
from console_calculator.operators import Operator

FLOAT32_MAX = np.finfo(np.float32).max
FLOAT32_MIN = np.finfo(np.float32).min


def classify(outcome: np.float32) -> np.float32:
    """Return ``outcome`` unchanged or raise the MathError it represents.

    Boundary detection is exact equality with the largest and most negative
    finite float32, so a legitimate result that lands on either value is
    reported as Overflow/Underflow.
    """
    if np.isnan(outcome):
        raise MathError(MathErrorKind.NAN)
    if outcome == np.inf:
        raise MathError(MathErrorKind.INFINITY)
    if outcome == -np.inf:
        raise MathError(MathErrorKind.NEGATIVE_INFINITY)
    if outcome == FLOAT32_MAX:
        raise MathError(MathErrorKind.OVERFLOW)
    if outcome == FLOAT32_MIN:
        raise MathError(MathErrorKind.UNDERFLOW)
    return outcome


def _run(primitive: Callable, left: float, right: float) -> np.float32:
    # Overflow/invalid warnings are expected here; classify() reports them.
    with np.errstate(all="ignore"):
        outcome = np.float32(primitive(np.float32(left), np.float32(right)))
    return classify(outcome)


def add(left: float, right: float) -> np.float32:
    return _run(np.add, left, right)


def subtract(left: float, right: float) -> np.float32:
    return _run(np.subtract, left, right)


def multiply(left: float, right: float) -> np.float32:
    return _run(np.multiply, left, right)


def divide(left: float, right: float) -> np.float32:
    """Divide, rejecting a zero divisor of either sign before dividing."""
    if right == 0:
        raise MathError(MathErrorKind.DIVISION_BY_0)
    return _run(np.divide, left, right)


def remainder(left: float, right: float) -> np.float32:
    """Truncated remainder; the result takes the sign of the dividend."""
    return _run(np.fmod, left, right)


def power(left: float, right: float) -> np.float32:
    return _run(np.power, left, right)


_OPERATIONS: dict[Operator, Callable[[float, float], np.float32]] = {
    Operator.ADD: add,
    Operator.SUBTRACT: subtract,
    Operator.MULTIPLY: multiply,
    Operator.DIVIDE: divide,
    Operator.REMAINDER: remainder,
    Operator.POWER: power,
}


def checked(left: float, operator: Operator, right: float) -> np.float32:
    """Apply ``operator`` to the operands with checked arithmetic.

    Args:
        left: Left operand.
        operator: One of the six binary operators.
        right: Right operand.

    Returns:
        The float32 result.

    Raises:
        MathError: if the result is NaN, infinite, or a float32 boundary
            value, or on division by zero.
    """
    return _OPERATIONS[operator](left, right)
