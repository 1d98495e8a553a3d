"""Tests for checked float32 arithmetic and its result classification."""

import numpy as np
import pytest

from console_calculator import checked as ops
from console_calculator.errors import MathError, MathErrorKind
from console_calculator.operators import Operator

MAX = np.finfo(np.float32).max
MIN = np.finfo(np.float32).min


def _kind(fn, left, right) -> MathErrorKind:
    with pytest.raises(MathError) as exc_info:
        fn(left, right)
    return exc_info.value.kind


# --- Plain results ---

@pytest.mark.parametrize(
    "operator, expected",
    [
        (Operator.ADD, 8.0),
        (Operator.SUBTRACT, 4.0),
        (Operator.MULTIPLY, 12.0),
        (Operator.DIVIDE, 3.0),
        (Operator.REMAINDER, 0.0),
        (Operator.POWER, 36.0),
    ],
)
def test_checked_dispatch(operator, expected):
    result = ops.checked(6.0, operator, 2.0)
    assert isinstance(result, np.float32)
    assert result == expected


def test_results_are_float32():
    assert ops.add(0.1, 0.2) == np.float32(0.1) + np.float32(0.2)


def test_remainder_is_truncated():
    assert ops.remainder(-7.0, 3.0) == -1.0
    assert ops.remainder(7.0, -3.0) == 1.0


# --- Division by zero ---

@pytest.mark.parametrize("zero", [0.0, -0.0])
def test_divide_by_zero_either_sign(zero):
    assert _kind(ops.divide, 1.0, zero) is MathErrorKind.DIVISION_BY_0


def test_divide_zero_by_zero():
    assert _kind(ops.divide, 0.0, 0.0) is MathErrorKind.DIVISION_BY_0


# --- Sentinel classification ---

def test_nan():
    assert _kind(ops.remainder, 1.0, 0.0) is MathErrorKind.NAN
    assert _kind(ops.power, -8.0, 0.5) is MathErrorKind.NAN


def test_infinity():
    assert _kind(ops.multiply, MAX, 2.0) is MathErrorKind.INFINITY
    assert _kind(ops.power, 0.0, -1.0) is MathErrorKind.INFINITY


def test_negative_infinity():
    assert _kind(ops.multiply, MIN, 2.0) is MathErrorKind.NEGATIVE_INFINITY
    assert _kind(ops.subtract, MIN, MAX) is MathErrorKind.NEGATIVE_INFINITY


def test_max_plus_one_overflows():
    assert _kind(ops.add, MAX, 1.0) is MathErrorKind.OVERFLOW


def test_min_minus_one_underflows():
    assert _kind(ops.subtract, MIN, 1.0) is MathErrorKind.UNDERFLOW


def test_landing_exactly_on_max_is_overflow():
    assert _kind(ops.multiply, MAX, 1.0) is MathErrorKind.OVERFLOW


def test_nan_operand_is_reported():
    assert _kind(ops.add, float("nan"), 1.0) is MathErrorKind.NAN


def test_math_error_is_arithmetic_error():
    with pytest.raises(ArithmeticError):
        ops.divide(1.0, 0.0)


def test_math_error_messages():
    with pytest.raises(MathError, match="Division by zero"):
        ops.divide(1.0, 0.0)
