"""Tests for tree evaluation and precedence-tier reduction.

Trees are built by hand here so malformed shapes the parser never produces
can reach the evaluator.
"""

import pytest

from console_calculator.errors import EvaluationError, EvaluationErrorKind, MathError, MathErrorKind
from console_calculator.evaluator import evaluate, reduce_tier, resolve_children
from console_calculator.models import Group, Operand, OperatorItem
from console_calculator.operators import Operator, Tier

ADD = OperatorItem(Operator.ADD)
SUB = OperatorItem(Operator.SUBTRACT)
MUL = OperatorItem(Operator.MULTIPLY)
DIV = OperatorItem(Operator.DIVIDE)
POW = OperatorItem(Operator.POWER)


def n(value: float) -> Operand:
    return Operand(value)


def _error(item) -> EvaluationError:
    with pytest.raises(EvaluationError) as exc_info:
        evaluate(item)
    return exc_info.value


# --- reduce_tier ---

def test_reduce_tier_applies_only_current_tier():
    tokens = [n(2), ADD, n(3), MUL, n(4)]
    assert reduce_tier(tokens, Tier.MULTIPLICATIVE) == [n(2), ADD, n(12)]


def test_reduce_tier_passes_other_tiers_through():
    tokens = [n(2), ADD, n(3), MUL, n(4)]
    assert reduce_tier(tokens, Tier.POWER) == tokens


def test_reduce_tier_collapses_runs_left_to_right():
    tokens = [n(2), POW, n(3), POW, n(2)]
    assert reduce_tier(tokens, Tier.POWER) == [n(64)]


def test_reduce_tier_does_not_mutate_input():
    tokens = [n(1), ADD, n(1)]
    reduce_tier(tokens, Tier.ADDITIVE)
    assert tokens == [n(1), ADD, n(1)]


def test_reduce_tier_empty():
    with pytest.raises(EvaluationError) as exc_info:
        reduce_tier([], Tier.ADDITIVE)
    assert exc_info.value.kind is EvaluationErrorKind.EXPECTED_OPERAND


def test_reduce_tier_wraps_math_error():
    with pytest.raises(EvaluationError) as exc_info:
        reduce_tier([n(1), DIV, n(0)], Tier.MULTIPLICATIVE)
    err = exc_info.value
    assert err.kind is EvaluationErrorKind.MATH
    assert isinstance(err.__cause__, MathError)
    assert err.cause.kind is MathErrorKind.DIVISION_BY_0


# --- resolve_children ---

def test_resolve_children_flattens_groups():
    group = Group((n(1), ADD, Group((n(2), MUL, n(3)))))
    assert resolve_children(group) == [n(1), ADD, n(6)]


# --- evaluate ---

def test_evaluate_operand():
    assert evaluate(n(2.5)) == 2.5


def test_evaluate_group():
    assert evaluate(Group((n(2), ADD, n(3), MUL, n(4)))) == 14.0


def test_evaluate_nested():
    inner = Group((n(2), ADD, n(3)))
    assert evaluate(Group((inner, MUL, n(4)))) == 20.0


def test_evaluate_returns_python_float():
    assert type(evaluate(Group((n(1), ADD, n(1))))) is float


def test_evaluate_does_not_mutate_tree():
    tree = Group((Group((n(1), SUB, n(1))), ADD, n(2)))
    evaluate(tree)
    assert tree == Group((Group((n(1), SUB, n(1))), ADD, n(2)))


# --- Structural errors ---

def test_empty_group():
    assert _error(Group(())).kind is EvaluationErrorKind.EXPECTED_OPERAND


def test_bare_operator():
    assert _error(ADD).kind is EvaluationErrorKind.EXPECTED_OPERAND


def test_trailing_operator():
    assert _error(Group((n(1), ADD))).kind is EvaluationErrorKind.EXPECTED_OPERAND


def test_leading_operator():
    assert _error(Group((ADD, n(1)))).kind is EvaluationErrorKind.EXPECTED_OPERAND


def test_adjacent_operands():
    assert _error(Group((n(1), n(2)))).kind is EvaluationErrorKind.EXPECTED_OPERATOR


def test_adjacent_operators():
    assert _error(Group((n(1), ADD, SUB, n(2)))).kind is EvaluationErrorKind.EXPECTED_OPERAND


def test_operand_next_to_group():
    tree = Group((n(1), Group((n(2),))))
    assert _error(tree).kind is EvaluationErrorKind.EXPECTED_OPERATOR


def test_structural_error_messages():
    assert str(_error(Group(()))) == "Expected operand."
    assert str(_error(Group((n(1), n(2))))) == "Expected operator."
