"""Precedence-based evaluator for expression trees.

Each Group is reduced in three steps:

1. Resolve children: nested groups are evaluated first (post-order) and
   replaced by operands, leaving a flat Operand/Operator sequence.
2. Reduce by tier: one left-to-right pass per tier (power, then
   multiplicative, then additive). Operators of the current tier are
   applied; all others pass through to the next tier.
3. Exactly one operand must remain; it is the value of the group.

Because every tier is a single forward sweep, operators inside one tier are
left-associative, power included: ``2^3^2`` is ``(2^3)^2 == 64``.
"""

from __future__ import annotations

import logging
from typing import Union

from console_calculator.checked import checked, classify
from console_calculator.errors import EvaluationError, EvaluationErrorKind, MathError, ParseError
from console_calculator.models import ExpressionItem, Group, Operand, OperatorItem
from console_calculator.operators import TIER_ORDER, Operator, Tier
from console_calculator.parser import parse

logger = logging.getLogger(__name__)

# A flattened sibling sequence contains no groups.
FlatItem = Union[Operand, OperatorItem]


def _expected_operand() -> EvaluationError:
    return EvaluationError(EvaluationErrorKind.EXPECTED_OPERAND)


def _expected_operator() -> EvaluationError:
    return EvaluationError(EvaluationErrorKind.EXPECTED_OPERATOR)


def apply_operator(left: Operand, operator: Operator, right: Operand) -> Operand:
    """Apply one binary operation, wrapping math errors for the evaluator."""
    try:
        return Operand(checked(left.value, operator, right.value))
    except MathError as err:
        raise EvaluationError.from_math_error(err) from err


def _checked_value(operand: Operand) -> float:
    """Classify a value no arithmetic has touched, e.g. a lone literal."""
    try:
        return float(classify(operand.value))
    except MathError as err:
        raise EvaluationError.from_math_error(err) from err


def resolve_children(group: Group) -> list[FlatItem]:
    """Replace every child group with an operand holding its value."""
    flat: list[FlatItem] = []
    for child in group:
        if isinstance(child, Group):
            flat.append(Operand(evaluate(child)))
        else:
            flat.append(child)
    return flat


def _take_operand(item: ExpressionItem) -> Operand:
    if isinstance(item, Operand):
        return item
    raise _expected_operand()


def _take_operator(item: ExpressionItem) -> Operator:
    if isinstance(item, OperatorItem):
        return item.op
    raise _expected_operator()


def reduce_tier(tokens: list[FlatItem], tier: Tier) -> list[FlatItem]:
    """Apply every operator of ``tier`` in one left-to-right pass.

    Args:
        tokens: Alternating Operand/OperatorItem sequence, starting and
            ending on an operand.
        tier: The precedence tier to collapse.

    Returns:
        A new sequence where each ``left op right`` with ``op`` in ``tier``
        is replaced by its result. Pairs of other tiers are kept as is.

    Raises:
        EvaluationError: EXPECTED_OPERAND / EXPECTED_OPERATOR when the
            sequence does not alternate, or MATH from checked arithmetic.
    """
    if not tokens:
        raise _expected_operand()

    accumulator: list[FlatItem] = [_take_operand(tokens[0])]
    rest = tokens[1:]
    for index in range(0, len(rest), 2):
        operator = _take_operator(rest[index])
        if index + 1 >= len(rest):
            raise _expected_operand()
        right = _take_operand(rest[index + 1])
        left = accumulator.pop()
        if operator.tier is tier:
            accumulator.append(apply_operator(left, operator, right))
        else:
            accumulator.extend([left, OperatorItem(operator), right])
    return accumulator


def evaluate_group(group: Group) -> float:
    tokens = resolve_children(group)
    for tier in TIER_ORDER:
        tokens = reduce_tier(tokens, tier)
        logger.debug("after %s tier: %s", tier.name.lower(), "".join(str(t) for t in tokens))

    if len(tokens) != 1:
        raise _expected_operator()
    return _checked_value(_take_operand(tokens[0]))


def evaluate(item: ExpressionItem) -> float:
    """Reduce an expression item to a single float.

    Raises:
        EvaluationError: on a structurally malformed tree (including the
            empty group) or when checked arithmetic reports a MathError.
    """
    if isinstance(item, Operand):
        return _checked_value(item)
    if isinstance(item, OperatorItem):
        raise _expected_operand()
    return evaluate_group(item)


def evaluate_text(expression: str) -> float:
    """Parse and evaluate ``expression``.

    Parse failures are wrapped in EvaluationError with kind PARSE, so a
    caller only has to handle one error type.
    """
    try:
        tree = parse(expression)
    except ParseError as err:
        raise EvaluationError.from_parse_error(err) from err
    return evaluate(tree)
