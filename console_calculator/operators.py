"""Binary operators and their precedence tiers.

Operator is a str enum keyed by its source character, so ``Operator("+")``
and ``Operator.ADD.value`` map both ways between symbol and member.
"""

from __future__ import annotations

from enum import Enum, IntEnum

from console_calculator.errors import OperatorError


class Tier(IntEnum):
    """Precedence tiers, reduced in ascending order."""

    POWER = 1
    MULTIPLICATIVE = 2
    ADDITIVE = 3

    @property
    def operators(self) -> frozenset[Operator]:
        return frozenset(op for op in Operator if op.tier is self)


class Operator(str, Enum):
    """The six binary arithmetic operators."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"
    REMAINDER = "%"

    @classmethod
    def from_symbol(cls, symbol: str) -> Operator:
        """Look up the operator for a source character.

        Raises:
            OperatorError: if ``symbol`` is not one of ``+ - * / ^ %``.
        """
        try:
            return cls(symbol)
        except ValueError:
            raise OperatorError(symbol) from None

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def tier(self) -> Tier:
        return _TIERS[self]

    def __str__(self) -> str:
        return self.value


_TIERS: dict[Operator, Tier] = {
    Operator.POWER: Tier.POWER,
    Operator.MULTIPLY: Tier.MULTIPLICATIVE,
    Operator.DIVIDE: Tier.MULTIPLICATIVE,
    Operator.REMAINDER: Tier.MULTIPLICATIVE,
    Operator.ADD: Tier.ADDITIVE,
    Operator.SUBTRACT: Tier.ADDITIVE,
}

OPERATOR_SYMBOLS = frozenset(op.value for op in Operator)

# Reduction order used by the evaluator.
TIER_ORDER = (Tier.POWER, Tier.MULTIPLICATIVE, Tier.ADDITIVE)
