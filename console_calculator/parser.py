"""Recursive-descent parser for arithmetic expressions.

Grammar:
    expression := term (operator term)*
    term       := number | '(' expression ')'
    number     := ['+'|'-'] digits? '.'? digits?   (at least one digit)
    operator   := '+' | '-' | '*' | '/' | '^' | '%'

``+`` and ``-`` are both sign prefixes and binary operators. Which one a
character is depends only on the kind of the previous sibling item, carried
explicitly as a ParseState. One character of lookahead is enough; the parser
never backtracks.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

import numpy as np

from console_calculator.errors import ParseError, ParseErrorKind
from console_calculator.models import ExpressionItem, Group, Operand, OperatorItem
from console_calculator.operators import OPERATOR_SYMBOLS, Operator

logger = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")
_SIGNS = frozenset("+-")


class ParseState(str, Enum):
    """What the parser must read next."""

    EXPECT_OPERAND = "expect-operand"
    EXPECT_OPERATOR = "expect-operator"


def expected_after(last: Optional[ExpressionItem]) -> ParseState:
    """Parse state implied by the most recently appended sibling."""
    if last is None or isinstance(last, OperatorItem):
        return ParseState.EXPECT_OPERAND
    return ParseState.EXPECT_OPERATOR


class ExpressionBuilder:
    """Builds an expression tree from text, one item at a time."""

    def __init__(self, expression: str) -> None:
        self._text = expression
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    # ------------------------------------------------------------------
    # Character cursor
    # ------------------------------------------------------------------

    def _peek(self) -> Optional[str]:
        if self._pos < len(self._text):
            return self._text[self._pos]
        return None

    def _at_end(self) -> bool:
        return self._pos >= len(self._text)

    def _next_if(self, predicate: Callable[[str], bool]) -> Optional[str]:
        """Consume and return the next character if it satisfies predicate."""
        ch = self._peek()
        if ch is not None and predicate(ch):
            self._pos += 1
            return ch
        return None

    def _next_if_eq(self, expected: str) -> bool:
        return self._next_if(lambda ch: ch == expected) is not None

    def _skip_whitespace(self) -> None:
        while self._next_if(str.isspace) is not None:
            pass

    def _error(self, kind: ParseErrorKind, position: Optional[int] = None) -> ParseError:
        return ParseError(kind, self._pos if position is None else position)

    # ------------------------------------------------------------------
    # Tokens
    # ------------------------------------------------------------------

    def get_operator(self) -> Optional[Operator]:
        """Consume one operator character, if the next character is one."""
        symbol = self._next_if(lambda ch: ch in OPERATOR_SYMBOLS)
        if symbol is None:
            return None
        return Operator.from_symbol(symbol)

    def get_operand(self) -> Optional[Operand]:
        """Consume a number literal.

        Returns None without consuming anything when the next character
        cannot start a number. A sign that is not followed by at least one
        digit is an error, since a lone sign is not an operand.
        """
        start = self._pos
        chars: list[str] = []
        sign = self._next_if(lambda ch: ch in _SIGNS)
        if sign is not None:
            chars.append(sign)

        has_digit = False
        has_point = False
        while True:
            ch = self._next_if(lambda c: c in _DIGITS or (c == "." and not has_point))
            if ch is None:
                break
            if ch == ".":
                has_point = True
            else:
                has_digit = True
            chars.append(ch)

        if not has_digit:
            if self._pos != start:
                raise self._error(ParseErrorKind.EXPECTED_OPERAND, start)
            return None

        with np.errstate(over="ignore"):
            value = np.float32(float("".join(chars)))
        return Operand(value)

    def get_next(self, state: ParseState) -> ExpressionItem:
        """Read the next sibling item required by ``state``.

        Raises:
            ParseError: EXPECTED_OPERAND or EXPECTED_OPERATOR when the
                input does not provide what ``state`` requires, or
                EXPECTED_CLOSING_PARENTHESES from a nested group.
        """
        if state is ParseState.EXPECT_OPERAND:
            operand = self.get_operand()
            if operand is not None:
                return operand
            group = self.get_parentheses()
            if group is not None:
                return group
            raise self._error(ParseErrorKind.EXPECTED_OPERAND)

        operator = self.get_operator()
        if operator is None:
            raise self._error(ParseErrorKind.EXPECTED_OPERATOR)
        return OperatorItem(operator)

    # ------------------------------------------------------------------
    # Sequences
    # ------------------------------------------------------------------

    def get_parentheses(self) -> Optional[Group]:
        """Consume a parenthesized group, if the next character opens one.

        An empty group ``()`` is accepted here; evaluating it fails later.
        """
        if not self._next_if_eq("("):
            return None
        items: list[ExpressionItem] = []
        while True:
            self._skip_whitespace()
            if self._at_end():
                raise self._error(ParseErrorKind.EXPECTED_CLOSING_PARENTHESES)
            if self._next_if_eq(")"):
                break
            items.append(self.get_next(expected_after(items[-1] if items else None)))

        if items and isinstance(items[-1], OperatorItem):
            raise self._error(ParseErrorKind.EXPECTED_OPERAND, self._pos - 1)
        return Group(tuple(items))

    def get_expression(self) -> Group:
        """Parse the whole input as the implicit top-level group."""
        items: list[ExpressionItem] = []
        while True:
            self._skip_whitespace()
            if self._at_end():
                break
            items.append(self.get_next(expected_after(items[-1] if items else None)))

        if not items or isinstance(items[-1], OperatorItem):
            raise self._error(ParseErrorKind.EXPECTED_OPERAND)
        return Group(tuple(items))


def parse(expression: str) -> Group:
    """Parse ``expression`` into a tree rooted at the top-level Group.

    Raises:
        ParseError: if the text does not match the grammar.
    """
    tree = ExpressionBuilder(expression).get_expression()
    logger.debug("parsed %r as %s", expression, tree)
    return tree
