"""Error taxonomy for parsing, evaluation and checked arithmetic.

Three layers, each composable into the one above it:

    ParseError       : the text does not match the grammar
    MathError        : a primitive operation produced a sentinel float
    EvaluationError  : structural defect in a tree, or a wrapped error
                       from one of the layers above

Every error carries a ``kind`` enum so callers can branch on the exact
failure without matching on message text.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union


class CalculatorError(Exception):
    """Base class for every error raised by console_calculator."""


class ParseErrorKind(str, Enum):
    EXPECTED_OPERAND = "expected-operand"
    EXPECTED_OPERATOR = "expected-operator"
    EXPECTED_CLOSING_PARENTHESES = "expected-closing-parentheses"


class MathErrorKind(str, Enum):
    DIVISION_BY_0 = "division-by-0"
    OVERFLOW = "overflow"
    UNDERFLOW = "underflow"
    INFINITY = "infinity"
    NEGATIVE_INFINITY = "negative-infinity"
    NAN = "nan"


class EvaluationErrorKind(str, Enum):
    EXPECTED_OPERAND = "expected-operand"
    EXPECTED_OPERATOR = "expected-operator"
    MATH = "math"
    PARSE = "parse"


_PARSE_MESSAGES = {
    ParseErrorKind.EXPECTED_OPERAND: "Expected operand.",
    ParseErrorKind.EXPECTED_OPERATOR: "Expected operator.",
    ParseErrorKind.EXPECTED_CLOSING_PARENTHESES: "Expected closing parentheses.",
}

_MATH_MESSAGES = {
    MathErrorKind.DIVISION_BY_0: "Division by zero.",
    MathErrorKind.OVERFLOW: "Result overflows the largest representable value.",
    MathErrorKind.UNDERFLOW: "Result underflows the smallest representable value.",
    MathErrorKind.INFINITY: "Result is infinite.",
    MathErrorKind.NEGATIVE_INFINITY: "Result is negative infinite.",
    MathErrorKind.NAN: "Result is not a number.",
}

_EVALUATION_MESSAGES = {
    EvaluationErrorKind.EXPECTED_OPERAND: "Expected operand.",
    EvaluationErrorKind.EXPECTED_OPERATOR: "Expected operator.",
}


class ParseError(CalculatorError, ValueError):
    """Raised when the input text does not match the expression grammar."""

    def __init__(self, kind: ParseErrorKind, position: int = 0) -> None:
        self.kind = kind
        self.position = position
        super().__init__(_PARSE_MESSAGES[kind])

    @property
    def message(self) -> str:
        return _PARSE_MESSAGES[self.kind]


class MathError(CalculatorError, ArithmeticError):
    """Raised when checked arithmetic classifies a result as an error."""

    def __init__(self, kind: MathErrorKind) -> None:
        self.kind = kind
        super().__init__(_MATH_MESSAGES[kind])

    @property
    def message(self) -> str:
        return _MATH_MESSAGES[self.kind]


class EvaluationError(CalculatorError):
    """Raised when a tree cannot be reduced to a single value.

    For kinds MATH and PARSE the underlying error is kept on ``cause`` and
    its message is reused.
    """

    def __init__(
        self,
        kind: EvaluationErrorKind,
        cause: Optional[Union[MathError, ParseError]] = None,
    ) -> None:
        self.kind = kind
        self.cause = cause
        super().__init__(self.message)

    @classmethod
    def from_math_error(cls, err: MathError) -> EvaluationError:
        return cls(EvaluationErrorKind.MATH, cause=err)

    @classmethod
    def from_parse_error(cls, err: ParseError) -> EvaluationError:
        return cls(EvaluationErrorKind.PARSE, cause=err)

    @property
    def message(self) -> str:
        if self.cause is not None:
            return self.cause.message
        return _EVALUATION_MESSAGES[self.kind]


class OperatorError(CalculatorError, ValueError):
    """Raised for a character that is not one of the six operators."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Unexpected operator: {symbol!r}")
