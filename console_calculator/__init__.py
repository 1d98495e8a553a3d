"""console_calculator: parse and evaluate arithmetic expressions.

Parses text with six binary operators (+ - * / ^ %) and nested parentheses
into an expression tree, then reduces it to a single-precision result.
Overflow, underflow, NaN, infinities and division by zero are raised as
typed errors instead of leaking IEEE-754 sentinel values.

Usage:
    python -m console_calculator -e "2 + 3 * 4"     # 14
    python -m console_calculator -e "(2+3)*4" -t    # show the parsed tree
    python -m console_calculator --version
"""

__version__ = "1.0.0"

from console_calculator.errors import (
    CalculatorError,
    EvaluationError,
    EvaluationErrorKind,
    MathError,
    MathErrorKind,
    OperatorError,
    ParseError,
    ParseErrorKind,
)
from console_calculator.evaluator import evaluate, evaluate_text
from console_calculator.models import ExpressionItem, Group, Operand, OperatorItem
from console_calculator.operators import Operator, Tier
from console_calculator.parser import parse

__all__ = [
    "CalculatorError",
    "EvaluationError",
    "EvaluationErrorKind",
    "ExpressionItem",
    "Group",
    "MathError",
    "MathErrorKind",
    "Operand",
    "Operator",
    "OperatorError",
    "OperatorItem",
    "ParseError",
    "ParseErrorKind",
    "Tier",
    "evaluate",
    "evaluate_text",
    "parse",
]
