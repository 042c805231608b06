"""
Expression submodule for pycalc.

Main Components
---------------
- Token, TokenKind, Expression: tokenized expressions
- CommonExpressionValidator: checks an expression before evaluation
- validate, check: raising and non-raising entry points

Examples
--------
>>> from pycalc.expression import Token, validate
>>> validate([Token.operand("1"), Token.operator("+"), Token.operand("2")])
"""

from .core import Expression, Token, TokenKind, TokenSequence
from .validation import (
    CommonExpressionValidator,
    ExpressionValidator,
    FailureReason,
    ValidationResult,
    check,
    validate,
)

__all__ = [
    "CommonExpressionValidator",
    "Expression",
    "ExpressionValidator",
    "FailureReason",
    "Token",
    "TokenKind",
    "TokenSequence",
    "ValidationResult",
    "check",
    "validate",
]
