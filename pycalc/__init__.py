# Import modules
from pycalc import (
    errors,
    expression,
    report,
)

# Import frequently used functions and classes
from pycalc.expression import (
    CommonExpressionValidator,
    Expression,
    Token,
    TokenKind,
    ValidationResult,
    check,
    validate,
)
from pycalc.options import get_option, option_context, set_option
from pycalc.report import adjacency_table, validation_table

__all__ = [
    "CommonExpressionValidator",
    "Expression",
    "Token",
    "TokenKind",
    "ValidationResult",
    "adjacency_table",
    "check",
    "errors",
    "expression",
    "get_option",
    "option_context",
    "report",
    "set_option",
    "validate",
    "validation_table",
]

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pycalc")
except PackageNotFoundError:
    __version__ = "unknown"
