"""
Validation components for tokenized expressions.

This submodule contains the adjacency rules, the validators and the
validation result type.
"""

from ..core.adjacency import ADJACENCY_TABLE, allowed_successors, may_precede
from .results import FailureReason, ValidationResult
from .validators import (
    CommonExpressionValidator,
    ExpressionValidator,
    check,
    get_message,
    validate,
)

__all__ = [
    "ADJACENCY_TABLE",
    "CommonExpressionValidator",
    "ExpressionValidator",
    "FailureReason",
    "ValidationResult",
    "allowed_successors",
    "check",
    "get_message",
    "may_precede",
    "validate",
]
