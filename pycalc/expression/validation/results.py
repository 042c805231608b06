from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pycalc.errors import (
    EmptyExpressionError,
    IllegalExpressionOrderError,
    InvalidExpressionError,
    UnbalancedBracketsError,
)


class FailureReason(Enum):
    """Reason categories for a rejected expression."""

    EMPTY = "empty"
    UNBALANCED_BRACKETS = "unbalanced brackets"
    ILLEGAL_ORDER = "illegal order"


_ERRORS: dict[FailureReason, type[InvalidExpressionError]] = {
    FailureReason.EMPTY: EmptyExpressionError,
    FailureReason.UNBALANCED_BRACKETS: UnbalancedBracketsError,
    FailureReason.ILLEGAL_ORDER: IllegalExpressionOrderError,
}


@dataclass(frozen=True)
class ValidationResult:
    """
    The outcome of validating one expression.

    Attributes
    ----------
    is_valid : bool
        True if the expression is safe to evaluate.
    reason : Optional[FailureReason]
        The failure category, None for valid expressions.
    message : Optional[str]
        Human-readable failure message, None for valid expressions.
    """

    is_valid: bool
    reason: FailureReason | None = None
    message: str | None = None

    def __post_init__(self):
        # a failure needs a reason, a success must not carry one
        if self.is_valid == (self.reason is not None):
            raise ValueError(
                f"Inconsistent result: is_valid={self.is_valid}, reason={self.reason}"
            )

    @classmethod
    def valid(cls) -> ValidationResult:
        return cls(is_valid=True)

    @classmethod
    def from_error(cls, error: InvalidExpressionError) -> ValidationResult:
        for reason, error_type in _ERRORS.items():
            if isinstance(error, error_type):
                return cls(is_valid=False, reason=reason, message=str(error))
        raise TypeError(f"No failure reason for {type(error).__name__}")

    def raise_for_failure(self) -> None:
        "Re-raise the typed error of a failed result; no-op when valid."
        if self.reason is not None:
            raise _ERRORS[self.reason](self.message)

    def __bool__(self) -> bool:
        return self.is_valid
