"""
Validation logic for tokenized expressions.

This module decides whether a tokenized arithmetic expression may be
handed to an evaluator. Three checks run in order, and each one assumes
the invariants established by the previous ones:

1. the expression contains at least one token,
2. brackets are correctly paired,
3. the token order is legal (start, interior pairs, end).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from pycalc.errors import (
    EmptyExpressionError,
    IllegalExpressionOrderError,
    InvalidExpressionError,
    UnbalancedBracketsError,
)
from pycalc.messages import MESSAGES, check_locale
from pycalc.options import get_option

from ..core.adjacency import END_KINDS, START_KINDS
from ..core.types import Token, TokenKind, TokenSequence
from .results import FailureReason, ValidationResult

logger = logging.getLogger(__name__)


def get_message(reason: FailureReason, locale: str | None = None) -> str:
    """
    Look up the user-facing message for a failure reason.

    Parameters
    ----------
    reason : FailureReason
        The failure category.
    locale : Optional[str]
        Message locale. Defaults to the `message_locale` option.

    Returns
    -------
    str
        The message text.

    Raises
    ------
    ValueError
        If no messages exist for the locale.
    """
    locale = get_option("message_locale") if locale is None else locale
    return MESSAGES[check_locale(locale)][reason.value]


def _as_tokens(expression: Any) -> TokenSequence:
    if hasattr(expression, "get_token_array"):
        return expression.get_token_array()
    if isinstance(expression, (list, tuple)):
        return expression
    raise TypeError(
        "Expected an Expression or a sequence of tokens, "
        f"got {type(expression).__name__}"
    )


class ExpressionValidator(ABC):
    """Decides whether an expression is safe to evaluate."""

    @abstractmethod
    def validate_expression(self, expression: Any) -> None:
        """
        Validate an expression.

        Returns normally for a valid expression and raises a subclass of
        `InvalidExpressionError` otherwise.
        """


class CommonExpressionValidator(ExpressionValidator):
    """
    Validator for bracketed arithmetic expressions.

    Parameters
    ----------
    strict_adjacency : Optional[bool]
        If True, every adjacent token pair is checked. If False, the legacy
        interior scan is used, which skips the first pair and the pair
        directly before the last token. Defaults to the `strict_adjacency`
        option.
    locale : Optional[str]
        Locale of the error messages. Defaults to the `message_locale`
        option.

    Examples
    --------
    >>> from pycalc.expression.core import Token
    >>> validator = CommonExpressionValidator()
    >>> validator.validate(
    ...     [Token.open_bracket(), Token.operand("1"), Token.close_bracket()]
    ... )
    """

    def __init__(
        self, strict_adjacency: bool | None = None, locale: str | None = None
    ):
        self._strict_adjacency = strict_adjacency
        self._locale = locale if locale is None else check_locale(locale)

    def validate_expression(self, expression: Any) -> None:
        self.validate(expression)

    def validate(self, tokens: TokenSequence) -> None:
        """
        Run all checks on a token sequence.

        Parameters
        ----------
        tokens : TokenSequence or Expression
            The tokens to validate. Never modified.

        Raises
        ------
        EmptyExpressionError
            If there are no tokens.
        UnbalancedBracketsError
            If a bracket is left unmatched.
        IllegalExpressionOrderError
            If the expression starts, ends or continues with a disallowed token.
        ValueError
            If the message locale is not supported.
        """
        tokens = _as_tokens(tokens)
        strict = self._resolve_strict()
        locale = self._resolve_locale()
        logger.debug("Validating expression of %d tokens", len(tokens))
        try:
            self.check_length_over_zero(tokens, locale)
            self.check_bracket_pairs(tokens, locale)
            self.check_expression_order(tokens, strict, locale)
        except InvalidExpressionError as e:
            logger.debug("Rejected expression: %s", type(e).__name__)
            raise

    def check(self, expression: Any) -> ValidationResult:
        """Validate `expression` and return the outcome instead of raising."""
        try:
            self.validate_expression(expression)
        except InvalidExpressionError as e:
            return ValidationResult.from_error(e)
        return ValidationResult.valid()

    def get_validation_summary(self, tokens: TokenSequence) -> dict[str, bool]:
        """
        Get a summary of validation status.

        Every check runs independently, so the summary also reports checks
        that come after the first failing one.

        Parameters
        ----------
        tokens : TokenSequence or Expression
            Tokens to validate

        Returns
        -------
        dict[str, bool]
            Dictionary with validation check results
        """
        tokens = _as_tokens(tokens)
        strict = self._resolve_strict()
        locale = self._resolve_locale()
        summary = {
            "non_empty": len(tokens) > 0,
            "brackets_balanced": True,
            "valid_start": False,
            "valid_end": False,
            "valid_adjacency": True,
        }

        try:
            self.check_bracket_pairs(tokens, locale)
        except UnbalancedBracketsError:
            summary["brackets_balanced"] = False

        if tokens:
            summary["valid_start"] = tokens[0].kind in START_KINDS
            summary["valid_end"] = tokens[-1].kind in END_KINDS
            try:
                self.check_middle_token_order(tokens, strict, locale)
            except IllegalExpressionOrderError:
                summary["valid_adjacency"] = False

        summary["is_valid"] = all(summary.values())
        return summary

    @staticmethod
    def check_length_over_zero(tokens: TokenSequence, locale: str | None = None) -> None:
        if len(tokens) == 0:
            raise EmptyExpressionError(get_message(FailureReason.EMPTY, locale))

    @staticmethod
    def check_bracket_pairs(tokens: TokenSequence, locale: str | None = None) -> None:
        """
        Check that brackets are correctly nested.

        Raises
        ------
        UnbalancedBracketsError
            If a close bracket has no open partner or an open bracket is
            never closed.
        """
        stack: list[TokenKind] = []
        for token in tokens:
            if token.kind is TokenKind.OPEN_BRACKET:
                stack.append(token.kind)
            elif token.kind is TokenKind.CLOSE_BRACKET:
                if not stack:
                    raise UnbalancedBracketsError(
                        get_message(FailureReason.UNBALANCED_BRACKETS, locale)
                    )
                stack.pop()

        if stack:
            raise UnbalancedBracketsError(
                get_message(FailureReason.UNBALANCED_BRACKETS, locale)
            )

    @classmethod
    def check_expression_order(
        cls, tokens: TokenSequence, strict: bool = True, locale: str | None = None
    ) -> None:
        # brackets must already be balanced
        cls.check_starts_with_open_bracket_or_operand(tokens[0], locale)
        cls.check_middle_token_order(tokens, strict, locale)
        cls.check_ends_with_close_bracket_or_operand(tokens[-1], locale)

    @staticmethod
    def check_starts_with_open_bracket_or_operand(
        token: Token, locale: str | None = None
    ) -> None:
        if token.kind not in START_KINDS:
            raise IllegalExpressionOrderError(
                get_message(FailureReason.ILLEGAL_ORDER, locale)
            )

    @staticmethod
    def check_middle_token_order(
        tokens: TokenSequence, strict: bool = True, locale: str | None = None
    ) -> None:
        """
        Check that each interior token may be followed by the next one.

        Parameters
        ----------
        tokens : TokenSequence
            Tokens to check.
        strict : bool
            If True, pairs starting at positions 0 through len - 2 are
            checked. If False, only positions 1 through len - 3.
        locale : Optional[str]
            Locale of the error message.
        """
        if strict:
            positions = range(len(tokens) - 1)
        else:
            positions = range(1, len(tokens) - 2)

        for i in positions:
            if not tokens[i].may_precede(tokens[i + 1]):
                raise IllegalExpressionOrderError(
                    get_message(FailureReason.ILLEGAL_ORDER, locale)
                )

    @staticmethod
    def check_ends_with_close_bracket_or_operand(
        token: Token, locale: str | None = None
    ) -> None:
        if token.kind not in END_KINDS:
            raise IllegalExpressionOrderError(
                get_message(FailureReason.ILLEGAL_ORDER, locale)
            )

    def _resolve_strict(self) -> bool:
        if self._strict_adjacency is None:
            return get_option("strict_adjacency")
        return self._strict_adjacency

    def _resolve_locale(self) -> str:
        if self._locale is None:
            return check_locale(get_option("message_locale"))
        return self._locale


def validate(expression: Any, **kwargs) -> None:
    """
    Validate an expression before evaluation.

    Parameters
    ----------
    expression : Expression or TokenSequence
        The expression, or its tokens.
    **kwargs
        Passed to `CommonExpressionValidator`.

    Raises
    ------
    InvalidExpressionError
        One of its three subclasses, for the first violation found.
    """
    CommonExpressionValidator(**kwargs).validate_expression(expression)


def check(expression: Any, **kwargs) -> ValidationResult:
    """Validate an expression and return a `ValidationResult`."""
    return CommonExpressionValidator(**kwargs).check(expression)
