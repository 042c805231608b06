"""
Core types for token-level expression handling.

This module contains the token kinds, the immutable token and the
expression wrapper handed over by the tokenizer.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from .adjacency import may_precede
from .kinds import TokenKind


@dataclass(frozen=True)
class Token:
    """
    A single classified unit of an arithmetic expression.

    Attributes
    ----------
    kind : TokenKind
        The token variant.
    text : str
        The source text of the token, e.g. "12" or "+".
    """

    kind: TokenKind
    text: str = ""

    @classmethod
    def operand(cls, text: str) -> Token:
        return cls(TokenKind.OPERAND, text)

    @classmethod
    def operator(cls, symbol: str) -> Token:
        return cls(TokenKind.OPERATOR, symbol)

    @classmethod
    def open_bracket(cls) -> Token:
        return cls(TokenKind.OPEN_BRACKET, "(")

    @classmethod
    def close_bracket(cls) -> Token:
        return cls(TokenKind.CLOSE_BRACKET, ")")

    @property
    def is_operand(self) -> bool:
        return self.kind is TokenKind.OPERAND

    @property
    def is_operator(self) -> bool:
        return self.kind is TokenKind.OPERATOR

    @property
    def is_open_bracket(self) -> bool:
        return self.kind is TokenKind.OPEN_BRACKET

    @property
    def is_close_bracket(self) -> bool:
        return self.kind is TokenKind.CLOSE_BRACKET

    def may_precede(self, next_token: Token) -> bool:
        """
        Check whether `next_token` may immediately follow this token.

        Parameters
        ----------
        next_token : Token
            The token directly after this one.

        Returns
        -------
        bool
            True if the pair of kinds is allowed by the adjacency table.
        """
        return may_precede(self.kind, next_token.kind)


TokenSequence = Sequence[Token]


@dataclass(frozen=True)
class Expression:
    """
    A tokenized arithmetic expression.

    Attributes
    ----------
    tokens : tuple[Token, ...]
        The tokens in source order.

    Examples
    --------
    >>> expr = Expression.from_tokens(
    ...     [Token.operand("1"), Token.operator("+"), Token.operand("2")]
    ... )
    >>> expr.text
    '1+2'
    """

    tokens: tuple[Token, ...] = ()

    @classmethod
    def from_tokens(cls, tokens: Iterable[Token]) -> Expression:
        return cls(tuple(tokens))

    def get_token_array(self) -> tuple[Token, ...]:
        return self.tokens

    @property
    def text(self) -> str:
        return "".join(token.text for token in self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)
