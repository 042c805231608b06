"""
Core components for expression handling.

This submodule contains the token kinds, the adjacency rules between them,
tokens and the expression wrapper.
"""

from .types import Expression, Token, TokenKind, TokenSequence

__all__ = [
    "Expression",
    "Token",
    "TokenKind",
    "TokenSequence",
]
