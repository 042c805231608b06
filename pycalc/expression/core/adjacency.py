"""
Adjacency rules between token kinds.

The rules are stored in a read-only boolean matrix indexed by
``(current.value, next.value)``.
"""

import numpy as np

from .kinds import TokenKind

_SUCCESSORS = {
    TokenKind.OPEN_BRACKET: (TokenKind.OPERAND, TokenKind.OPEN_BRACKET),
    TokenKind.CLOSE_BRACKET: (TokenKind.OPERATOR, TokenKind.CLOSE_BRACKET),
    TokenKind.OPERATOR: (TokenKind.OPERAND, TokenKind.OPEN_BRACKET),
    TokenKind.OPERAND: (TokenKind.OPERATOR, TokenKind.CLOSE_BRACKET),
}


def _build_table() -> np.ndarray:
    n_kinds = len(TokenKind)
    table = np.zeros((n_kinds, n_kinds), dtype=bool)
    for current, successors in _SUCCESSORS.items():
        table[current.value, [kind.value for kind in successors]] = True
    table.setflags(write=False)
    return table


ADJACENCY_TABLE = _build_table()

START_KINDS = frozenset({TokenKind.OPERAND, TokenKind.OPEN_BRACKET})
END_KINDS = frozenset({TokenKind.OPERAND, TokenKind.CLOSE_BRACKET})


def may_precede(current: TokenKind, next_kind: TokenKind) -> bool:
    """Return True if a `current` token may be directly followed by `next_kind`."""
    return bool(ADJACENCY_TABLE[current.value, next_kind.value])


def allowed_successors(kind: TokenKind) -> frozenset[TokenKind]:
    """Return the token kinds that may directly follow `kind`."""
    (indices,) = np.nonzero(ADJACENCY_TABLE[kind.value])
    return frozenset(TokenKind(int(i)) for i in indices)
