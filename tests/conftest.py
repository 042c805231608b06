"Pytest configuration for pycalc tests."

import pytest

from pycalc.expression.core import Token, TokenKind
from pycalc.options import options

_TEXT = {
    TokenKind.OPERAND: "1",
    TokenKind.OPERATOR: "+",
    TokenKind.OPEN_BRACKET: "(",
    TokenKind.CLOSE_BRACKET: ")",
}


@pytest.fixture(autouse=True)
def reset_options():
    "Restore global options after every test."
    old = options.to_dict()
    yield
    options.__dict__.update(old)


@pytest.fixture
def make_tokens():
    """Build a token list from a compact string, e.g. "(1+1)"."""
    lookup = {text: kind for kind, text in _TEXT.items()}

    def _make(pattern: str) -> list[Token]:
        return [Token(lookup[char], char) for char in pattern]

    return _make
