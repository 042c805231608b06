from enum import Enum


class TokenKind(Enum):
    """Kinds of expression tokens."""

    OPERAND = 0
    OPERATOR = 1
    OPEN_BRACKET = 2
    CLOSE_BRACKET = 3
