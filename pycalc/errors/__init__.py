class InvalidExpressionError(ValueError):  # noqa: D101
    pass


class EmptyExpressionError(InvalidExpressionError):  # noqa: D101
    pass


class UnbalancedBracketsError(InvalidExpressionError):  # noqa: D101
    pass


class IllegalExpressionOrderError(InvalidExpressionError):  # noqa: D101
    pass


__all__ = [
    "InvalidExpressionError",
    "EmptyExpressionError",
    "UnbalancedBracketsError",
    "IllegalExpressionOrderError",
]
