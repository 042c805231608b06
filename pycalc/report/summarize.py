from __future__ import annotations

import warnings
from collections.abc import Mapping, Sequence
from typing import Any

import pandas as pd

from pycalc.expression.core.types import TokenKind
from pycalc.expression.core.adjacency import ADJACENCY_TABLE
from pycalc.expression.validation.validators import CommonExpressionValidator, _as_tokens

_COLUMNS = ["expression", "n_tokens", "valid", "reason", "message"]


def validation_table(
    expressions: Mapping[str, Any] | Sequence[Any], **kwargs
) -> pd.DataFrame:
    """
    Validate several expressions and collect the outcomes in a table.

    Parameters
    ----------
    expressions : Mapping[str, Expression] or Sequence[Expression]
        The expressions to validate. Mapping keys are used as the index,
        otherwise the position in the sequence.
    **kwargs
        Passed to `CommonExpressionValidator`.

    Returns
    -------
    pd.DataFrame
        One row per expression with the columns `expression`, `n_tokens`,
        `valid`, `reason` and `message`.

    Examples
    --------
    >>> from pycalc.expression import Token
    >>> validation_table({"one": [Token.operand("1")]})["valid"].tolist()
    [True]
    """
    if isinstance(expressions, Mapping):
        labels = list(expressions.keys())
        items = list(expressions.values())
    else:
        labels = list(range(len(expressions)))
        items = list(expressions)

    if not items:
        warnings.warn(
            "No expressions supplied, returning an empty table.",
            UserWarning,
            stacklevel=2,
        )
        return pd.DataFrame(columns=_COLUMNS)

    validator = CommonExpressionValidator(**kwargs)
    rows = []
    for item in items:
        tokens = _as_tokens(item)
        result = validator.check(tokens)
        rows.append(
            {
                "expression": "".join(token.text for token in tokens),
                "n_tokens": len(tokens),
                "valid": result.is_valid,
                "reason": None if result.reason is None else result.reason.value,
                "message": result.message,
            }
        )

    return pd.DataFrame(rows, index=pd.Index(labels), columns=_COLUMNS)


def adjacency_table() -> pd.DataFrame:
    """
    Return the adjacency rules as a boolean table.

    Rows are the current token kind, columns the kind of the next token.
    """
    names = [kind.name for kind in TokenKind]
    return pd.DataFrame(
        ADJACENCY_TABLE.copy(),
        index=pd.Index(names, name="current"),
        columns=pd.Index(names, name="next"),
    )
