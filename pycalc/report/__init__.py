from pycalc.report.summarize import (
    adjacency_table,
    validation_table,
)

__all__ = [
    "adjacency_table",
    "validation_table",
]
