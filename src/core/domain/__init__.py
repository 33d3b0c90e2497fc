"""
Domain models and value objects.

Contains immutable value objects: RangeBounds, RangeSumResult, TableRow,
MultiplicationTable.
"""

from src.core.domain.multiplication import (
    DEFAULT_MULTIPLIER_FIRST,
    DEFAULT_MULTIPLIER_LAST,
    I32_MAX,
    I32_MIN,
    MultiplicationTable,
    TableRow,
)
from src.core.domain.range_bounds import RangeBounds, RangeSumResult

__all__ = [
    # Multiplication table
    "I32_MIN",
    "I32_MAX",
    "DEFAULT_MULTIPLIER_FIRST",
    "DEFAULT_MULTIPLIER_LAST",
    "TableRow",
    "MultiplicationTable",
    # Range
    "RangeBounds",
    "RangeSumResult",
]
