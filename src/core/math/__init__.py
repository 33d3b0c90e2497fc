"""
Core math modules для lang-tour

Чистые численные функции без side effects.
"""

# Range Sum
from src.core.math.range_sum import (
    compute_range_sum,
    even_bounds,
    sum_even_in_range,
    sum_even_in_range_bruteforce,
)

__all__ = [
    # Range Sum — Functions
    "compute_range_sum",
    "even_bounds",
    "sum_even_in_range",
    "sum_even_in_range_bruteforce",
]
