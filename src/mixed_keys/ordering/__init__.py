"""
Comparison and sorting by mixed key.
"""

from .compare import compare_ints, compare_keys, compare_spans
from .sort import (
    ByMixedKey,
    mixed_sort_key,
    order_by_mixed_key,
    sort_by_mixed_key,
)

__all__ = [
    "ByMixedKey",
    "compare_ints",
    "compare_keys",
    "compare_spans",
    "mixed_sort_key",
    "order_by_mixed_key",
    "sort_by_mixed_key",
]
