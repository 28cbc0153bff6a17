"""
mixed_keys - natural ordering of strings with embedded numbers

Parses strings into mixed keys of (text, integer) spans so that "file-2.png"
sorts before "file-10.png", with adapters for lists and pandas data.
"""

from .data import (
    mixed_argsort,
    mixed_categories,
    mixed_rank,
    sort_frame_by_mixed_key,
)
from .keys import MixedKey, Span, parse_mixed
from .ordering import (
    ByMixedKey,
    compare_keys,
    compare_spans,
    mixed_sort_key,
    order_by_mixed_key,
    sort_by_mixed_key,
)

__version__ = "0.1.0"

__all__ = [
    "ByMixedKey",
    "MixedKey",
    "Span",
    "compare_keys",
    "compare_spans",
    "mixed_argsort",
    "mixed_categories",
    "mixed_rank",
    "mixed_sort_key",
    "order_by_mixed_key",
    "parse_mixed",
    "sort_by_mixed_key",
    "sort_frame_by_mixed_key",
    "__version__",
]
