"""
Mixed-key ordering for numpy/pandas (mixed_argsort, sort_frame_by_mixed_key, etc.).
"""

from .frames import (
    mixed_argsort,
    mixed_categories,
    mixed_rank,
    sort_frame_by_mixed_key,
)

__all__ = [
    "mixed_argsort",
    "mixed_categories",
    "mixed_rank",
    "sort_frame_by_mixed_key",
]
