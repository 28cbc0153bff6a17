"""
Three-way comparison of mixed keys.

All comparators return exactly -1, 0 or 1, so they can be handed to
functools.cmp_to_key or used directly in binary searches.
"""

from typing import Tuple

from mixed_keys.keys.span import OptionalKey


def compare_ints(a: int, b: int) -> int:
    """Return the sign of a - b."""
    if a == b:
        return 0
    return -1 if a < b else 1


def compare_spans(a: Tuple[str, int], b: Tuple[str, int]) -> int:
    """
    Compare two spans: text run first, then the integer value.

    An unequal text run is decisive even when the integers differ.
    """
    if a[0] == b[0]:
        return compare_ints(a[1], b[1])
    return -1 if a[0] < b[0] else 1


def compare_keys(a: OptionalKey, b: OptionalKey) -> int:
    """
    Compare two mixed keys span by span.

    The first unequal span decides. When every overlapping span is equal the
    key with fewer spans sorts first. None is treated as the empty key.

    Args:
        a: Left key (or None).
        b: Right key (or None).

    Returns:
        -1 if a sorts before b, 1 if after, 0 if equal.
    """
    a = a or ()
    b = b or ()
    for span_a, span_b in zip(a, b):
        c = compare_spans(span_a, span_b)
        if c != 0:
            return c
    return compare_ints(len(a), len(b))
