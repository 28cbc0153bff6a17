"""Span and MixedKey types."""

from typing import NamedTuple, Optional, Tuple


class Span(NamedTuple):
    """One unit of a mixed key: a text run and the number that follows it."""

    run: str
    n: int = 0  # 0 for a trailing text-only span


# Spans in left-to-right string order. Empty tuple for the empty string.
MixedKey = Tuple[Span, ...]

# Comparator arguments may be None, which stands for the empty key.
OptionalKey = Optional[Tuple[Tuple[str, int], ...]]
