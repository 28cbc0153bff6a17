"""
Mixed key construction (Span, MixedKey, parse_mixed).
"""

from .parser import parse_mixed
from .span import MixedKey, OptionalKey, Span

__all__ = [
    "MixedKey",
    "OptionalKey",
    "Span",
    "parse_mixed",
]
