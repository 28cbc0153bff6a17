"""
Sort adapters ordering strings by mixed key.

Non-identical strings may have equal mixed keys ("xyzzy1" and "xyzzy01").
Ties are broken by plain lexicographic order of the original strings so the
result is a deterministic total order.
"""

from functools import cmp_to_key
from typing import Iterable, List

from mixed_keys.keys.parser import parse_mixed
from mixed_keys.keys.span import MixedKey
from mixed_keys.ordering.compare import compare_keys


class ByMixedKey:
    """
    Sortable view over a list of strings with precomputed mixed keys.

    The list is owned by the caller and is permuted in place by swap() and
    sort(). Keys are parsed once at construction and always move together
    with their strings.
    """

    def __init__(self, strings: List[str]):
        self._strings = strings
        self._keys: List[MixedKey] = [parse_mixed(s) for s in strings]

    def __len__(self) -> int:
        return len(self._strings)

    @property
    def keys(self) -> tuple[MixedKey, ...]:
        """Keys aligned with the current order of the strings."""
        return tuple(self._keys)

    def compare(self, i: int, j: int) -> int:
        """Three-way compare positions i and j, tie-breaking on the strings."""
        c = compare_keys(self._keys[i], self._keys[j])
        if c != 0:
            return c
        si, sj = self._strings[i], self._strings[j]
        if si == sj:
            return 0
        return -1 if si < sj else 1

    def less(self, i: int, j: int) -> bool:
        """True if the string at i sorts strictly before the string at j."""
        return self.compare(i, j) < 0

    def swap(self, i: int, j: int) -> None:
        """Swap positions i and j, keeping each key with its string."""
        self._strings[i], self._strings[j] = self._strings[j], self._strings[i]
        self._keys[i], self._keys[j] = self._keys[j], self._keys[i]

    def argsort(self) -> List[int]:
        """Positions of the strings in sorted order, without permuting them."""
        return sorted(range(len(self._strings)), key=cmp_to_key(self.compare))

    def sort(self) -> None:
        """Permute the underlying list into non-decreasing mixed-key order."""
        perm = self.argsort()
        self._strings[:] = [self._strings[k] for k in perm]
        self._keys[:] = [self._keys[k] for k in perm]


def mixed_sort_key(s: str) -> tuple[MixedKey, str]:
    """
    Key function for sorted() giving the same order as ByMixedKey.

    Spans are (str, int) tuples, so tuple comparison of two keys matches
    compare_keys; the original string breaks ties.
    """
    return parse_mixed(s), s


def order_by_mixed_key(strings: Iterable[str], *, reverse: bool = False) -> List[str]:
    """
    Return a new list of strings sorted by mixed key.

    Examples:
        - ["file-10.png", "file-2.png"] -> ["file-2.png", "file-10.png"].
        - ["echo1", "echo01", "echo001"] -> ["echo001", "echo01", "echo1"].

    Args:
        strings: Any iterable of strings; may be empty or contain "".
        reverse: If True, return non-increasing order instead.

    Returns:
        Sorted copy; the input is not modified.
    """
    out = list(strings)
    sort_by_mixed_key(out, reverse=reverse)
    return out


def sort_by_mixed_key(strings: List[str], *, reverse: bool = False) -> None:
    """Sort a list of strings in place by mixed key."""
    ByMixedKey(strings).sort()
    if reverse:
        strings.reverse()
