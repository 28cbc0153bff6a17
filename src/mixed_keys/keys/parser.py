"""
Key parser: split a string into (text run, integer) spans.

For example, "alpha25bravo-3" parses to

    ("alpha", 25) ("bravo-", 3)

and "101 dalmatians" parses to

    ("", 101) (" dalmatians", 0)

Comparing these keys span by span orders embedded numbers by value, which
emulates the ordering the macOS Finder uses for file names.
"""

from mixed_keys.constants import DIGIT_HIGH, DIGIT_LOW
from mixed_keys.keys.span import MixedKey, Span


def _is_digit(ch: str) -> bool:
    return DIGIT_LOW <= ch <= DIGIT_HIGH


def parse_mixed(s: str) -> MixedKey:
    """
    Parse a string into its mixed key.

    Each run of ASCII digits closes a span holding the text before it (which
    may be empty) and the run's integer value. Non-empty text after the last
    digit run becomes a final span with value 0.

    Examples:
        - "" -> ()
        - "foo 42" -> (("foo ", 42),)
        - "101 dalmatians" -> (("", 101), (" dalmatians", 0))

    Args:
        s: Input string.

    Returns:
        Tuple of Span in left-to-right order.

    Raises:
        TypeError: If s is not a str.
    """
    if not isinstance(s, str):
        raise TypeError(f"parse_mixed expects str, got {type(s).__name__}")

    spans: list[Span] = []
    i, end = 0, 0
    size = len(s)
    while i < size:
        ch = s[i]
        if not _is_digit(ch):
            i += 1
            continue

        # Run before the digit may be empty when the string starts with digits
        run = s[end:i]
        n = ord(ch) - ord(DIGIT_LOW)
        i += 1
        while i < size and _is_digit(s[i]):
            n = 10 * n + ord(s[i]) - ord(DIGIT_LOW)
            i += 1
        spans.append(Span(run, n))
        end = i

    if end < i:
        spans.append(Span(s[end:i], 0))
    return tuple(spans)
