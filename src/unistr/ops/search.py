"""
unistr - Search and Predicates.

Literal substring tests. Both the text and the needle go through
``to_scalars`` first, so a surrogate pair and the codepoint it encodes
match each other.
"""

from __future__ import annotations

from unistr.ops.segmenter import length, to_scalars


def is_empty(text: str) -> bool:
    """Return True when text has no codepoints."""
    return length(text) == 0


def contains(text: str, substring: str) -> bool:
    """Check if text contains substring."""
    return to_scalars(substring) in to_scalars(text)


def starts_with(text: str, prefix: str) -> bool:
    """Check if text starts with prefix."""
    return to_scalars(text).startswith(to_scalars(prefix))


def ends_with(text: str, suffix: str) -> bool:
    """Check if text ends with suffix."""
    return to_scalars(text).endswith(to_scalars(suffix))


def count(text: str, substring: str) -> int:
    """
    Count non-overlapping occurrences of substring, scanning left to right.

    An empty substring matches in every gap between codepoints, including
    both ends, so the result is ``length(text) + 1``.

    Example:
        count("abc", "") -> 4
        count("aaaa", "aa") -> 2
    """
    if not substring:
        return length(text) + 1
    return to_scalars(text).count(to_scalars(substring))
