"""
unistr - Slicing, Replacement and Affixes.

Indices and counts are codepoints, so a slice boundary can never fall
inside a surrogate pair.
"""

from __future__ import annotations

from typing import Optional

from unistr.defaults import REPLACE_ALL
from unistr.ops.segmenter import codepoints, to_scalars

# =============================================================================
# Extraction
# =============================================================================


def slice(text: str, start: int = 0, end: Optional[int] = None) -> str:
    """
    Return the codepoints from start to end (exclusive).

    Negative indices count from the end and out-of-range indices are
    clamped, as with ordinary sequence slicing.

    Example:
        slice("a🌮bc", 1, 3) -> "🌮b"
        slice("abcdef", -2) -> "ef"
    """
    return "".join(codepoints(text)[start:end])


def take(text: str, n: int) -> str:
    """Return the first n codepoints; nothing when n is not positive."""
    if n <= 0:
        return ""
    return "".join(codepoints(text)[:n])


def drop(text: str, n: int) -> str:
    """Return all but the first n codepoints; text unchanged when n is not positive."""
    if n <= 0:
        return text
    return "".join(codepoints(text)[n:])


def reverse(text: str) -> str:
    """Reverse text codepoint by codepoint."""
    return "".join(reversed(codepoints(text)))


def repeat(text: str, n: int) -> str:
    """Repeat text n times."""
    return to_scalars(text) * n


# =============================================================================
# Replacement
# =============================================================================


def replace(text: str, old: str, new: str, count: int = REPLACE_ALL) -> str:
    """
    Replace occurrences of old with new, left to right.

    A negative count replaces every occurrence; otherwise at most ``count``
    are replaced. Matches never overlap and inserted text is not scanned
    again. When there is nothing to replace (an empty ``old``, a count of 0
    or no occurrence) text is returned as given.

    Example:
        replace("a-b-c", "-", "_", 1) -> "a_b-c"
    """
    scalars = to_scalars(text)
    old = to_scalars(old)
    if not old or count == 0 or old not in scalars:
        return text
    return scalars.replace(old, to_scalars(new), count)


def remove_prefix(text: str, prefix: str) -> str:
    """Remove prefix if text starts with it, otherwise return text as given."""
    scalars = to_scalars(text)
    prefix = to_scalars(prefix)
    if not prefix or not scalars.startswith(prefix):
        return text
    return scalars[len(prefix):]


def remove_suffix(text: str, suffix: str) -> str:
    """Remove suffix if text ends with it, otherwise return text as given."""
    scalars = to_scalars(text)
    suffix = to_scalars(suffix)
    if not suffix or not scalars.endswith(suffix):
        return text
    return scalars[:-len(suffix)]
