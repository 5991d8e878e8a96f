"""
unistr - Padding and Alignment.

Widths are codepoint counts. The fill string is repeated as a unit; when the
pad is not a whole number of units, the last unit is cut on a codepoint
boundary so the result is exactly ``width`` codepoints long.
"""

from __future__ import annotations

from unistr.defaults import DEFAULT_FILL
from unistr.ops.segmenter import codepoints, length, to_scalars


def _padding(fill: str, size: int) -> str:
    """Build exactly ``size`` codepoints of padding out of ``fill``."""
    unit = codepoints(fill)
    if size <= 0 or not unit:
        return ""
    repeats = -(-size // len(unit))
    return "".join((unit * repeats)[:size])


def ljust(text: str, width: int, fill: str = DEFAULT_FILL) -> str:
    """
    Left-justify text in a field of ``width`` codepoints.

    Example:
        ljust("test", 8, "_") -> "test____"
    """
    pad_length = width - length(text)
    if pad_length <= 0:
        return text
    return to_scalars(text) + _padding(fill, pad_length)


def rjust(text: str, width: int, fill: str = DEFAULT_FILL) -> str:
    """
    Right-justify text in a field of ``width`` codepoints.

    Example:
        rjust("test", 8, "_") -> "____test"
    """
    pad_length = width - length(text)
    if pad_length <= 0:
        return text
    return _padding(fill, pad_length) + to_scalars(text)


def center(text: str, width: int, fill: str = DEFAULT_FILL) -> str:
    """
    Center text in a field of ``width`` codepoints.

    When the padding cannot be split evenly the extra codepoint goes on the
    left side.

    Example:
        center("test", 9) -> "   test  "
    """
    delta = width - length(text)
    if delta <= 0:
        return text
    half = delta // 2
    return _padding(fill, half + delta % 2) + to_scalars(text) + _padding(fill, half)
