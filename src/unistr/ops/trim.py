"""
unistr - Trimming.

``trim_char`` is compared against one codepoint at a time, so only a
single-codepoint trim character can ever match. When nothing is trimmed the
caller's text is returned as given.
"""

from __future__ import annotations

from unistr.defaults import DEFAULT_FILL
from unistr.ops.segmenter import codepoints, to_scalars


def lstrip(text: str, trim_char: str = DEFAULT_FILL) -> str:
    """Remove the leading run of ``trim_char`` codepoints."""
    chars = codepoints(text)
    trim_char = to_scalars(trim_char)
    start = 0
    while start < len(chars) and chars[start] == trim_char:
        start += 1
    if start == 0:
        return text
    return "".join(chars[start:])


def rstrip(text: str, trim_char: str = DEFAULT_FILL) -> str:
    """Remove the trailing run of ``trim_char`` codepoints."""
    chars = codepoints(text)
    trim_char = to_scalars(trim_char)
    end = len(chars)
    while end > 0 and chars[end - 1] == trim_char:
        end -= 1
    if end == len(chars):
        return text
    return "".join(chars[:end])


def strip(text: str, trim_char: str = DEFAULT_FILL) -> str:
    """Remove ``trim_char`` codepoints from both ends."""
    return rstrip(lstrip(text, trim_char), trim_char)
