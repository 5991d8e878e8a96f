"""
unistr - Whitespace and Layout.
"""

from __future__ import annotations

import re

from unistr.defaults import DEFAULT_BREAK_TAG, DEFAULT_TAB_SIZE
from unistr.ops.segmenter import to_scalars

# Longest sequences first so "\r\n" and "\n\r" get a single tag.
_LINE_BREAK = re.compile(r"\r\n|\n\r|\n|\r")


def nl2br(text: str, break_tag: str = DEFAULT_BREAK_TAG) -> str:
    """
    Insert break_tag before every line break (CRLF, LFCR, LF or CR).

    Example:
        nl2br("a\\r\\nb\\nc") -> "a<br>\\r\\nb<br>\\nc"
    """
    if not _LINE_BREAK.search(text):
        return text
    break_tag = to_scalars(break_tag)
    return _LINE_BREAK.sub(lambda match: break_tag + match.group(), to_scalars(text))


def expandtabs(text: str, tab_size: int = DEFAULT_TAB_SIZE) -> str:
    """Replace every tab with tab_size spaces, regardless of column."""
    if "\t" not in text:
        return text
    return to_scalars(text).replace("\t", " " * tab_size)
