"""
unistr - Codepoint Segmenter.

Every other operation measures and indexes text through this module.

A Python ``str`` is a sequence of codepoints, with one exception: it may
carry surrogate pairs, two UTF-16 storage units that together stand for one
astral codepoint (text decoded with ``surrogatepass``, JSON ``\\ud83c\\udf2e``
escapes, strings built with ``chr()`` on surrogate values). ``to_scalars``
folds each well-formed pair into the codepoint it encodes, so a pair is never
split, reversed or counted as two characters. Lone surrogates are left alone
and count as one codepoint each.

Grapheme clusters are not merged: a base letter followed by a combining mark
is two codepoints.
"""

from __future__ import annotations

import logging
import re
from typing import List

logger = logging.getLogger(__name__)

_SURROGATE_PAIR = re.compile("[\ud800-\udbff][\udc00-\udfff]")
_SURROGATE = re.compile("[\ud800-\udfff]")


def _merge_pair(match: re.Match) -> str:
    high, low = match.group()
    return chr(0x10000 + ((ord(high) - 0xD800) << 10) + (ord(low) - 0xDC00))


# =============================================================================
# Segmentation
# =============================================================================


def to_scalars(text: str) -> str:
    """
    Return ``text`` with every surrogate pair folded into a single codepoint.

    Example:
        to_scalars("\\ud83c\\udf2e") -> "🌮"
    """
    if not _SURROGATE.search(text):
        return text
    merged, pairs = _SURROGATE_PAIR.subn(_merge_pair, text)
    if pairs:
        logger.debug("Merged %d surrogate pair(s)", pairs)
    return merged


def codepoints(text: str) -> List[str]:
    """
    Split text into its codepoints, one string per codepoint.

    Example:
        codepoints("🌮🍕") -> ["🌮", "🍕"]
    """
    return list(to_scalars(text))


def length(text: str) -> int:
    """Return the number of codepoints in text."""
    return len(codepoints(text))


# =============================================================================
# Indexing
# =============================================================================


def char_at(text: str, index: int) -> str:
    """Return the codepoint at index, or an empty string when out of range."""
    chars = codepoints(text)
    if -len(chars) <= index < len(chars):
        return chars[index]
    return ""


def index_of(text: str, substring: str, start: int = 0) -> int:
    """Return the codepoint index of substring at or after start, -1 if absent."""
    return to_scalars(text).find(to_scalars(substring), start)


def last_index_of(text: str, substring: str) -> int:
    """Return the codepoint index of the last occurrence of substring, -1 if absent."""
    return to_scalars(text).rfind(to_scalars(substring))
