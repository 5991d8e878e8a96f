"""
unistr - Split and Partition.

``split`` returns a variable-length list; ``partition``, ``rpartition`` and
``cut`` always return a 3-tuple. Note the not-found placement:

    partition("taco", "/")  -> ("taco", "", "")
    rpartition("taco", "/") -> ("", "", "taco")
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from unistr.defaults import DEFAULT_SEPARATOR
from unistr.ops.segmenter import codepoints, to_scalars
from unistr.utils.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def _require_separator(separator: str, operation: str) -> None:
    if not separator:
        logger.debug("%s() called with an empty separator", operation)
        raise InvalidArgumentError(f"{operation}() requires a non-empty separator", "separator")


def split(text: str, separator: str = DEFAULT_SEPARATOR) -> List[str]:
    """
    Split text on every occurrence of separator.

    With no separator the text is split into codepoints. Otherwise the
    result has one more item than there are separator occurrences, with
    empty items for leading, trailing or adjacent separators. Text without
    the separator comes back as a single item, as given.

    Example:
        split("🌮🍕") -> ["🌮", "🍕"]
        split(",a,,b", ",") -> ["", "a", "", "b"]
    """
    separator = to_scalars(separator)
    if not separator:
        return codepoints(text)
    scalars = to_scalars(text)
    if separator not in scalars:
        return [text]
    return scalars.split(separator)


def join(texts: Iterable[str], separator: str = DEFAULT_SEPARATOR) -> str:
    """Join texts with separator between each pair."""
    return to_scalars(separator).join(to_scalars(text) for text in texts)


def partition(text: str, separator: str) -> Tuple[str, str, str]:
    """
    Split text around the first occurrence of separator.

    Returns ``(before, separator, after)``, or ``(text, "", "")`` when the
    separator does not occur.

    Raises:
        InvalidArgumentError: If separator is empty.
    """
    _require_separator(separator, "partition")
    return to_scalars(text).partition(to_scalars(separator))


def rpartition(text: str, separator: str) -> Tuple[str, str, str]:
    """
    Split text around the last occurrence of separator.

    Returns ``(before, separator, after)``, or ``("", "", text)`` when the
    separator does not occur.

    Raises:
        InvalidArgumentError: If separator is empty.
    """
    _require_separator(separator, "rpartition")
    return to_scalars(text).rpartition(to_scalars(separator))


def cut(text: str, separator: str) -> Tuple[str, str, bool]:
    """
    Cut text around the first occurrence of separator.

    Returns ``(before, after, found)``. When the separator is missing the
    result is ``(text, "", False)``. An empty separator matches at index 0.

    Example:
        cut("a=b=c", "=") -> ("a", "b=c", True)
    """
    text = to_scalars(text)
    separator = to_scalars(separator)
    index = text.find(separator)
    if index < 0:
        return text, "", False
    return text[:index], text[index + len(separator):], True
