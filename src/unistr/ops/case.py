"""
unistr - Case Conversion.

``swapcase`` deliberately touches ASCII letters only. The other functions
change a single leading codepoint and leave the rest of the text as it was.
"""

from __future__ import annotations

from unistr.defaults import DEFAULT_WORD_SEPARATOR
from unistr.ops.segmenter import codepoints, to_scalars

_ASCII_CASE_OFFSET = 32


def _swap_ascii(char: str) -> str:
    code = ord(char)
    if 0x61 <= code <= 0x7A:
        return chr(code - _ASCII_CASE_OFFSET)
    if 0x41 <= code <= 0x5A:
        return chr(code + _ASCII_CASE_OFFSET)
    return char


def swapcase(text: str) -> str:
    """
    Swap the case of ASCII letters; every other codepoint is kept.

    Example:
        swapcase("abc🌮ÀBC") -> "ABC🌮Àbc"
    """
    return "".join(_swap_ascii(char) for char in codepoints(text))


def ucfirst(text: str) -> str:
    """Uppercase the first codepoint of text."""
    chars = codepoints(text)
    if not chars:
        return text
    return chars[0].upper() + "".join(chars[1:])


def lcfirst(text: str) -> str:
    """Lowercase the first codepoint of text."""
    chars = codepoints(text)
    if not chars:
        return text
    return chars[0].lower() + "".join(chars[1:])


def capwords(text: str, separator: str = DEFAULT_WORD_SEPARATOR) -> str:
    """
    Uppercase the first codepoint of every separator-delimited word.

    The remainder of each word is not lowercased. An empty separator makes
    every codepoint its own word.

    Example:
        capwords("this is a TEST") -> "This Is A TEST"
        capwords("this-is-a-TEST", "-") -> "This-Is-A-TEST"
    """
    if not text:
        return text
    separator = to_scalars(separator)
    if separator:
        words = to_scalars(text).split(separator)
    else:
        words = codepoints(text)
    return separator.join(ucfirst(word) for word in words)
