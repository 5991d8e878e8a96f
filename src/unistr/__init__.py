"""
unistr - Unicode-aware string utilities.

Padding, trimming, case conversion, splitting, searching and substring
extraction where every length, index and count is measured in codepoints,
so characters outside the Basic Multilingual Plane (emoji and friends) are
never split or counted twice.
"""

from unistr.aliases import *
from unistr.ops import *
from unistr.utils.errors import InvalidArgumentError, UnistrError

__version__ = "0.1.0"
__all__ = [
    # Codepoints
    "to_scalars", "codepoints", "length", "char_at", "index_of", "last_index_of",
    # Padding
    "ljust", "rjust", "center",
    # Trimming
    "lstrip", "rstrip", "strip",
    # Case
    "swapcase", "capwords", "ucfirst", "lcfirst",
    # Search
    "is_empty", "contains", "starts_with", "ends_with", "count",
    # Split
    "split", "join", "partition", "rpartition", "cut",
    # Extraction
    "slice", "take", "drop", "reverse", "repeat", "replace",
    "remove_prefix", "remove_suffix",
    # Layout
    "nl2br", "expandtabs",
    # Aliases
    "len", "strlen", "chars",
    "trim", "trim_left", "trim_start", "trim_right", "trim_end",
    "has_prefix", "startswith", "has_suffix", "endswith", "includes",
    "trim_prefix", "removeprefix", "trim_suffix", "removesuffix",
    "title", "capitalize", "pad_left", "pad_right", "substr",
    # Errors
    "UnistrError",
    "InvalidArgumentError",
]
