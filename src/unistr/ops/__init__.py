"""
unistr Operations.

Provides the codepoint-aware string operations, grouped by concern.
"""

from unistr.ops.case import *
from unistr.ops.extract import *
from unistr.ops.layout import *
from unistr.ops.pad import *
from unistr.ops.search import *
from unistr.ops.segmenter import *
from unistr.ops.separators import *
from unistr.ops.trim import *

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
]
