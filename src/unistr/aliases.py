"""
unistr - Alias Layer.

Alternate names for the canonical operations, for callers used to other
naming conventions (Go, JavaScript, PHP, Python's own ``str`` methods).
Each alias is the very same function object as its canonical counterpart.
"""

from unistr.ops.case import capwords, ucfirst
from unistr.ops.extract import remove_prefix, remove_suffix, slice
from unistr.ops.pad import ljust, rjust
from unistr.ops.search import contains, ends_with, starts_with
from unistr.ops.segmenter import codepoints, length
from unistr.ops.trim import lstrip, rstrip, strip

# Length
len = length
strlen = length
chars = codepoints

# Trimming
trim = strip
trim_left = lstrip
trim_start = lstrip
trim_right = rstrip
trim_end = rstrip

# Prefix/suffix predicates
has_prefix = starts_with
startswith = starts_with
has_suffix = ends_with
endswith = ends_with
includes = contains

# Prefix/suffix removal
trim_prefix = remove_prefix
removeprefix = remove_prefix
trim_suffix = remove_suffix
removesuffix = remove_suffix

# Case
title = capwords
capitalize = ucfirst

# Padding and slicing
pad_left = rjust
pad_right = ljust
substr = slice

ALIASES = {
    "len": "length",
    "strlen": "length",
    "chars": "codepoints",
    "trim": "strip",
    "trim_left": "lstrip",
    "trim_start": "lstrip",
    "trim_right": "rstrip",
    "trim_end": "rstrip",
    "has_prefix": "starts_with",
    "startswith": "starts_with",
    "has_suffix": "ends_with",
    "endswith": "ends_with",
    "includes": "contains",
    "trim_prefix": "remove_prefix",
    "removeprefix": "remove_prefix",
    "trim_suffix": "remove_suffix",
    "removesuffix": "remove_suffix",
    "title": "capwords",
    "capitalize": "ucfirst",
    "pad_left": "rjust",
    "pad_right": "ljust",
    "substr": "slice",
}

__all__ = list(ALIASES)
