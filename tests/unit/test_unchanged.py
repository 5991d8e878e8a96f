"""
Unit tests for operations that leave text untouched.

Text holding a surrogate pair must come back exactly as given whenever an
operation finds nothing to trim, remove, replace, split or expand.
"""

import pytest

from unistr.ops.extract import drop, remove_prefix, remove_suffix, replace
from unistr.ops.layout import expandtabs, nl2br
from unistr.ops.pad import center, ljust, rjust
from unistr.ops.separators import split
from unistr.ops.trim import lstrip, rstrip, strip

NO_OPS = {
    "strip": lambda text: strip(text, "-"),
    "lstrip": lambda text: lstrip(text, "-"),
    "rstrip": lambda text: rstrip(text, "-"),
    "remove_prefix": lambda text: remove_prefix(text, "q"),
    "remove_suffix": lambda text: remove_suffix(text, "q"),
    "remove_empty_prefix": lambda text: remove_prefix(text, ""),
    "replace_absent_old": lambda text: replace(text, "q", "_"),
    "replace_empty_old": lambda text: replace(text, "", "_"),
    "replace_count_zero": lambda text: replace(text, "x", "_", 0),
    "nl2br": nl2br,
    "expandtabs": expandtabs,
    "drop": lambda text: drop(text, 0),
    "ljust": lambda text: ljust(text, 2),
    "rjust": lambda text: rjust(text, 2),
    "center": lambda text: center(text, 2),
}


class TestNothingToDo:
    """Tests for no-op calls on text holding a surrogate pair."""

    @pytest.mark.parametrize("name", sorted(NO_OPS))
    def test_returns_text_as_given(self, name, taco_pair):
        """Test the result equals the input, pair and all."""
        text = "x" + taco_pair
        assert NO_OPS[name](text) == text

    def test_split_without_separator_occurrence(self, taco_pair):
        """Test split yields the text as given when the separator is absent."""
        text = "x" + taco_pair
        assert split(text, ",") == [text]

    def test_no_ops_agree(self, taco_pair):
        """Test replacing an empty and an absent pattern give the same result."""
        text = "x" + taco_pair
        assert replace(text, "", "_") == replace(text, "q", "_")
        assert strip(text, "-") == ljust(text, 0)

    def test_matching_call_still_folds(self, taco, taco_pair):
        """Test operations that do change text return folded codepoints."""
        text = "-x" + taco_pair
        assert strip(text, "-") == "x" + taco
        assert remove_prefix(text, "-") == "x" + taco
        assert replace(text, "x", "y") == "-y" + taco
