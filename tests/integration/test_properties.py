"""
Integration tests checking laws that hold across unistr operations.

Each property is checked against a shared corpus mixing ASCII, astral
codepoints, surrogate pairs, combining marks and line breaks.
"""

import pytest

from unistr import (
    center,
    codepoints,
    count,
    cut,
    drop,
    join,
    length,
    ljust,
    lstrip,
    partition,
    replace,
    reverse,
    rjust,
    rpartition,
    rstrip,
    slice,
    split,
    strip,
    take,
    to_scalars,
)

TACO_PAIR = chr(0xD83C) + chr(0xDF2E)

CORPUS = [
    "",
    "taco",
    "  🌮 tuesday  ",
    "--app-dev-",
    "a=b=c",
    "école",
    f"x{TACO_PAIR}y{TACO_PAIR}",
    "line one\r\nline two\n",
    "🌮🍕🌮",
]

TRIM_CHARS = [" ", "-", "🌮", "x"]
SEPARATORS = [" ", "-", "=", "🌮", "--", "\r\n"]


class TestLengthLaws:
    """Tests relating length to the segmenter and padding."""

    @pytest.mark.parametrize("text", CORPUS)
    def test_length_matches_segmenter(self, text):
        """Test length equals the number of segmented codepoints."""
        assert length(text) == len(codepoints(text))

    @pytest.mark.parametrize("text", CORPUS)
    def test_padding_is_no_op_at_or_below_width(self, text):
        """Test padding never changes text that is already wide enough."""
        for width in (0, length(text)):
            assert ljust(text, width) == text
            assert rjust(text, width) == text
            assert center(text, width) == text

    @pytest.mark.parametrize("text", CORPUS)
    @pytest.mark.parametrize("fill", [" ", "_", "🍕", "ab"])
    def test_padding_reaches_width(self, text, fill):
        """Test padded text is exactly the requested width."""
        width = length(text) + 7
        assert length(ljust(text, width, fill)) == width
        assert length(rjust(text, width, fill)) == width
        assert length(center(text, width, fill)) == width

    @pytest.mark.parametrize("text", CORPUS)
    def test_center_left_bias(self, text):
        """Test the odd pad codepoint lands on the left."""
        padded = center(text, length(text) + 3, "_")
        assert padded == "__" + to_scalars(text) + "_"


class TestCompositionLaws:
    """Tests for operations defined in terms of others."""

    @pytest.mark.parametrize("text", CORPUS)
    @pytest.mark.parametrize("char", TRIM_CHARS)
    def test_strip_is_rstrip_of_lstrip(self, text, char):
        """Test strip composes lstrip and rstrip."""
        assert strip(text, char) == rstrip(lstrip(text, char), char)

    @pytest.mark.parametrize("text", CORPUS)
    @pytest.mark.parametrize("char", TRIM_CHARS)
    def test_strip_without_match_returns_text(self, text, char):
        """Test stripping a character absent from the text leaves it as given."""
        if count(text, char) == 0:
            assert strip(text, char) == text
            assert lstrip(text, char) == text
            assert rstrip(text, char) == text

    @pytest.mark.parametrize("text", CORPUS)
    def test_reverse_is_involution(self, text):
        """Test reversing twice restores the text."""
        assert reverse(reverse(text)) == to_scalars(text)

    @pytest.mark.parametrize("text", CORPUS)
    def test_take_drop_partition_text(self, text):
        """Test take and drop split text at the same point."""
        for n in range(length(text) + 1):
            assert to_scalars(take(text, n) + drop(text, n)) == to_scalars(text)
            assert take(text, n) == slice(text, 0, n)


class TestSplitLaws:
    """Tests relating split, join, count and partition."""

    @pytest.mark.parametrize("text", CORPUS)
    @pytest.mark.parametrize("sep", SEPARATORS)
    def test_join_split_round_trip(self, text, sep):
        """Test joining split results restores the text."""
        assert join(split(text, sep), sep) == to_scalars(text)

    @pytest.mark.parametrize("text", CORPUS)
    def test_character_split_round_trip(self, text):
        """Test joining characters restores the text."""
        assert join(split(text)) == to_scalars(text)

    @pytest.mark.parametrize("text", CORPUS)
    @pytest.mark.parametrize("sep", SEPARATORS)
    def test_split_item_count(self, text, sep):
        """Test split yields one more item than separator occurrences."""
        assert len(split(text, sep)) == count(text, sep) + 1

    @pytest.mark.parametrize("text", CORPUS)
    @pytest.mark.parametrize("sep", SEPARATORS)
    def test_partitions_rebuild_text(self, text, sep):
        """Test both partitions concatenate back to the text."""
        assert "".join(partition(text, sep)) == to_scalars(text)
        assert "".join(rpartition(text, sep)) == to_scalars(text)

    @pytest.mark.parametrize("text", CORPUS)
    @pytest.mark.parametrize("sep", SEPARATORS)
    def test_cut_agrees_with_partition(self, text, sep):
        """Test cut reports the same pieces as partition."""
        before, found_sep, after = partition(text, sep)
        assert cut(text, sep) == (before, after, bool(found_sep))

    @pytest.mark.parametrize("text", CORPUS)
    def test_empty_pattern_count(self, text):
        """Test the empty pattern matches length + 1 times."""
        assert count(text, "") == length(text) + 1

    @pytest.mark.parametrize("text", CORPUS)
    @pytest.mark.parametrize("sep", SEPARATORS)
    def test_replace_all_removes_every_occurrence(self, text, sep):
        """Test replacing all occurrences leaves none behind."""
        assert count(replace(text, sep, "\x00"), sep) == 0


class TestScenarios:
    """Tests for the documented end-to-end examples."""

    def test_partition_asymmetry(self):
        """Test the not-found placements differ."""
        assert partition("taco", "/") == ("taco", "", "")
        assert rpartition("taco", "/") == ("", "", "taco")

    def test_examples(self):
        """Test the reference examples."""
        assert count("abc", "") == 4
        assert replace("a-b-c", "-", "_", 1) == "a_b-c"
        assert center("test", 9) == "   test  "
        assert cut("a=b=c", "=") == ("a", "b=c", True)
        assert slice("a🌮bc", 1, 3) == "🌮b"
