"""
Unit tests for vectorized operations over NumPy arrays.
"""

import numpy as np

from unistr.ops.extract import reverse
from unistr.ops.pad import center
from unistr.ops.separators import cut
from unistr.vectorized import lengths, vectorize


class TestLengths:
    """Tests for elementwise codepoint lengths."""

    def test_list_input(self):
        """Test a plain list of strings."""
        result = lengths(["🌮🍕", "abc", ""])
        assert result.dtype == np.int64
        assert result.tolist() == [2, 3, 0]

    def test_numpy_unicode_array(self):
        """Test a NumPy unicode array."""
        result = lengths(np.array(["taco", "🌮"]))
        assert result.tolist() == [4, 1]

    def test_shape_preserved(self):
        """Test multi-dimensional input keeps its shape."""
        result = lengths([["a", "bb"], ["🌮", "ccc"]])
        assert result.shape == (2, 2)
        assert result.tolist() == [[1, 2], [1, 3]]

    def test_surrogate_pairs(self, taco_pair):
        """Test surrogate pairs count once inside arrays too."""
        assert lengths([taco_pair, taco_pair * 2]).tolist() == [1, 2]

    def test_empty(self):
        """Test an empty input."""
        assert lengths([]).tolist() == []


class TestVectorize:
    """Tests for building vectorized operations."""

    def test_unary_operation(self):
        """Test an operation taking only the text."""
        result = vectorize(reverse)(["ab🌮", "xy"])
        assert result.tolist() == ["🌮ba", "yx"]

    def test_extra_arguments(self):
        """Test positional and keyword arguments are forwarded."""
        result = vectorize(center, 5, fill="*")(np.array([["a", "bb"]]))
        assert result.dtype == object
        assert result.tolist() == [["**a**", "**bb*"]]

    def test_tuple_results(self):
        """Test operations returning tuples keep them as elements."""
        result = vectorize(cut, "=")(["a=b", "c"])
        assert result[0] == ("a", "b", True)
        assert result[1] == ("c", "", False)

    def test_metadata(self):
        """Test the wrapper is named after the operation."""
        wrapped = vectorize(reverse)
        assert wrapped.__name__ == "vectorized_reverse"
        assert wrapped.__doc__ == reverse.__doc__

    def test_wrapper_carries_operation_attributes(self):
        """Test module, qualname and the wrapped operation are carried over."""
        wrapped = vectorize(reverse)
        assert wrapped.__module__ == "unistr.ops.extract"
        assert wrapped.__qualname__ == "reverse"
        assert wrapped.__wrapped__ is reverse
