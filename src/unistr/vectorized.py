"""
unistr - Vectorized Operations.

Applies any unistr operation elementwise over arrays of strings, using
NumPy ``frompyfunc`` ufuncs so arbitrary shapes and broadcasting work.

Usage:
    >>> import numpy as np
    >>> from unistr import center
    >>> from unistr.vectorized import lengths, vectorize
    >>> lengths(["🌮🍕", "abc"])
    array([2, 3])
    >>> vectorize(center, 5, "*")(np.array([["a", "bb"]]))
    array([['**a**', '**bb*']], dtype=object)
"""

from __future__ import annotations

import functools
from typing import Any, Callable

import numpy as np

from unistr.ops.segmenter import length


def vectorize(operation: Callable[..., Any], *args: Any, **kwargs: Any) -> Callable[[Any], np.ndarray]:
    """
    Build a callable applying ``operation(text, *args, **kwargs)`` to every element.

    The returned callable accepts any array-like of strings and returns an
    object array of the same shape.
    """
    ufunc = np.frompyfunc(lambda text: operation(text, *args, **kwargs), 1, 1)

    def apply(texts: Any) -> np.ndarray:
        return np.asarray(ufunc(np.asarray(texts, dtype=object)), dtype=object)

    functools.update_wrapper(apply, operation)
    apply.__name__ = f"vectorized_{getattr(operation, '__name__', 'operation')}"
    return apply


def lengths(texts: Any) -> np.ndarray:
    """Return the codepoint length of every string as an int64 array."""
    return vectorize(length)(texts).astype(np.int64)
