"""
unistr Utilities Package.

Common utilities for error handling.
"""

from unistr.utils.errors import (
    InvalidArgumentError,
    UnistrError,
)

__all__ = [
    # Errors
    "UnistrError",
    "InvalidArgumentError",
]
