"""
Error types for unistr.
"""

from typing import Optional


class UnistrError(Exception):
    """Base exception for all unistr errors."""

    def __init__(self, message: str, argument: Optional[str] = None) -> None:
        self.message = message
        self.argument = argument
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.argument:
            return f"[{self.argument}] {self.message}"
        return self.message


class InvalidArgumentError(UnistrError, ValueError):
    """
    Raised when an operation receives an argument it cannot work with.

    Only partition and rpartition raise this, when their separator is the
    empty string. It is also a ValueError so callers catching the builtin
    keep working.
    """

    pass
