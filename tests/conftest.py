"""
Pytest configuration and shared fixtures for unistr tests.
"""

import pytest

from unistr.cli import main

# A taco emoji, U+1F32E, as one codepoint and as the UTF-16 surrogate pair
# that encodes it.
TACO = "🌮"
TACO_PAIR = "\ud83c\udf2e"
PIZZA = "🍕"


@pytest.fixture
def taco() -> str:
    """A single astral codepoint."""
    return TACO


@pytest.fixture
def taco_pair() -> str:
    """The same codepoint spelled as a surrogate pair."""
    return TACO_PAIR


@pytest.fixture
def run_cli(capsys):
    """Fixture to run the CLI and capture its exit code and output."""

    def _run(*argv: str) -> tuple[int, str, str]:
        code = main(list(argv))
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    return _run
