"""
unistr Command-Line Interface.

Applies a unistr operation to a piece of text and prints the result.

Usage:
    unistr length "🌮🍕"                   # 2
    unistr center test --width 9 --fill _  # ___test__
    unistr split "a,b,c" --separator ,     # one item per line
    unistr cut "a=b=c" "=" --json          # ["a", "b=c", true]
    echo "some text" | unistr capwords -   # read the text from stdin
    unistr info                            # Show library info
"""

import argparse
import json
import logging
import os
import sys
from typing import Any, Callable, Optional

from unistr import __version__
from unistr.defaults import (
    DEFAULT_BREAK_TAG,
    DEFAULT_FILL,
    DEFAULT_SEPARATOR,
    DEFAULT_TAB_SIZE,
    DEFAULT_WORD_SEPARATOR,
    REPLACE_ALL,
)
from unistr.ops import (
    capwords,
    center,
    count,
    cut,
    expandtabs,
    lcfirst,
    length,
    ljust,
    lstrip,
    nl2br,
    partition,
    replace,
    reverse,
    rjust,
    rpartition,
    rstrip,
    slice,
    split,
    strip,
    swapcase,
    ucfirst,
)
from unistr.utils.errors import UnistrError

logger = logging.getLogger("unistr")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


# =============================================================================
# ANSI Color Codes for Terminal Output
# =============================================================================


class Colors:
    """ANSI escape codes for colored terminal output."""

    RED = "\033[91m"
    GREEN = "\033[92m"
    CYAN = "\033[96m"
    BOLD = "\033[1m"
    RESET = "\033[0m"

    @classmethod
    def disable(cls) -> None:
        """Disable all colors (for non-TTY output)."""
        cls.RED = ""
        cls.GREEN = ""
        cls.CYAN = ""
        cls.BOLD = ""
        cls.RESET = ""


def _init_colors() -> None:
    """Initialize colors based on terminal capabilities."""
    if not sys.stdout.isatty() or os.environ.get("NO_COLOR"):
        Colors.disable()


_init_colors()


# =============================================================================
# Argument Parsing
# =============================================================================


def _common_parser() -> argparse.ArgumentParser:
    """Arguments shared by every text operation."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "text",
        type=str,
        help="Input text ('-' reads it from stdin)",
    )
    common.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    return common


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="unistr",
        description="unistr - Unicode-aware string utilities",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    common = _common_parser()

    # Codepoints
    subparsers.add_parser("length", aliases=["len"], parents=[common], help="Count codepoints")

    split_parser = subparsers.add_parser("split", parents=[common], help="Split text on a separator")
    split_parser.add_argument(
        "-s",
        "--separator",
        default=DEFAULT_SEPARATOR,
        help="Separator (default: split into codepoints)",
    )

    # Padding
    for name, help_text in (
        ("ljust", "Left-justify text"),
        ("rjust", "Right-justify text"),
        ("center", "Center text"),
    ):
        pad_parser = subparsers.add_parser(name, parents=[common], help=help_text)
        pad_parser.add_argument(
            "-w",
            "--width",
            type=int,
            required=True,
            help="Field width in codepoints",
        )
        pad_parser.add_argument(
            "-f",
            "--fill",
            default=DEFAULT_FILL,
            help="Fill string (default: space)",
        )

    # Trimming
    for name, aliases, help_text in (
        ("strip", ["trim"], "Remove a character from both ends"),
        ("lstrip", [], "Remove a character from the start"),
        ("rstrip", [], "Remove a character from the end"),
    ):
        strip_parser = subparsers.add_parser(name, aliases=aliases, parents=[common], help=help_text)
        strip_parser.add_argument(
            "-c",
            "--char",
            default=DEFAULT_FILL,
            help="Character to remove (default: space)",
        )

    # Case
    subparsers.add_parser("swapcase", parents=[common], help="Swap the case of ASCII letters")
    subparsers.add_parser("ucfirst", aliases=["capitalize"], parents=[common], help="Uppercase the first character")
    subparsers.add_parser("lcfirst", parents=[common], help="Lowercase the first character")
    capwords_parser = subparsers.add_parser(
        "capwords", aliases=["title"], parents=[common], help="Uppercase the first character of each word"
    )
    capwords_parser.add_argument(
        "-s",
        "--separator",
        default=DEFAULT_WORD_SEPARATOR,
        help="Word separator (default: space)",
    )

    # Search
    count_parser = subparsers.add_parser("count", parents=[common], help="Count occurrences of a substring")
    count_parser.add_argument("substring", type=str, help="Substring to count")

    # Partitioning
    for name, help_text in (
        ("partition", "Split around the first occurrence of a separator"),
        ("rpartition", "Split around the last occurrence of a separator"),
        ("cut", "Cut around the first occurrence of a separator"),
    ):
        partition_parser = subparsers.add_parser(name, parents=[common], help=help_text)
        partition_parser.add_argument("separator", type=str, help="Separator")

    # Extraction
    slice_parser = subparsers.add_parser("slice", aliases=["substr"], parents=[common], help="Slice by codepoint index")
    slice_parser.add_argument("start", type=int, help="Start index (negative counts from the end)")
    slice_parser.add_argument("end", type=int, nargs="?", default=None, help="End index (exclusive)")

    subparsers.add_parser("reverse", parents=[common], help="Reverse text")

    replace_parser = subparsers.add_parser("replace", parents=[common], help="Replace a substring")
    replace_parser.add_argument("old", type=str, help="Substring to replace")
    replace_parser.add_argument("new", type=str, help="Replacement")
    replace_parser.add_argument(
        "-n",
        "--count",
        type=int,
        default=REPLACE_ALL,
        help="Maximum number of replacements (default: all)",
    )

    # Layout
    nl2br_parser = subparsers.add_parser("nl2br", parents=[common], help="Insert break tags before line breaks")
    nl2br_parser.add_argument(
        "-t",
        "--tag",
        default=DEFAULT_BREAK_TAG,
        help=f"Break tag (default: {DEFAULT_BREAK_TAG})",
    )
    expandtabs_parser = subparsers.add_parser("expandtabs", parents=[common], help="Replace tabs with spaces")
    expandtabs_parser.add_argument(
        "-t",
        "--tab-size",
        type=int,
        default=DEFAULT_TAB_SIZE,
        help=f"Spaces per tab (default: {DEFAULT_TAB_SIZE})",
    )

    # Info command
    subparsers.add_parser(
        "info",
        help="Show library information",
    )

    return parser


# =============================================================================
# Input / Output
# =============================================================================


def _read_text(args: argparse.Namespace) -> str:
    """Return the input text, reading stdin for '-'."""
    if args.text != "-":
        return args.text
    text = sys.stdin.read()
    # Drop the line ending the shell pipeline appends, keep any other.
    if text.endswith("\r\n"):
        text = text[:-2]
    elif text.endswith("\n"):
        text = text[:-1]
    return text


def _emit(result: Any, as_json: bool) -> None:
    """Print a result: JSON, one sequence item per line, or the plain value."""
    if as_json:
        print(json.dumps(result, ensure_ascii=False))
    elif isinstance(result, (list, tuple)):
        for item in result:
            print(str(item).lower() if isinstance(item, bool) else item)
    else:
        print(result)


# =============================================================================
# Command Handlers
# =============================================================================


def cmd_length(args: argparse.Namespace) -> Any:
    """Handle the length command."""
    return length(_read_text(args))


def cmd_split(args: argparse.Namespace) -> Any:
    """Handle the split command."""
    return split(_read_text(args), args.separator)


def cmd_pad(args: argparse.Namespace) -> Any:
    """Handle the ljust, rjust and center commands."""
    operation = {"ljust": ljust, "rjust": rjust, "center": center}[args.command]
    return operation(_read_text(args), args.width, args.fill)


def cmd_strip(args: argparse.Namespace) -> Any:
    """Handle the strip, lstrip and rstrip commands."""
    operation = {"strip": strip, "trim": strip, "lstrip": lstrip, "rstrip": rstrip}[args.command]
    return operation(_read_text(args), args.char)


def cmd_capwords(args: argparse.Namespace) -> Any:
    """Handle the capwords command."""
    return capwords(_read_text(args), args.separator)


def cmd_count(args: argparse.Namespace) -> Any:
    """Handle the count command."""
    return count(_read_text(args), args.substring)


def cmd_partition(args: argparse.Namespace) -> Any:
    """Handle the partition, rpartition and cut commands."""
    operation = {"partition": partition, "rpartition": rpartition, "cut": cut}[args.command]
    return operation(_read_text(args), args.separator)


def cmd_slice(args: argparse.Namespace) -> Any:
    """Handle the slice command."""
    return slice(_read_text(args), args.start, args.end)


def cmd_replace(args: argparse.Namespace) -> Any:
    """Handle the replace command."""
    return replace(_read_text(args), args.old, args.new, args.count)


def cmd_nl2br(args: argparse.Namespace) -> Any:
    """Handle the nl2br command."""
    return nl2br(_read_text(args), args.tag)


def cmd_expandtabs(args: argparse.Namespace) -> Any:
    """Handle the expandtabs command."""
    return expandtabs(_read_text(args), args.tab_size)


def _unary(operation: Callable[[str], str]) -> Callable[[argparse.Namespace], Any]:
    """Build a handler for an operation that takes only the text."""

    def handler(args: argparse.Namespace) -> Any:
        return operation(_read_text(args))

    handler.__doc__ = f"Handle the {operation.__name__} command."
    return handler


def cmd_info(args: argparse.Namespace) -> int:
    """Handle the info command - show library information."""
    print(f"""
{Colors.BOLD}unistr{Colors.RESET}
======

{Colors.CYAN}Version:{Colors.RESET} {__version__}

{Colors.CYAN}Measuring:{Colors.RESET}
  Lengths, indices and counts are Unicode codepoints.
  Surrogate pairs count as one codepoint.
  Grapheme clusters are not merged.

{Colors.CYAN}Commands:{Colors.RESET}
  length split ljust rjust center strip lstrip rstrip
  swapcase capwords ucfirst lcfirst count partition rpartition
  cut slice reverse replace nl2br expandtabs
""")
    return 0


COMMAND_HANDLERS: dict[str, Callable[[argparse.Namespace], Any]] = {
    "length": cmd_length,
    "len": cmd_length,
    "split": cmd_split,
    "ljust": cmd_pad,
    "rjust": cmd_pad,
    "center": cmd_pad,
    "strip": cmd_strip,
    "trim": cmd_strip,
    "lstrip": cmd_strip,
    "rstrip": cmd_strip,
    "swapcase": _unary(swapcase),
    "ucfirst": _unary(ucfirst),
    "capitalize": _unary(ucfirst),
    "lcfirst": _unary(lcfirst),
    "capwords": cmd_capwords,
    "title": cmd_capwords,
    "count": cmd_count,
    "partition": cmd_partition,
    "rpartition": cmd_partition,
    "cut": cmd_partition,
    "slice": cmd_slice,
    "substr": cmd_slice,
    "reverse": _unary(reverse),
    "replace": cmd_replace,
    "nl2br": cmd_nl2br,
    "expandtabs": cmd_expandtabs,
}


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "info":
        return cmd_info(args)

    handler = COMMAND_HANDLERS.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        result = handler(args)
    except UnistrError as e:
        logger.debug("%s failed: %s", args.command, e)
        print(f"{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
        return 1

    _emit(result, args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
