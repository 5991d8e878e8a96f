"""
Entry point for running unistr as a module.

Usage:
    python -m unistr length "🌮🍕"
"""

import sys

from unistr.cli import main

if __name__ == "__main__":
    sys.exit(main())
