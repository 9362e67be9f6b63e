"""Main entry point for running twentyfour_pkg as a module.

This allows playing a round with:
    python -m twentyfour_pkg
    python -m twentyfour_pkg --health-check
    python -m twentyfour_pkg -d 8 8 7 4 -e "(7 - (8 / 8)) * 4"

This is equivalent to running:
    python -m twentyfour_pkg.cli
    python twentyfour.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
