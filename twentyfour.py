#!/usr/bin/env python3
"""
twentyfour - the 24 game

Main entry point for the 24 game. This file serves as a thin wrapper that
delegates all functionality to the twentyfour_pkg package.

Usage:
    python twentyfour.py                          # Random digits, expression from stdin
    python twentyfour.py -d 8 8 7 4 -e "(7 - (8 / 8)) * 4"
    python twentyfour.py --help                   # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for the 24 game.

    Delegates to the twentyfour_pkg.cli module, which handles argument
    parsing, the round itself and output formatting.

    Returns:
        Exit code (0 when the expression equals 24, non-zero otherwise).
    """
    try:
        from twentyfour_pkg.cli import main_entry
    except ImportError as e:
        print(f"Error: Failed to import twentyfour_pkg: {e}")
        print("Please ensure all dependencies are installed: pip install -e .")
        return 1

    try:
        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
