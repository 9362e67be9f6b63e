"""Centralized configuration for the 24 game.

This module defines:
- Game rules (target value, number of digits, digit range)
- Numeric tolerance for the target check
- Input validation limits
- User-facing round messages

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with TWENTYFOUR_)
"""

import importlib.metadata
import os

try:
    VERSION = importlib.metadata.version("twentyfour")
except importlib.metadata.PackageNotFoundError:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Game rules
TARGET = int(os.getenv("TWENTYFOUR_TARGET", "24"))
DIGIT_COUNT = int(os.getenv("TWENTYFOUR_DIGIT_COUNT", "4"))
MIN_DIGIT = int(os.getenv("TWENTYFOUR_MIN_DIGIT", "1"))
MAX_DIGIT = int(os.getenv("TWENTYFOUR_MAX_DIGIT", "9"))

# Absolute tolerance when comparing a float result against TARGET
TARGET_TOLERANCE = float(os.getenv("TWENTYFOUR_TARGET_TOLERANCE", "1e-6"))

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("TWENTYFOUR_MAX_INPUT_LENGTH", "10000"))  # non-whitespace characters
MAX_NESTING_DEPTH = int(os.getenv("TWENTYFOUR_MAX_NESTING_DEPTH", "100"))  # bracket levels

# Output formatting
OUTPUT_PRECISION = int(os.getenv("TWENTYFOUR_OUTPUT_PRECISION", "6"))

PROMPT_PREFIX = "solve:"
MSG_SOLVED = "yes, this is indeed {target}"
MSG_WRONG_VALUE = "no, this is {value}"
MSG_INVALID = "sorry, this is not a valid expression"
MSG_TOO_LONG = "Expression too long (>{limit} non-whitespace characters)"
MSG_TOO_DEEP = "Expression too deeply nested (>{limit} levels)"
