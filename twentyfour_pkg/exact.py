"""Exact rational re-evaluation of validated expressions using SymPy.

The game evaluator works in floats. This module evaluates the same text with
SymPy integers and rationals, so ``8 / (3 - 8 / 3)`` is exactly 24 even
though the float result is 23.999999999999996.
"""

from __future__ import annotations

import sympy as sp
from sympy.parsing.sympy_parser import parse_expr, standard_transformations

from .operators import OPERATORS
from .parser import DIGITS, tokenize
from .types import INVALID_TOKEN, ValidationError

_ALLOWED_TOKENS = DIGITS | set(OPERATORS) | {"(", ")"}


def exact_value(expression: str) -> sp.Expr:
    """Evaluate an arithmetic expression exactly.

    Only digits, ``+ - * /`` and parentheses are accepted, so the text never
    reaches SymPy with names or calls in it. Division by zero evaluates to
    ``zoo`` (or ``nan`` for ``0/0``) rather than raising.

    Args:
        expression: Expression text (e.g., "(7 - (8 / 8)) * 4")

    Returns:
        SymPy number (Integer, Rational, zoo or nan)

    Raises:
        ValidationError: if the text contains anything but the allowed tokens
    """
    tokens = tokenize(expression)
    for token in tokens:
        if token not in _ALLOWED_TOKENS:
            raise ValidationError(f"Unknown token '{token}'", INVALID_TOKEN)
    return parse_expr(
        "".join(tokens), transformations=standard_transformations, evaluate=True
    )


def format_exact(value: sp.Expr) -> str:
    """Render an exact value, e.g. ``24``, ``25/2`` or ``zoo``."""
    return str(value)


def is_exact_target(expression: str, target: int) -> bool:
    """True if expression is exactly equal to target."""
    value = exact_value(expression)
    return bool(value.is_finite) and value == sp.Integer(target)
