"""Expression tokenizing and evaluation module.

This module handles:
- Splitting raw input into single-character tokens
- Enforcing the digit rules against a shared DigitCorpus
- Resolving operator precedence with a value stack and an operator stack
- Recursive evaluation of parenthesized groups
- Result formatting

Failures are never raised: every outcome is an EvalResult carrying either
the value or one of the parse error codes from ``types``.
"""

from __future__ import annotations

from typing import Any

from .config import OUTPUT_PRECISION
from .corpus import DigitCorpus
from .logging_config import get_logger
from .operators import Operator, get_operator, is_operator
from .types import (
    DIGIT_NOT_AVAILABLE,
    EMPTY_EXPRESSION,
    INVALID_TOKEN,
    MISSING_OPERAND,
    MISSING_OPERATOR,
    MULTI_DIGIT_NUMBER,
    UNMATCHED_PARENTHESIS,
    UNUSED_DIGITS,
    EvalResult,
)

logger = get_logger("parser")

DIGITS = frozenset("0123456789")


def tokenize(expression: str) -> list[str]:
    """Split an expression into one-character tokens, dropping whitespace.

    Args:
        expression: Raw player input (e.g., "(7 - (8 / 8)) * 4")

    Returns:
        List of tokens (e.g., ["(", "7", "-", "(", "8", "/", "8", ")", ")", "*", "4"])
    """
    return [char for char in expression if not char.isspace()]


def find_matching_paren(tokens: list[str], start: int) -> int | None:
    """Return the index of the ")" closing the "(" at tokens[start], or None."""
    depth = 0
    for index in range(start, len(tokens)):
        token = tokens[index]
        if token == "(":
            depth += 1
        elif token == ")":
            depth -= 1
            if depth == 0:
                return index
    return None


def nesting_depth(tokens: list[str]) -> int:
    """Deepest bracket level reached while scanning tokens left to right."""
    depth = 0
    deepest = 0
    for token in tokens:
        if token == "(":
            depth += 1
            deepest = max(deepest, depth)
        elif token == ")":
            depth -= 1
    return deepest


def format_number(val: Any, precision: int = OUTPUT_PRECISION) -> str:
    """Format a numeric value with specified precision.

    Args:
        val: Numeric value to format
        precision: Number of significant digits (default: OUTPUT_PRECISION)

    Returns:
        Formatted string representation of the number
    """
    try:
        fmt = "{:." + str(int(precision)) + "g}"
        return fmt.format(float(val))
    except (ValueError, TypeError, OverflowError):
        # Fallback for non-numeric or invalid values
        return str(val)


def _fail(code: str, message: str) -> EvalResult:
    logger.debug("Expression rejected [%s]: %s", code, message)
    return EvalResult.failure(code, message)


def _reduce(values: list[float], operators: list[Operator]) -> None:
    """Pop one operator and two values, push the result (left operand first)."""
    op = operators.pop()
    b = values.pop()
    a = values.pop()
    values.append(op.apply(a, b))


def _evaluate_tokens(
    corpus: DigitCorpus, tokens: list[str], require_all_digits: bool
) -> EvalResult:
    """Evaluate a token sequence against corpus.

    The procedure is as follows:
    1. An empty sequence is an empty expression.
    2. Scan the tokens left to right:
        I. Digit: it must still be in the corpus, must not be followed by
           another digit and must not directly follow a value. Push it and
           consume it from the corpus.
        II. Opening bracket: find its partner by depth counting and evaluate
            the tokens in between with the same corpus. Push the result.
        III. Operator: reduce every pending operator of equal or higher
             precedence, then push the operator.
        IV. Anything else (including a stray closing bracket) is invalid.
    3. At top level every digit of the corpus must have been consumed.
    4. Reduce the remaining operators right to left; precedence is already
       resolved, so the stacks hold an ascending chain.

    Invariant: during the scan ``len(values)`` is either ``len(operators)``
    (expecting an operand) or ``len(operators) + 1`` (expecting an operator).
    """
    if not tokens:
        return _fail(EMPTY_EXPRESSION, "Expression cannot be empty")

    values: list[float] = []
    operators: list[Operator] = []

    i = 0
    while i < len(tokens):
        token = tokens[i]
        expecting_operator = len(values) > len(operators)

        if token in DIGITS:
            value = int(token)

            if not corpus.contains(value):
                return _fail(DIGIT_NOT_AVAILABLE, f"Number {value} is not in the corpus")

            # Only single digit numbers are allowed
            if i + 1 < len(tokens) and tokens[i + 1] in DIGITS:
                return _fail(
                    MULTI_DIGIT_NUMBER,
                    "Forming multiple digit numbers from the supplied digits is disallowed",
                )

            if expecting_operator:
                return _fail(MISSING_OPERATOR, "Multiple numbers must be separated by an operator")

            values.append(float(value))
            corpus.remove(value)

        elif token == "(":
            close = find_matching_paren(tokens, i)
            if close is None:
                return _fail(UNMATCHED_PARENTHESIS, "Missing closing parenthesis")

            if expecting_operator:
                return _fail(MISSING_OPERATOR, "A parenthesized group must follow an operator")

            inner = _evaluate_tokens(corpus, tokens[i + 1 : close], require_all_digits=False)
            if not inner.ok:
                return inner
            values.append(inner.value)

            # Continue after the closing parenthesis
            i = close

        elif is_operator(token):
            if not expecting_operator:
                return _fail(MISSING_OPERAND, f"Operator '{token}' is missing its left operand")

            incoming = get_operator(token)
            while operators and operators[-1].precedence >= incoming.precedence:
                _reduce(values, operators)
            operators.append(incoming)

        elif token == ")":
            return _fail(INVALID_TOKEN, "Closing parenthesis without opening parenthesis")

        else:
            return _fail(INVALID_TOKEN, f"Unknown token '{token}'")

        i += 1

    if require_all_digits and not corpus.is_empty():
        unused = ", ".join(str(d) for d in corpus.remaining())
        return _fail(UNUSED_DIGITS, f"Unused numbers: {unused}")

    if len(values) == len(operators):
        return _fail(
            MISSING_OPERAND, f"Operator '{operators[-1].symbol}' is missing its right operand"
        )

    while operators:
        _reduce(values, operators)

    return EvalResult.success(values[0])


def evaluate_expression(corpus: DigitCorpus, expression: str | None) -> EvalResult:
    """Validate and evaluate a player expression against a digit corpus.

    Every digit of the corpus must be used exactly once. The corpus is
    consumed in place, so a fresh corpus is needed for each attempt.

    Args:
        corpus: Digits available for this round
        expression: Raw player input; None, empty or blank input is rejected

    Returns:
        EvalResult with the float value, or with ``ok=False`` and an error code

    Example:
        >>> from twentyfour_pkg.corpus import DigitCorpus
        >>> evaluate_expression(DigitCorpus([8, 8, 7, 4]), "(7 - (8 / 8)) * 4").value
        24.0
        >>> evaluate_expression(DigitCorpus([1, 2]), "12").code
        'MULTI_DIGIT_NUMBER'
    """
    if expression is None or not expression.strip():
        return _fail(EMPTY_EXPRESSION, "Expression cannot be empty")

    return _evaluate_tokens(corpus, tokenize(expression), require_all_digits=True)
