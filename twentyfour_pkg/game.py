"""Game round logic: digit generation, target check and round judging."""

from __future__ import annotations

import math
import random
from typing import Sequence

from .config import (
    DIGIT_COUNT,
    MAX_DIGIT,
    MAX_INPUT_LENGTH,
    MAX_NESTING_DEPTH,
    MIN_DIGIT,
    MSG_INVALID,
    MSG_SOLVED,
    MSG_TOO_DEEP,
    MSG_TOO_LONG,
    MSG_WRONG_VALUE,
    PROMPT_PREFIX,
    TARGET,
    TARGET_TOLERANCE,
)
from .corpus import DigitCorpus
from .exact import exact_value, format_exact
from .logging_config import get_logger
from .parser import evaluate_expression, format_number, nesting_depth, tokenize
from .types import INVALID_COUNT, TOO_DEEP, TOO_LONG, EvalResult, RoundResult, ValidationError

logger = get_logger("game")


def generate_digits(
    count: int = DIGIT_COUNT, rng: random.Random | None = None
) -> list[int]:
    """Draw count digits independently and uniformly from MIN_DIGIT..MAX_DIGIT.

    Args:
        count: Number of digits to draw (default: DIGIT_COUNT)
        rng: Optional random generator, e.g. ``random.Random(seed)``

    Returns:
        List of digits; repeats are allowed
    """
    if count < 1:
        raise ValidationError(f"Digit count must be positive, got {count}", INVALID_COUNT)
    rng = rng or random.Random()
    return [rng.randint(MIN_DIGIT, MAX_DIGIT) for _ in range(count)]


def format_prompt(digits: Sequence[int]) -> str:
    """Prompt line shown to the player, e.g. ``solve: 8 4 7 4``."""
    return f"{PROMPT_PREFIX} {' '.join(str(d) for d in digits)}"


def is_target(value: float, target: int = TARGET, tolerance: float = TARGET_TOLERANCE) -> bool:
    """True if value equals target within an absolute tolerance."""
    return math.isfinite(value) and math.isclose(value, target, rel_tol=0.0, abs_tol=tolerance)


def evaluate_submission(digits: Sequence[int], expression: str | None) -> EvalResult:
    """Evaluate a player's expression against a fresh corpus built from digits.

    Input longer than MAX_INPUT_LENGTH tokens (whitespace excluded) or nested
    deeper than MAX_NESTING_DEPTH brackets is rejected before parsing, which
    bounds the bracket recursion depth.
    """
    if expression is not None:
        tokens = tokenize(expression)
        if len(tokens) > MAX_INPUT_LENGTH:
            return EvalResult.failure(TOO_LONG, MSG_TOO_LONG.format(limit=MAX_INPUT_LENGTH))
        if nesting_depth(tokens) > MAX_NESTING_DEPTH:
            return EvalResult.failure(TOO_DEEP, MSG_TOO_DEEP.format(limit=MAX_NESTING_DEPTH))
    return evaluate_expression(DigitCorpus(digits), expression)


def play_round(
    digits: Sequence[int], expression: str | None, target: int = TARGET
) -> RoundResult:
    """Judge one submitted expression for the given digits.

    Args:
        digits: The digits shown to the player
        expression: The player's expression (None when no input was read)
        target: Value the expression must reach

    Returns:
        RoundResult with value, exact value and the user-facing message
    """
    digits = list(digits)
    result = evaluate_submission(digits, expression)

    if not result.ok:
        logger.info("Round %s: invalid expression %r (%s)", digits, expression, result.code)
        return RoundResult(
            ok=False,
            solved=False,
            digits=digits,
            expression=expression,
            target=target,
            code=result.code,
            error=result.error,
            message=MSG_INVALID,
        )

    value = result.value
    exact = format_exact(exact_value(expression))
    solved = is_target(value, target)
    if solved:
        message = MSG_SOLVED.format(target=target)
    else:
        message = MSG_WRONG_VALUE.format(value=format_number(value))

    logger.info("Round %s: %r = %s (solved=%s)", digits, expression, exact, solved)
    return RoundResult(
        ok=True,
        solved=solved,
        digits=digits,
        expression=expression,
        target=target,
        value=value,
        exact=exact,
        message=message,
    )
