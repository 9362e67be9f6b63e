"""Public API for the 24 game - returns structured objects without side effects."""

from __future__ import annotations

import random
from typing import Sequence

from .config import TARGET
from .game import evaluate_submission, generate_digits, play_round
from .logging_config import get_logger
from .types import EvalResult, RoundResult

logger = get_logger("api")


def evaluate(digits: Sequence[int], expression: str | None) -> EvalResult:
    """Evaluate an expression that must use every digit exactly once.

    Args:
        digits: Available digits (e.g., [8, 8, 7, 4])
        expression: Expression string (e.g., "(7 - (8 / 8)) * 4")

    Returns:
        EvalResult with the float value or an error code

    Example:
        >>> from twentyfour_pkg.api import evaluate
        >>> evaluate([1, 2, 3, 4], "(4 * 3 * 2) + 1").value
        25.0
        >>> evaluate([1, 2, 3, 4], "1 + 2 + 3").code
        'UNUSED_DIGITS'
    """
    return evaluate_submission(digits, expression)


def validate_expression(
    digits: Sequence[int], expression: str | None
) -> tuple[bool, str | None]:
    """Validate an expression without caring about its value.

    Args:
        digits: Available digits
        expression: Expression string to validate

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> from twentyfour_pkg.api import validate_expression
        >>> validate_expression([1, 2, 3, 4], "1 + 2 + 3 + 4")
        (True, None)
        >>> validate_expression([1, 2], "12")
        (False, 'Forming multiple digit numbers from the supplied digits is disallowed')
    """
    result = evaluate_submission(digits, expression)
    return result.ok, result.error


def check_solution(
    digits: Sequence[int], expression: str | None, target: int = TARGET
) -> RoundResult:
    """Judge a submitted solution for a round.

    Args:
        digits: The digits of the round
        expression: The player's expression
        target: Value to reach (default: 24)

    Returns:
        RoundResult; ``solved`` is True only for a valid expression equal to target

    Example:
        >>> from twentyfour_pkg.api import check_solution
        >>> check_solution([8, 8, 7, 4], "(7 - (8 / 8)) * 4").message
        'yes, this is indeed 24'
    """
    return play_round(digits, expression, target)


def new_round(seed: int | None = None) -> list[int]:
    """Generate the digits for a new round.

    Args:
        seed: Optional seed for a reproducible round

    Returns:
        List of DIGIT_COUNT digits
    """
    rng = random.Random(seed) if seed is not None else None
    digits = generate_digits(rng=rng)
    logger.debug("New round: %s", digits)
    return digits
