"""Tests for failure modes and invalid input handling."""

import math

import pytest

from twentyfour_pkg.api import evaluate
from twentyfour_pkg.config import MAX_INPUT_LENGTH, MAX_NESTING_DEPTH
from twentyfour_pkg.types import (
    EMPTY_EXPRESSION,
    MISSING_OPERAND,
    TOO_DEEP,
    TOO_LONG,
    UNMATCHED_PARENTHESIS,
    EvalResult,
)


class TestInputValidationFailures:
    """Test input validation failure modes."""

    def test_none_input(self):
        assert evaluate([1, 2, 3, 4], None).code == EMPTY_EXPRESSION

    def test_whitespace_only(self):
        assert evaluate([1, 2, 3, 4], " \t\n ").code == EMPTY_EXPRESSION

    def test_too_long_input(self):
        result = evaluate([1, 2, 3, 4], "(" * (MAX_INPUT_LENGTH + 1))
        assert result.ok is False
        assert result.code == TOO_LONG
        assert str(MAX_INPUT_LENGTH) in result.error

    def test_whitespace_does_not_count_towards_length(self):
        expression = "1 + 2 + 3 + 4" + " " * (MAX_INPUT_LENGTH * 2)
        result = evaluate([1, 2, 3, 4], expression)
        assert result.ok is True
        assert result.value == 10.0

    def test_redundant_brackets_around_each_digit(self):
        expression = " * ".join("(" * 30 + d + ")" * 30 for d in "1234")
        result = evaluate([1, 2, 3, 4], expression)
        assert result.ok is True
        assert result.value == 24.0

    def test_nesting_at_depth_limit(self):
        expression = "(" * MAX_NESTING_DEPTH + "5" + ")" * MAX_NESTING_DEPTH
        result = evaluate([5], expression)
        assert result.ok is True
        assert result.value == 5.0

    def test_nesting_beyond_depth_limit(self):
        depth = MAX_NESTING_DEPTH + 1
        result = evaluate([5], "(" * depth + "5" + ")" * depth)
        assert result.ok is False
        assert result.code == TOO_DEEP
        assert str(MAX_NESTING_DEPTH) in result.error

    def test_unbalanced_nesting(self):
        assert evaluate([5], "((5)").code == UNMATCHED_PARENTHESIS

    @pytest.mark.parametrize(
        "expression",
        ["+", "-1+2", "1+2+", "1+2*", "1*/2", "(1+)*2"],
    )
    def test_dangling_operators(self, expression):
        result = evaluate([1, 2], expression)
        assert result.ok is False
        assert result.code == MISSING_OPERAND

    @pytest.mark.parametrize(
        "expression",
        [
            "(((",
            ")))",
            ")(",
            "()()",
            "1+-2",
            "--",
            "(*)",
            "1..2",
            "import os",
            "__import__('os')",
            "1e3",
            "\x00",
        ],
    )
    def test_garbage_never_raises(self, expression):
        result = evaluate([1, 2, 3, 4], expression)
        assert isinstance(result, EvalResult)
        assert result.ok is False
        assert result.code is not None


class TestDivisionByZero:
    """Division by zero yields a non-finite value instead of a failure."""

    def test_positive_infinity(self):
        result = evaluate([4, 3, 3, 1], "4 / (3 - 3) * 1")
        assert result.ok is True
        assert result.value == math.inf

    def test_negative_infinity(self):
        result = evaluate([4, 3, 3, 1], "(1 - 4) / (3 - 3)")
        assert result.ok is True
        assert result.value == -math.inf

    def test_zero_over_zero(self):
        result = evaluate([4, 4, 3, 3], "(4 - 4) / (3 - 3)")
        assert result.ok is True
        assert math.isnan(result.value)
