"""Test that API functions return typed dataclasses."""

from twentyfour_pkg.api import check_solution, evaluate, new_round, validate_expression
from twentyfour_pkg.config import MAX_INPUT_LENGTH
from twentyfour_pkg.types import TOO_LONG, UNUSED_DIGITS, EvalResult, RoundResult


class TestAPITypedReturns:
    """Test that all API functions return typed dataclasses."""

    def test_evaluate_returns_eval_result(self):
        result = evaluate([1, 2, 3, 4], "(4 * 3 * 2) + 1")
        assert isinstance(result, EvalResult)
        assert result.ok is True
        assert result.value == 25.0

    def test_evaluate_error_returns_eval_result(self):
        result = evaluate([1, 2, 3, 4], "1 + 2 + 3")
        assert isinstance(result, EvalResult)
        assert result.ok is False
        assert result.code == UNUSED_DIGITS
        assert result.error is not None

    def test_evaluate_does_not_mutate_digits(self):
        digits = [1, 2, 3, 4]
        evaluate(digits, "1 + 2 + 3 + 4")
        assert digits == [1, 2, 3, 4]

    def test_evaluate_too_long(self):
        result = evaluate([1, 2, 3, 4], "1+" * MAX_INPUT_LENGTH)
        assert result.code == TOO_LONG

    def test_evaluate_ignores_whitespace_padding(self):
        result = evaluate([1, 2, 3, 4], "1 + 2 + 3 + 4" + " " * 200)
        assert result.ok is True
        assert result.value == 10.0

    def test_validate_expression(self):
        assert validate_expression([1, 2, 3, 4], "1 + 2 + 3 + 4") == (True, None)
        is_valid, error = validate_expression([1, 2], "12")
        assert is_valid is False
        assert "multiple digit" in error

    def test_check_solution_returns_round_result(self):
        result = check_solution([8, 8, 7, 4], "(7 - (8 / 8)) * 4")
        assert isinstance(result, RoundResult)
        assert result.solved is True
        assert result.message == "yes, this is indeed 24"

    def test_check_solution_custom_target(self):
        result = check_solution([1, 2, 3, 4], "1 + 2 + 3 + 4", target=10)
        assert result.solved is True
        assert result.message == "yes, this is indeed 10"

    def test_check_solution_error_returns_round_result(self):
        result = check_solution([1, 2, 3, 4], "4 * 3 * (1 + 1)")
        assert isinstance(result, RoundResult)
        assert result.ok is False
        assert result.solved is False

    def test_new_round(self):
        digits = new_round()
        assert len(digits) == 4
        assert all(1 <= d <= 9 for d in digits)

    def test_new_round_seeded(self):
        assert new_round(seed=3) == new_round(seed=3)

    def test_repr(self):
        assert repr(evaluate([5], "5")) == "EvalResult(ok=True, value=5.0)"
        assert "UNUSED_DIGITS" in repr(evaluate([5, 5], "5"))
