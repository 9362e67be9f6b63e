"""Type definitions, error codes and result dataclasses for consistent API responses."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from .config import TARGET

# Parse failure codes. Every failed evaluation carries exactly one of these.
EMPTY_EXPRESSION = "EMPTY_EXPRESSION"
DIGIT_NOT_AVAILABLE = "DIGIT_NOT_AVAILABLE"
MULTI_DIGIT_NUMBER = "MULTI_DIGIT_NUMBER"
MISSING_OPERATOR = "MISSING_OPERATOR"
MISSING_OPERAND = "MISSING_OPERAND"
UNMATCHED_PARENTHESIS = "UNMATCHED_PARENTHESIS"
UNUSED_DIGITS = "UNUSED_DIGITS"
INVALID_TOKEN = "INVALID_TOKEN"

# Raised only at the API boundary, before parsing
TOO_LONG = "TOO_LONG"
TOO_DEEP = "TOO_DEEP"
# Raised for a corpus built from something other than digits in range
INVALID_DIGIT = "INVALID_DIGIT"
# Raised by the digit generator for a non-positive count
INVALID_COUNT = "INVALID_COUNT"

PARSE_ERROR_CODES = (
    EMPTY_EXPRESSION,
    DIGIT_NOT_AVAILABLE,
    MULTI_DIGIT_NUMBER,
    MISSING_OPERATOR,
    MISSING_OPERAND,
    UNMATCHED_PARENTHESIS,
    UNUSED_DIGITS,
    INVALID_TOKEN,
)


@dataclass
class EvalResult:
    """Result of evaluating an expression against a digit corpus."""

    ok: bool
    value: float | None = None
    error: str | None = None
    code: str | None = None

    @classmethod
    def success(cls, value: float) -> EvalResult:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, code: str, error: str) -> EvalResult:
        return cls(ok=False, error=error, code=code)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.value is not None:
            result_dict["value"] = self.value if math.isfinite(self.value) else str(self.value)
        if self.code is not None:
            result_dict["code"] = self.code
        if self.error is not None:
            result_dict["error"] = self.error
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"EvalResult(ok=False, code={self.code!r}, error={self.error!r})"
        return f"EvalResult(ok=True, value={self.value!r})"


@dataclass
class RoundResult:
    """Outcome of one game round: the submitted expression judged against the target."""

    ok: bool
    solved: bool
    digits: list[int] = field(default_factory=list)
    expression: str | None = None
    target: int = TARGET
    value: float | None = None
    exact: str | None = None  # exact rational value, e.g. "24" or "25/2"
    code: str | None = None
    error: str | None = None
    message: str = ""

    @property
    def exit_code(self) -> int:
        """Process exit status for this round: 0 only for a solved round."""
        return 0 if self.solved else 1

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {
            "ok": self.ok,
            "solved": self.solved,
            "digits": list(self.digits),
            "target": self.target,
            "message": self.message,
        }
        if self.expression is not None:
            result_dict["expression"] = self.expression
        if self.value is not None:
            # JSON has no inf/nan literals
            result_dict["value"] = self.value if math.isfinite(self.value) else str(self.value)
        if self.exact is not None:
            result_dict["exact"] = self.exact
        if self.code is not None:
            result_dict["code"] = self.code
        if self.error is not None:
            result_dict["error"] = self.error
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"RoundResult(ok=False, digits={self.digits!r}, code={self.code!r})"
        parts = [
            f"ok={self.ok}",
            f"solved={self.solved}",
            f"digits={self.digits!r}",
            f"value={self.value!r}",
        ]
        if self.exact is not None:
            parts.append(f"exact={self.exact!r}")
        return f"RoundResult({', '.join(parts)})"


class ValidationError(Exception):
    """Raised when input validation fails."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
