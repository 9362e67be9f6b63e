"""Binary arithmetic operators available inside an expression.

The set is closed: addition, subtraction, multiplication and division. Each
operator is an immutable record of its symbol, precedence rank and evaluation
function. Supporting another operator means adding one entry to ``OPERATORS``;
the evaluator only ever looks operators up by symbol.
"""

from __future__ import annotations

import math
import operator as _op
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class Operator:
    """A binary infix operator."""

    name: str
    symbol: str
    precedence: int
    func: Callable[[float, float], float]

    def apply(self, a: float, b: float) -> float:
        """Evaluate ``a <symbol> b``."""
        return self.func(a, b)

    def __repr__(self) -> str:
        return f"Operator({self.name!r}, {self.symbol!r})"


def _divide(a: float, b: float) -> float:
    """IEEE-754 style division: dividing by zero gives inf or nan instead of raising."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


ADDITION = Operator("addition", "+", 0, _op.add)
SUBTRACTION = Operator("subtraction", "-", 0, _op.sub)
MULTIPLICATION = Operator("multiplication", "*", 1, _op.mul)
DIVISION = Operator("division", "/", 1, _divide)

OPERATORS: dict[str, Operator] = {
    op.symbol: op for op in (ADDITION, SUBTRACTION, MULTIPLICATION, DIVISION)
}


def is_operator(token: str) -> bool:
    return token in OPERATORS


def get_operator(symbol: str) -> Operator:
    """Look up an operator by its symbol.

    Raises:
        KeyError: if symbol is not one of ``+ - * /``
    """
    return OPERATORS[symbol]
