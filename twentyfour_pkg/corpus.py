"""Digit corpus: the multiset of digits a player may still use in a round."""

from __future__ import annotations

from typing import Iterable, Iterator

from .config import MAX_DIGIT, MIN_DIGIT
from .types import DIGIT_NOT_AVAILABLE, INVALID_DIGIT, ValidationError


class DigitCorpus:
    """Ordered, mutable multiset of single digits.

    The parser consumes one occurrence per matched digit token. The same
    instance is handed to every nested bracket evaluation, so consumption is
    visible across the whole expression. Duplicates are independent units:
    a corpus of ``[8, 8, 7, 4]`` allows ``8`` to be used twice.
    """

    def __init__(self, digits: Iterable[int] = ()):
        self._digits: list[int] = []
        for digit in digits:
            if isinstance(digit, bool) or not isinstance(digit, int):
                raise ValidationError(
                    f"Corpus entries must be integers, got {digit!r}", INVALID_DIGIT
                )
            if not MIN_DIGIT <= digit <= MAX_DIGIT:
                raise ValidationError(
                    f"Digit {digit} is outside {MIN_DIGIT}..{MAX_DIGIT}", INVALID_DIGIT
                )
            self._digits.append(digit)

    def contains(self, value: int) -> bool:
        """Return True if at least one occurrence of value remains."""
        return value in self._digits

    def remove(self, value: int) -> None:
        """Consume exactly one occurrence of value.

        Raises:
            ValidationError: if value is not available. Callers check
                ``contains`` first.
        """
        if value not in self._digits:
            raise ValidationError(
                f"Number {value} is not in the corpus", DIGIT_NOT_AVAILABLE
            )
        self._digits.remove(value)

    def remaining(self) -> list[int]:
        """Copy of the unused digits, in their original order."""
        return list(self._digits)

    def is_empty(self) -> bool:
        return not self._digits

    def __contains__(self, value: object) -> bool:
        return value in self._digits

    def __len__(self) -> int:
        return len(self._digits)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._digits))

    def __repr__(self) -> str:
        return f"DigitCorpus({self._digits!r})"
