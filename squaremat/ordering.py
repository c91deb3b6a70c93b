"""Ordering of matrices by the sum of their entries."""

from __future__ import annotations

from typing import Iterable, Iterator


class SumOrdering:
    """Mixin that compares objects by the sum of all their entries.

    Subclasses must be iterable over rows, each row iterable over numbers.
    Objects of different sizes compare purely by their sums.
    """

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[Iterable[float]]:
        raise NotImplementedError

    def total(self) -> float:
        """Return the sum of every entry, taken row by row."""
        result = 0.0
        for row in self:
            for value in row:
                result += value
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SumOrdering):
            return NotImplemented
        return self.total() == other.total()

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, SumOrdering):
            return NotImplemented
        return not self.total() == other.total()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SumOrdering):
            return NotImplemented
        return self.total() >= other.total()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SumOrdering):
            return NotImplemented
        return self.total() <= other.total()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SumOrdering):
            return NotImplemented
        return self.total() > other.total()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SumOrdering):
            return NotImplemented
        return self.total() < other.total()