"""Square matrices of floats with arithmetic, comparison and determinant support."""

from __future__ import annotations

from numbers import Real
from typing import Iterable, Iterator

from .determinant import determinant as _determinant
from .determinant import minor as _minor
from .helpers import fmod
from .ordering import SumOrdering


class MatrixRow:
    """One row of a square matrix, indexable only inside its bounds."""

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[float]) -> None:
        self._values = [float(value) for value in values]

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def _check(self, j: int) -> None:
        if not 0 <= j < len(self._values):
            raise IndexError("index out of range")

    def __getitem__(self, j: int) -> float:
        self._check(j)
        return self._values[j]

    def __setitem__(self, j: int, value: float) -> None:
        self._check(j)
        self._values[j] = float(value)

    def __repr__(self) -> str:
        return f"MatrixRow({self._values!r})"


class SquareMat(SumOrdering):
    """An n-by-n matrix of floats, initialised to zeros.

    Matrices compare by the sum of their entries; ``%`` with a matrix is the
    element-wise product and with an integer is an element-wise remainder;
    ``^`` and ``**`` raise to a non-negative integer power; ``~`` transposes.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("the matrix must have a positive size")
        self._n = size
        self._rows = [MatrixRow([0.0] * size) for _ in range(size)]

    @classmethod
    def _from_rows(cls, rows: Iterable[Iterable[float]]) -> SquareMat:
        values = [list(row) for row in rows]
        mat = cls(len(values))
        mat._rows = [MatrixRow(row) for row in values]
        return mat

    @classmethod
    def _identity(cls, size: int) -> SquareMat:
        return cls._from_rows(
            [1.0 if i == j else 0.0 for j in range(size)] for i in range(size)
        )

    def _replace(self, other: SquareMat) -> SquareMat:
        self._n = other._n
        self._rows = other._rows
        return self

    def _require_same_size(self, other: SquareMat) -> None:
        if self._n != other._n:
            raise ValueError("other_matrix of incorrect size")

    def _elementwise(self, other: SquareMat, op) -> SquareMat:
        self._require_same_size(other)
        return self._from_rows(
            (op(a, b) for a, b in zip(row, other_row))
            for row, other_row in zip(self._rows, other._rows)
        )

    def _map(self, op) -> SquareMat:
        return self._from_rows((op(value) for value in row) for row in self._rows)

    def size(self) -> int:
        """Return the number of rows (and columns)."""
        return self._n

    def copy(self) -> SquareMat:
        """Return an independent copy of this matrix."""
        return self._from_rows(self._rows)

    def total(self) -> float:
        """Return the sum of every entry, taken row by row."""
        return sum((value for row in self._rows for value in row), 0.0)

    def __getitem__(self, i: int) -> MatrixRow:
        if not 0 <= i < self._n:
            raise IndexError("index out of range")
        return self._rows[i]

    def __iter__(self) -> Iterator[MatrixRow]:
        return iter(self._rows)

    def __add__(self, other: object) -> SquareMat:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._elementwise(other, lambda a, b: a + b)

    def __sub__(self, other: object) -> SquareMat:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._elementwise(other, lambda a, b: a - b)

    def __mul__(self, other: object) -> SquareMat:
        if isinstance(other, SquareMat):
            self._require_same_size(other)
            columns = [list(column) for column in zip(*other._rows)]
            return self._from_rows(
                (
                    sum((a * b for a, b in zip(row, column)), 0.0)
                    for column in columns
                )
                for row in self._rows
            )
        if isinstance(other, Real):
            scalar = float(other)
            return self._map(lambda value: value * scalar)
        return NotImplemented

    def __rmul__(self, scalar: object) -> SquareMat:
        if isinstance(scalar, Real):
            return self * scalar
        return NotImplemented

    def __mod__(self, other: object) -> SquareMat:
        if isinstance(other, SquareMat):
            return self._elementwise(other, lambda a, b: a * b)
        if isinstance(other, Real):
            divisor = int(other)
            if divisor == 0:
                raise ZeroDivisionError("division by 0")
            return self._map(lambda value: fmod(value, divisor))
        return NotImplemented

    def __truediv__(self, scalar: object) -> SquareMat:
        if not isinstance(scalar, Real):
            return NotImplemented
        divisor = float(scalar)
        if divisor == 0.0:
            raise ZeroDivisionError("division by 0")
        return self._map(lambda value: value / divisor)

    def __xor__(self, n: int) -> SquareMat:
        if not isinstance(n, int):
            return NotImplemented
        if n < 0:
            raise ValueError("cannot raise matrix to a negative power")
        result = self._identity(self._n)
        for _ in range(n):
            result = result * self
        return result

    def __pow__(self, n: int) -> SquareMat:
        return self.__xor__(n)

    def __neg__(self) -> SquareMat:
        return self * -1

    def __invert__(self) -> SquareMat:
        return self._from_rows(zip(*self._rows)) if self._n else SquareMat(0)

    def __iadd__(self, other: object) -> SquareMat:
        result = self.__add__(other)
        return result if result is NotImplemented else self._replace(result)

    def __isub__(self, other: object) -> SquareMat:
        result = self.__sub__(other)
        return result if result is NotImplemented else self._replace(result)

    def __imul__(self, other: object) -> SquareMat:
        result = self.__mul__(other)
        return result if result is NotImplemented else self._replace(result)

    def __itruediv__(self, scalar: object) -> SquareMat:
        result = self.__truediv__(scalar)
        return result if result is NotImplemented else self._replace(result)

    def __imod__(self, other: object) -> SquareMat:
        result = self.__mod__(other)
        return result if result is NotImplemented else self._replace(result)

    def increment(self) -> SquareMat:
        """Add 1 to every entry in place and return this matrix."""
        return self._replace(self._map(lambda value: value + 1))

    def decrement(self) -> SquareMat:
        """Subtract 1 from every entry in place and return this matrix."""
        return self._replace(self._map(lambda value: value - 1))

    def post_increment(self) -> SquareMat:
        """Add 1 to every entry in place and return a copy taken before."""
        before = self.copy()
        self.increment()
        return before

    def post_decrement(self) -> SquareMat:
        """Subtract 1 from every entry in place and return a copy taken before."""
        before = self.copy()
        self.decrement()
        return before

    def determinant(self) -> float:
        """Return the determinant; that of an empty matrix is 0."""
        return _determinant([list(row) for row in self._rows])

    def minor(self, i: int, j: int) -> SquareMat:
        """Return the matrix without row ``i`` and column ``j``."""
        return self._from_rows(_minor([list(row) for row in self._rows], i, j))

    def __str__(self) -> str:
        return "".join(
            "".join(f"{value:g}\t" for value in row) + "\n" for row in self._rows
        )

    def __repr__(self) -> str:
        return f"SquareMat({[list(row) for row in self._rows]!r})"