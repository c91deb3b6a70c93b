"""Determinants of square matrices given as rows of numbers."""

from __future__ import annotations

from typing import Sequence

from .helpers import power

Rows = Sequence[Sequence[float]]


def minor(rows: Rows, i: int, j: int) -> list[list[float]]:
    """Return the rows of the matrix with row ``i`` and column ``j`` removed.

    Raises:
        IndexError: if ``i`` or ``j`` is outside the matrix.
    """
    n = len(rows)
    if not 0 <= i < n or not 0 <= j < n:
        raise IndexError("index out of range")
    return [
        [value for l, value in enumerate(row) if l != j]
        for k, row in enumerate(rows)
        if k != i
    ]


def determinant(rows: Rows) -> float:
    """Return the determinant by cofactor expansion along the first column.

    The determinant of an empty matrix is 0.
    """
    n = len(rows)
    if n == 0:
        return 0.0
    if n == 1:
        return float(rows[0][0])
    det = 0.0
    for i, row in enumerate(rows):
        det += power(-1, i) * row[0] * determinant(minor(rows, i, 0))
    return det