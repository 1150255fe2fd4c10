"""Utilities for working with QR code matrices."""

from __future__ import annotations

from typing import Sequence, Tuple

Matrix = Sequence[Sequence[bool]]


def matrix_shape(matrix: Matrix) -> Tuple[int, int]:
    """Return ``(rows, columns)`` of ``matrix``.

    An empty matrix has shape ``(0, 0)``. The column count is taken from the
    first row; use :func:`require_rectangular` to check the other rows.
    """

    if not matrix:
        return 0, 0
    return len(matrix), len(matrix[0])


def require_rectangular(matrix: Matrix) -> Tuple[int, int]:
    """Return the shape of ``matrix`` or raise ``ValueError`` for ragged rows."""

    rows, columns = matrix_shape(matrix)
    for y, row in enumerate(matrix):
        if len(row) != columns:
            raise ValueError(
                f"matrix row {y} has {len(row)} modules, expected {columns}"
            )
    return rows, columns
