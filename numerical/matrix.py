"""Dense matrix helpers shared by the regression and convolution engines.

Matrices are plain 2D ``float64`` NumPy arrays. The helpers here add the
validation and bounds checks NumPy slicing does not perform on its own
(a slice past the end silently shortens instead of failing).
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from .errors import DimensionMismatchError, IndexOutOfRangeError

Matrix = np.ndarray


def create_matrix(nrows: int, ncols: int, data: Sequence[float]) -> Matrix:
    """Build an ``nrows x ncols`` matrix from row-major ``data``.

    Examples
    --------
    >>> m = create_matrix(2, 3, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
    >>> float(m[1, 1])
    5.0

    Raises
    ------
    DimensionMismatchError
        If ``len(data) != nrows * ncols``.
    """
    flat = np.asarray(data, dtype=np.float64).ravel()
    if nrows < 0 or ncols < 0 or flat.size != nrows * ncols:
        raise DimensionMismatchError(
            f"Cannot shape {flat.size} entries into a {nrows}x{ncols} matrix."
        )
    return flat.reshape(nrows, ncols)


def check_matrix(m: Any, name: str = "matrix") -> Matrix:
    """Validate input as a 2D float64 array."""
    array = np.asarray(m, dtype=np.float64)
    if array.ndim != 2:
        raise DimensionMismatchError(
            f"{name} must be a 2D matrix, got shape {array.shape}."
        )
    return array


def row_block(m: Matrix, start: int, count: int) -> Matrix:
    """Return rows ``[start, start + count)`` of ``m``.

    Raises
    ------
    IndexOutOfRangeError
        If the block does not fit inside ``m``.
    """
    if start < 0 or count < 0 or start + count > m.shape[0]:
        raise IndexOutOfRangeError(
            f"Row block [{start}, {start + count}) is outside a matrix with "
            f"{m.shape[0]} rows."
        )
    return m[start : start + count]


def window(m: Matrix, origin: tuple[int, int], shape: tuple[int, int]) -> Matrix:
    """Return the ``shape`` sub-block of ``m`` whose top-left entry is ``origin``."""
    row, col = origin
    nrows, ncols = shape
    if row < 0 or col < 0 or row + nrows > m.shape[0] or col + ncols > m.shape[1]:
        raise IndexOutOfRangeError(
            f"Window at {origin} with shape {shape} is outside a matrix of "
            f"shape {m.shape}."
        )
    return m[row : row + nrows, col : col + ncols]


def component_sum(a: Matrix, b: Matrix) -> float:
    """Sum of the component-wise product of two equally shaped matrices."""
    if a.shape != b.shape:
        raise DimensionMismatchError(
            f"Component-wise product needs equal shapes, got {a.shape} and {b.shape}."
        )
    return float(np.sum(a * b))


__all__ = [
    "Matrix",
    "create_matrix",
    "check_matrix",
    "row_block",
    "window",
    "component_sum",
]
