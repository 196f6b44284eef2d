"""Input validation and batching helpers for the regression engines."""

from __future__ import annotations

from typing import Any, Iterator

import numpy as np

from ..diagnostics import debug_check_finite
from ..errors import DimensionMismatchError, IndexOutOfRangeError, InvalidArgumentError
from ..matrix import Matrix, check_matrix, row_block
from ..utils import check_epochs


def check_regression_inputs(
    x: Any, y: Any, initial_theta: Any
) -> tuple[Matrix, Matrix, Matrix]:
    """Validate shapes and return ``(x, y, theta)`` where theta is a private copy."""
    x_checked = check_matrix(x, "x")
    y_checked = check_matrix(y, "y")
    theta_checked = check_matrix(initial_theta, "initial_theta")
    if x_checked.shape[0] != y_checked.shape[0]:
        raise DimensionMismatchError(
            f"x has {x_checked.shape[0]} samples but y has {y_checked.shape[0]}."
        )
    if y_checked.shape[1] != 1:
        raise DimensionMismatchError(
            f"y must be a column vector, got shape {y_checked.shape}."
        )
    if theta_checked.shape != (1, x_checked.shape[1]):
        raise DimensionMismatchError(
            f"initial_theta must have shape (1, {x_checked.shape[1]}), "
            f"got {theta_checked.shape}."
        )
    return x_checked, y_checked, theta_checked.copy()


def check_mini_batch_size(n_samples: int, mini_batch_size: int) -> int:
    """Validate a mini-batch size against the sample count.

    Raises
    ------
    InvalidArgumentError
        If the size is not a positive integer.
    IndexOutOfRangeError
        If the samples do not split into whole blocks; the trailing block
        would read past the last row.
    """
    if (
        isinstance(mini_batch_size, bool)
        or int(mini_batch_size) != mini_batch_size
        or mini_batch_size < 1
    ):
        raise InvalidArgumentError(
            f"mini_batch_size must be a positive integer, got {mini_batch_size!r}."
        )
    mini_batch_size = int(mini_batch_size)
    if n_samples % mini_batch_size:
        last = n_samples - n_samples % mini_batch_size
        raise IndexOutOfRangeError(
            f"Mini-batch at row {last} needs rows [{last}, {last + mini_batch_size}) "
            f"but x has only {n_samples} rows."
        )
    return mini_batch_size


def iter_mini_batches(
    x: Matrix, y: Matrix, mini_batch_size: int
) -> Iterator[tuple[Matrix, Matrix]]:
    """Yield contiguous ``(x_block, y_block)`` pairs in row order."""
    for start in range(0, x.shape[0], mini_batch_size):
        yield row_block(x, start, mini_batch_size), row_block(y, start, mini_batch_size)


def check_theta(theta: np.ndarray) -> None:
    """Debug-mode check run after each epoch."""
    debug_check_finite(theta, "theta")


__all__ = [
    "check_regression_inputs",
    "check_epochs",
    "check_mini_batch_size",
    "iter_mini_batches",
    "check_theta",
]
