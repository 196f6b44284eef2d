"""Numeric checks and fit-quality measures."""

from __future__ import annotations

from typing import Any

import numpy as np

from ..errors import DimensionMismatchError


def assert_finite(m: Any, name: str = "matrix") -> None:
    """
    Assert that every entry of ``m`` is finite.

    Parameters
    ----------
    m:
        Array-like to check.
    name:
        Label used in the error message.

    Raises
    ------
    FloatingPointError
        If ``m`` contains NaN or infinite values.
    """
    array = np.asarray(m, dtype=np.float64)
    if not np.all(np.isfinite(array)):
        raise FloatingPointError(
            f"{name} contains non-finite values: {array.tolist()}"
        )


def _paired(y_true: Any, y_pred: Any) -> tuple[np.ndarray, np.ndarray]:
    true = np.asarray(y_true).ravel()
    pred = np.asarray(y_pred).ravel()
    if true.shape != pred.shape:
        raise DimensionMismatchError(
            f"Expected {true.size} predictions, got {pred.size}."
        )
    return true, pred


def mean_squared_error(y_true: Any, y_pred: Any) -> float:
    """Mean of squared differences between targets and predictions."""
    true, pred = _paired(y_true, y_pred)
    if true.size == 0:
        return 0.0
    return float(np.mean((true.astype(np.float64) - pred.astype(np.float64)) ** 2))


def accuracy(y_true: Any, y_pred: Any) -> float:
    """Fraction of predicted labels equal to the targets."""
    true, pred = _paired(y_true, y_pred)
    if true.size == 0:
        return 0.0
    return float(np.mean(true.astype(bool) == pred.astype(bool)))
