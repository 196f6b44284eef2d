"""Linear regression fitted by gradient descent on the squared error.

Theta is a ``1 x k`` row vector and ``x`` an ``n x k`` design matrix whose
first column is usually a constant 1 for the intercept; it is never added
here. Every routine runs exactly ``epochs`` passes and returns a new theta.
"""

from __future__ import annotations

from typing import Any

from ..logging import get_logger
from ..matrix import Matrix, check_matrix, component_sum
from .utils import (
    check_epochs,
    check_mini_batch_size,
    check_regression_inputs,
    check_theta,
    iter_mini_batches,
)

logger = get_logger(__name__)


def batch_linear_regression(
    x: Any,
    y: Any,
    initial_theta: Any,
    alpha: float,
    epochs: int,
) -> Matrix:
    """Fit theta with one update per epoch over the whole dataset.

    ``delta = (theta @ X.T - Y.T) @ (X / n)``
    """
    x, y, theta = check_regression_inputs(x, y, initial_theta)
    epochs = check_epochs(epochs)
    logger.debug("batch linear fit: x=%s, alpha=%g, epochs=%d", x.shape, alpha, epochs)

    x_transposed = x.T
    y_transposed = y.T
    x_mean_values = x * (1.0 / x.shape[0])

    for _ in range(epochs):
        delta = (theta @ x_transposed - y_transposed) @ x_mean_values
        theta = theta - alpha * delta
        check_theta(theta)

    logger.debug("batch linear theta: %s", theta.ravel().tolist())
    return theta


def mini_batch_linear_regression(
    x: Any,
    y: Any,
    initial_theta: Any,
    alpha: float,
    epochs: int,
    mini_batch_size: int,
) -> Matrix:
    """Fit theta with one update per contiguous block of ``mini_batch_size`` rows.

    Blocks are visited in row order without shuffling and each update is
    visible to the next block. ``x.shape[0]`` must be a multiple of
    ``mini_batch_size``; with ``mini_batch_size == n`` this matches
    :func:`batch_linear_regression`.
    """
    x, y, theta = check_regression_inputs(x, y, initial_theta)
    epochs = check_epochs(epochs)
    mini_batch_size = check_mini_batch_size(x.shape[0], mini_batch_size)
    logger.debug(
        "mini-batch linear fit: x=%s, batch=%d, alpha=%g, epochs=%d",
        x.shape,
        mini_batch_size,
        alpha,
        epochs,
    )

    factor = 1.0 / mini_batch_size
    for _ in range(epochs):
        for x_block, y_block in iter_mini_batches(x, y, mini_batch_size):
            distance = theta @ x_block.T - y_block.T
            delta = distance @ (x_block * factor)
            theta = theta - alpha * delta
        check_theta(theta)

    logger.debug("mini-batch linear theta: %s", theta.ravel().tolist())
    return theta


def stochastic_linear_regression(
    x: Any,
    y: Any,
    initial_theta: Any,
    alpha: float,
    epochs: int,
) -> Matrix:
    """Fit theta one coordinate at a time for every sample.

    For sample ``i`` and feature ``j``:
    ``theta[j] -= alpha * (sum(theta * x[i]) - y[i]) * x[i, j]``. The
    prediction is recomputed for every feature, so ``theta[j + 1]`` sees the
    already-updated ``theta[j]``.
    """
    x, y, theta = check_regression_inputs(x, y, initial_theta)
    epochs = check_epochs(epochs)
    logger.debug("stochastic linear fit: x=%s, alpha=%g, epochs=%d", x.shape, alpha, epochs)

    n_samples, n_features = x.shape
    for _ in range(epochs):
        for i in range(n_samples):
            x_row = x[i : i + 1]
            for j in range(n_features):
                delta = (component_sum(theta, x_row) - y[i, 0]) * x[i, j]
                theta[0, j] = theta[0, j] - alpha * delta
        check_theta(theta)

    logger.debug("stochastic linear theta: %s", theta.ravel().tolist())
    return theta


def predict(theta: Any, x: Any) -> float:
    """Predict ``sum(theta * x)`` for a single ``1 x k`` sample."""
    return component_sum(check_matrix(theta, "theta"), check_matrix(x, "x"))


__all__ = [
    "batch_linear_regression",
    "mini_batch_linear_regression",
    "stochastic_linear_regression",
    "predict",
]
