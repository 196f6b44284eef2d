"""Logistic regression fitted by gradient descent on the squared error.

The model output is ``sigmoid(theta . x)`` and the gradient carries the
logistic derivative ``g * (1 - g)``. Shapes and epoch semantics follow
:mod:`numerical.regression.linear`.
"""

from __future__ import annotations

from typing import Any

import numpy as np

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


def sigmoid(z):
    """Logistic function ``1 / (1 + exp(-z))`` for scalars or arrays.

    No clipping is applied; very negative inputs overflow ``exp`` and
    evaluate to ``0.0``.
    """
    return 1.0 / (1.0 + np.exp(-z))


def _logistic_delta(theta: Matrix, x: Matrix, y: Matrix, factor: float) -> Matrix:
    gx = sigmoid(theta @ x.T)
    error = (gx - y.T) * gx * (1.0 - gx)
    return (error @ x) * factor


def batch_logistic_regression(
    x: Any,
    y: Any,
    initial_theta: Any,
    alpha: float,
    epochs: int,
) -> Matrix:
    """Fit theta with one update per epoch over the whole dataset."""
    x, y, theta = check_regression_inputs(x, y, initial_theta)
    epochs = check_epochs(epochs)
    logger.debug("batch logistic fit: x=%s, alpha=%g, epochs=%d", x.shape, alpha, epochs)

    factor = 1.0 / x.shape[0]
    for _ in range(epochs):
        theta = theta - alpha * _logistic_delta(theta, x, y, factor)
        check_theta(theta)

    logger.debug("batch logistic theta: %s", theta.ravel().tolist())
    return theta


def mini_batch_logistic_regression(
    x: Any,
    y: Any,
    initial_theta: Any,
    alpha: float,
    epochs: int,
    mini_batch_size: int,
) -> Matrix:
    """Fit theta with one update per contiguous block of ``mini_batch_size`` rows."""
    x, y, theta = check_regression_inputs(x, y, initial_theta)
    epochs = check_epochs(epochs)
    mini_batch_size = check_mini_batch_size(x.shape[0], mini_batch_size)
    logger.debug(
        "mini-batch logistic fit: x=%s, batch=%d, alpha=%g, epochs=%d",
        x.shape,
        mini_batch_size,
        alpha,
        epochs,
    )

    factor = 1.0 / mini_batch_size
    for _ in range(epochs):
        for x_block, y_block in iter_mini_batches(x, y, mini_batch_size):
            theta = theta - alpha * _logistic_delta(theta, x_block, y_block, factor)
        check_theta(theta)

    logger.debug("mini-batch logistic theta: %s", theta.ravel().tolist())
    return theta


def stochastic_logistic_regression(
    x: Any,
    y: Any,
    initial_theta: Any,
    alpha: float,
    epochs: int,
) -> Matrix:
    """Fit theta one coordinate at a time for every sample.

    ``g = sigmoid(sum(theta * x[i]))`` is recomputed before each coordinate
    update ``theta[j] -= alpha * (g - y[i]) * g * (1 - g) * x[i, j]``.
    """
    x, y, theta = check_regression_inputs(x, y, initial_theta)
    epochs = check_epochs(epochs)
    logger.debug(
        "stochastic logistic fit: x=%s, alpha=%g, epochs=%d", x.shape, alpha, epochs
    )

    n_samples, n_features = x.shape
    for _ in range(epochs):
        for i in range(n_samples):
            x_row = x[i : i + 1]
            for j in range(n_features):
                gx = sigmoid(component_sum(theta, x_row))
                delta = (gx - y[i, 0]) * gx * (1.0 - gx) * x[i, j]
                theta[0, j] = theta[0, j] - alpha * delta
        check_theta(theta)

    logger.debug("stochastic logistic theta: %s", theta.ravel().tolist())
    return theta


def predict(theta: Any, x: Any) -> bool:
    """Classify a single ``1 x k`` sample; true iff ``sigmoid(theta . x) > 0.5``."""
    z = component_sum(check_matrix(theta, "theta"), check_matrix(x, "x"))
    return bool(sigmoid(z) > 0.5)


__all__ = [
    "sigmoid",
    "batch_logistic_regression",
    "mini_batch_logistic_regression",
    "stochastic_logistic_regression",
    "predict",
]
