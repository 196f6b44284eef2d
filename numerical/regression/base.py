"""Regression model interface and its linear and logistic implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ..matrix import Matrix
from . import linear, logistic
from .utils import check_epochs, check_regression_inputs


class Regression(ABC):
    """Gradient-descent regression over fixed training data.

    The instance keeps read-only references to ``x``, ``y`` and
    ``initial_theta``; each ``fit*`` call works on its own copy of theta, so
    a model can be fitted repeatedly with identical results.
    """

    def __init__(
        self,
        x: Any,
        y: Any,
        initial_theta: Any,
        alpha: float,
        epochs: int,
    ) -> None:
        self.x, self.y, self.initial_theta = check_regression_inputs(x, y, initial_theta)
        self.alpha = alpha
        self.epochs = check_epochs(epochs)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(samples={self.x.shape[0]}, "
            f"features={self.x.shape[1]}, alpha={self.alpha}, epochs={self.epochs})"
        )

    @abstractmethod
    def fit(self, mini_batch_size: int) -> Matrix:
        """Fit with contiguous mini-batches of ``mini_batch_size`` rows."""

    @abstractmethod
    def fit_batch(self) -> Matrix:
        """Fit with one update per epoch over all samples."""

    @abstractmethod
    def fit_stochastic(self) -> Matrix:
        """Fit with per-sample, per-coordinate updates."""

    @staticmethod
    @abstractmethod
    def predict(theta: Any, x: Any) -> Any:
        """Model outcome for a single ``1 x k`` sample."""


class LinearRegression(Regression):
    """Linear model ``theta . x``.

    Examples
    --------
    >>> import numpy as np
    >>> from numerical.regression import LinearRegression
    >>> x = np.array([[1.0, 50.0], [1.0, 60.0], [1.0, 100.0]])
    >>> y = np.array([[120.0], [150.0], [250.0]])
    >>> model = LinearRegression(x, y, np.ones((1, 2)), 0.0001, 1000)
    >>> theta = model.fit(1)
    >>> abs(LinearRegression.predict(theta, x[2:3]) - 250.0) < 5.0
    True
    """

    def fit(self, mini_batch_size: int) -> Matrix:
        return linear.mini_batch_linear_regression(
            self.x, self.y, self.initial_theta, self.alpha, self.epochs, mini_batch_size
        )

    def fit_batch(self) -> Matrix:
        return linear.batch_linear_regression(
            self.x, self.y, self.initial_theta, self.alpha, self.epochs
        )

    def fit_stochastic(self) -> Matrix:
        return linear.stochastic_linear_regression(
            self.x, self.y, self.initial_theta, self.alpha, self.epochs
        )

    @staticmethod
    def predict(theta: Any, x: Any) -> float:
        return linear.predict(theta, x)


class LogisticRegression(Regression):
    """Binary classifier ``sigmoid(theta . x) > 0.5``."""

    def fit(self, mini_batch_size: int) -> Matrix:
        return logistic.mini_batch_logistic_regression(
            self.x, self.y, self.initial_theta, self.alpha, self.epochs, mini_batch_size
        )

    def fit_batch(self) -> Matrix:
        return logistic.batch_logistic_regression(
            self.x, self.y, self.initial_theta, self.alpha, self.epochs
        )

    def fit_stochastic(self) -> Matrix:
        return logistic.stochastic_logistic_regression(
            self.x, self.y, self.initial_theta, self.alpha, self.epochs
        )

    @staticmethod
    def predict(theta: Any, x: Any) -> bool:
        return logistic.predict(theta, x)


__all__ = ["Regression", "LinearRegression", "LogisticRegression"]
