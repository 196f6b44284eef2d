"""Linear and logistic regression by batch, mini-batch and stochastic gradient descent.

Example
-------
>>> import numpy as np
>>> from numerical.regression import FitConfig, fit_regression
>>> x = np.array([[1.0, 0.0, 0.0], [1.0, 0.0, 1.0], [1.0, 1.0, 0.0], [1.0, 1.0, 1.0]])
>>> y = np.array([[0.0], [0.0], [0.0], [1.0]])
>>> theta = fit_regression("logistic", x, y, np.ones((1, 3)), FitConfig(alpha=0.5, epochs=1000, strategy="stochastic"))
>>> theta.shape
(1, 3)
"""

from . import linear, logistic
from .base import LinearRegression, LogisticRegression, Regression
from .config import FitConfig, Strategy, create_regression, fit_regression
from .linear import (
    batch_linear_regression,
    mini_batch_linear_regression,
    stochastic_linear_regression,
)
from .logistic import (
    batch_logistic_regression,
    mini_batch_logistic_regression,
    sigmoid,
    stochastic_logistic_regression,
)

__all__ = [
    "linear",
    "logistic",
    "Regression",
    "LinearRegression",
    "LogisticRegression",
    "Strategy",
    "FitConfig",
    "create_regression",
    "fit_regression",
    "batch_linear_regression",
    "mini_batch_linear_regression",
    "stochastic_linear_regression",
    "batch_logistic_regression",
    "mini_batch_logistic_regression",
    "stochastic_logistic_regression",
    "sigmoid",
]
