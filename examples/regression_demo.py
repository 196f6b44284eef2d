"""
Example: Gradient-descent regression

Fits a linear model to three house prices and a logistic model to the
logical AND truth table, each with the batch, mini-batch and stochastic
strategies.
"""

import numpy as np

from numerical import (
    FitConfig,
    LinearRegression,
    LogisticRegression,
    fit_regression,
    mean_squared_error,
)

HOUSE_X = np.array([[1.0, 50.0], [1.0, 60.0], [1.0, 100.0]])
HOUSE_Y = np.array([[120.0], [150.0], [250.0]])

AND_X = np.array(
    [
        [1.0, 0.0, 0.0],
        [1.0, 0.0, 1.0],
        [1.0, 1.0, 0.0],
        [1.0, 1.0, 1.0],
    ]
)
AND_Y = np.array([[0.0], [0.0], [0.0], [1.0]])


def example_linear_regression():
    """Example: price per square metre."""
    print("=" * 60)
    print("Example 1: Linear regression (house prices)")
    print("=" * 60)
    configs = [
        FitConfig(alpha=0.0001, epochs=1000, strategy="batch"),
        FitConfig(alpha=0.0001, epochs=1000, strategy="mini_batch", mini_batch_size=1),
        FitConfig(alpha=0.0001, epochs=1000, strategy="stochastic"),
    ]
    for config in configs:
        theta = fit_regression("linear", HOUSE_X, HOUSE_Y, np.ones((1, 2)), config)
        preds = [LinearRegression.predict(theta, row[None, :]) for row in HOUSE_X]
        mse = mean_squared_error(HOUSE_Y, preds)
        print(f"{config.strategy.value:>10}: theta={theta.ravel()} mse={mse:.3f}")
    print()


def example_logistic_regression():
    """Example: learning logical AND."""
    print("=" * 60)
    print("Example 2: Logistic regression (logical AND)")
    print("=" * 60)
    configs = [
        FitConfig(alpha=0.5, epochs=1000, strategy="batch"),
        FitConfig(alpha=0.5, epochs=1000, strategy="mini_batch", mini_batch_size=2),
        FitConfig(alpha=0.5, epochs=1000, strategy="stochastic"),
    ]
    for config in configs:
        theta = fit_regression("logistic", AND_X, AND_Y, np.ones((1, 3)), config)
        preds = [LogisticRegression.predict(theta, row[None, :]) for row in AND_X]
        print(f"{config.strategy.value:>10}: theta={theta.ravel()} predictions={preds}")
    print()


if __name__ == "__main__":
    example_linear_regression()
    example_logistic_regression()
    print("Regression examples completed")
