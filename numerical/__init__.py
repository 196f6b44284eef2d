"""numerical - gradient-based regression and multi-channel convolution on dense matrices."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    accuracy,
    assert_finite,
    debug_check_finite,
    debug_context,
    is_debug_enabled,
    mean_squared_error,
    set_debug_enabled,
)

# Convolution
from .dsp import convolution, convolve

# Errors
from .errors import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    NumericalError,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Matrix helpers
from .matrix import Matrix, check_matrix, component_sum, create_matrix, row_block, window

# Gradient method
from .optimize import Derivative, GradientMode, gradient

# Regression
from .regression import (
    FitConfig,
    LinearRegression,
    LogisticRegression,
    Regression,
    Strategy,
    batch_linear_regression,
    batch_logistic_regression,
    create_regression,
    fit_regression,
    mini_batch_linear_regression,
    mini_batch_logistic_regression,
    sigmoid,
    stochastic_linear_regression,
    stochastic_logistic_regression,
)
from .regression.linear import predict as predict_linear
from .regression.logistic import predict as predict_logistic

# Scalar reductions
from .utils import dot_product_and_sum

__all__ = [
    "__version__",
    # Diagnostics
    "accuracy",
    "assert_finite",
    "debug_check_finite",
    "debug_context",
    "is_debug_enabled",
    "mean_squared_error",
    "set_debug_enabled",
    # Convolution
    "convolve",
    "convolution",
    # Errors
    "NumericalError",
    "DimensionMismatchError",
    "InvalidArgumentError",
    "IndexOutOfRangeError",
    # Logging
    "configure_logging",
    "get_logger",
    "set_log_level",
    # Matrix helpers
    "Matrix",
    "check_matrix",
    "component_sum",
    "create_matrix",
    "row_block",
    "window",
    # Gradient method
    "Derivative",
    "GradientMode",
    "gradient",
    # Regression
    "FitConfig",
    "LinearRegression",
    "LogisticRegression",
    "Regression",
    "Strategy",
    "batch_linear_regression",
    "batch_logistic_regression",
    "create_regression",
    "fit_regression",
    "mini_batch_linear_regression",
    "mini_batch_logistic_regression",
    "predict_linear",
    "predict_logistic",
    "sigmoid",
    "stochastic_linear_regression",
    "stochastic_logistic_regression",
    # Scalar reductions
    "dot_product_and_sum",
]
