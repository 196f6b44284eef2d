"""Diagnostics and debugging utilities for numerical."""

from .core import accuracy, assert_finite, mean_squared_error
from .debug_mode import (
    debug_check_finite,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "assert_finite",
    "mean_squared_error",
    "accuracy",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "debug_check_finite",
]
