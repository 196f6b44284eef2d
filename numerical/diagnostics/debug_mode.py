"""Opt-in finite-value checks for the fitting and convolution loops.

Debug mode never changes a numeric result. It only adds checks that turn a
silently diverging computation into an immediate ``FloatingPointError``:

* regression fits (``numerical.regression.linear`` / ``logistic``, all three
  strategies) check theta after every epoch;
* ``numerical.dsp.convolve`` checks the finished feature map.

Large learning rates, unscaled features or ``inf`` entries in an input are
the usual causes. The flag starts from the ``NUMERICAL_DEBUG`` environment
variable (``1``, ``true``, ``yes`` or ``on``) and is off otherwise.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Any, Iterator

from .core import assert_finite

_DEBUG_ENV_VAR = "NUMERICAL_DEBUG"
_TRUTHY = ("1", "true", "yes", "on")

_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").strip().lower() in _TRUTHY


def is_debug_enabled() -> bool:
    """Return whether fits and convolutions currently check for NaN/inf."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Turn the per-epoch theta check and the convolution output check on or off.

    Parameters
    ----------
    enabled:
        New state for the whole process.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Run a block with the checks switched to ``enabled``, then restore.

    Example
    -------
    >>> import numpy as np
    >>> from numerical.regression import batch_linear_regression
    >>> with debug_context(True):
    ...     theta = batch_linear_regression(
    ...         np.ones((2, 1)), np.ones((2, 1)), np.zeros((1, 1)), 0.1, 10
    ...     )
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev


def debug_check_finite(m: Any, name: str) -> None:
    """
    Check ``m`` with :func:`assert_finite` when debug mode is on.

    This is the single hook the engines call; with debug mode off it does
    nothing and costs one flag lookup.

    Raises
    ------
    FloatingPointError
        If debug mode is enabled and ``m`` holds NaN or infinite values.
    """
    if _debug_enabled:
        assert_finite(m, name)
