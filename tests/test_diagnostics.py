"""Tests for debug mode and numeric diagnostics."""

import numpy as np
import pytest

from numerical.diagnostics import (
    accuracy,
    assert_finite,
    debug_check_finite,
    debug_context,
    is_debug_enabled,
    mean_squared_error,
    set_debug_enabled,
)
from numerical.dsp import convolve
from numerical.errors import DimensionMismatchError
from numerical.regression import batch_linear_regression, stochastic_logistic_regression


def test_debug_mode_toggle():
    assert not is_debug_enabled()
    set_debug_enabled(True)
    assert is_debug_enabled()
    set_debug_enabled(False)
    assert not is_debug_enabled()


def test_debug_context_restores_previous_state():
    with debug_context(True):
        assert is_debug_enabled()
        with debug_context(False):
            assert not is_debug_enabled()
        assert is_debug_enabled()
    assert not is_debug_enabled()


def test_assert_finite():
    assert_finite(np.ones((2, 2)))
    with pytest.raises(FloatingPointError, match="theta"):
        assert_finite(np.array([[1.0, np.nan]]), "theta")


def test_debug_check_finite_only_checks_when_enabled():
    bad = np.array([[np.inf]])
    debug_check_finite(bad, "theta")
    with debug_context(True):
        debug_check_finite(np.zeros((1, 1)), "theta")
        with pytest.raises(FloatingPointError, match="theta"):
            debug_check_finite(bad, "theta")


def test_debug_mode_checks_convolution_output():
    kernel = np.ones((1, 1))
    channel = np.array([[1.0, np.inf]])
    out = convolve([kernel], [channel])
    assert np.isinf(out[0, 1])
    with debug_context(True):
        with pytest.raises(FloatingPointError, match="convolution output"):
            convolve([kernel], [channel])


def test_debug_mode_catches_diverging_fit():
    x = np.array([[1.0, 1e200]])
    y = np.array([[0.0]])
    with np.errstate(over="ignore", invalid="ignore"):
        # without debug mode the fit runs to completion
        theta = batch_linear_regression(x, y, np.ones((1, 2)), 1.0, 5)
        assert not np.all(np.isfinite(theta))
        with debug_context(True):
            with pytest.raises(FloatingPointError):
                batch_linear_regression(x, y, np.ones((1, 2)), 1.0, 5)


def test_debug_mode_does_not_change_results(logical_and):
    plain = stochastic_logistic_regression(
        logical_and.x, logical_and.y, logical_and.initial_theta, 0.5, 20
    )
    with debug_context(True):
        checked = stochastic_logistic_regression(
            logical_and.x, logical_and.y, logical_and.initial_theta, 0.5, 20
        )
    np.testing.assert_array_equal(plain, checked)


def test_mean_squared_error():
    assert mean_squared_error([[1.0], [2.0]], [1.0, 4.0]) == 2.0
    assert mean_squared_error([], []) == 0.0
    with pytest.raises(DimensionMismatchError):
        mean_squared_error([1.0, 2.0], [1.0])


def test_accuracy():
    assert accuracy([0.0, 0.0, 1.0, 1.0], [False, True, True, True]) == 0.75
