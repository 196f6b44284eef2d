import math

import numpy as np
import pytest

from numerical.errors import InvalidArgumentError
from numerical.optimize import GradientMode, gradient


def _sigmoid_slope(values):
    s = 1.0 / (1.0 + math.exp(values[0]))
    return s * (1.0 - s)


def test_gradient_single_variable_ascent():
    result = gradient([0.0], [_sigmoid_slope], 0.5, 3, GradientMode.ASC)
    assert abs(result[0] - 0.3725874750366366) < 1e-10


def test_gradient_single_variable_descent():
    result = gradient([0.0], [_sigmoid_slope], 0.5, 3, GradientMode.DESC)
    assert abs(result[0] + 0.3725874750366366) < 1e-10


def test_gradient_descent_paraboloid_converges():
    result = gradient(
        [5.0, 8.0],
        [lambda v: 2.0 * v[0], lambda v: 2.0 * v[1]],
        0.1,
        1200,
        GradientMode.DESC,
    )
    assert np.allclose(result, [0.0, 0.0], atol=1e-6)


def test_gradient_ascent_inverted_paraboloid_converges():
    result = gradient(
        [3.5, 3.5],
        [lambda v: -2.0 * v[0], lambda v: -2.0 * v[1]],
        0.1,
        1200,
        GradientMode.ASC,
    )
    assert np.allclose(result, [0.0, 0.0], atol=1e-6)


def test_gradient_updates_are_coordinate_wise():
    # d/dy sees the x already updated in the same epoch
    seen = []

    def dy(values):
        seen.append(values[0])
        return 0.0

    result = gradient([1.0, 0.0], [lambda v: 1.0, dy], 0.5, 2, GradientMode.DESC)
    assert seen == [0.5, 0.0]
    assert result == [0.0, 0.0]


def test_gradient_zero_epochs_returns_copy():
    initial = [1.0, 2.0]
    result = gradient(initial, [lambda v: 1.0, lambda v: 1.0], 0.1, 0)
    assert result == initial
    assert result is not initial


def test_gradient_does_not_mutate_input():
    initial = [5.0, 8.0]
    gradient(initial, [lambda v: 2.0 * v[0], lambda v: 2.0 * v[1]], 0.1, 10)
    assert initial == [5.0, 8.0]


def test_gradient_default_mode_is_descent():
    derivatives = [lambda v: 2.0 * v[0]]
    assert gradient([1.0], derivatives, 0.1, 5) == gradient(
        [1.0], derivatives, 0.1, 5, GradientMode.DESC
    )


def test_gradient_mismatched_derivatives():
    with pytest.raises(InvalidArgumentError):
        gradient([1.0, 2.0], [lambda v: v[0]], 0.1, 10)


def test_gradient_negative_epochs():
    with pytest.raises(ValueError):
        gradient([1.0], [lambda v: v[0]], 0.1, -1)


@pytest.mark.parametrize("epochs", [2.5, "3", None, True])
def test_gradient_non_integer_epochs(epochs):
    with pytest.raises(InvalidArgumentError):
        gradient([1.0], [lambda v: 2.0 * v[0]], 0.1, epochs)


def test_gradient_accepts_integral_float_epochs():
    derivatives = [lambda v: 2.0 * v[0]]
    assert gradient([1.0], derivatives, 0.1, 3.0) == gradient([1.0], derivatives, 0.1, 3)


def test_gradient_deterministic():
    derivatives = [lambda v: 2.0 * v[0] + v[1], lambda v: v[0] + 4.0 * v[1]]
    res1 = gradient([0.5, -0.25], derivatives, 0.05, 100)
    res2 = gradient([0.5, -0.25], derivatives, 0.05, 100)
    assert res1 == res2
