"""Pytest configuration and shared fixtures for numerical tests.

This module provides:
- A deterministic numpy RNG fixture for randomized inputs
- The house-price and logical-AND datasets used across regression tests
"""

import os
from dataclasses import dataclass

import numpy as np
import pytest

from numerical import create_matrix
from numerical.diagnostics import set_debug_enabled


@dataclass(frozen=True)
class Dataset:
    x: np.ndarray
    y: np.ndarray
    initial_theta: np.ndarray


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def reset_debug_mode():
    """Run every test with debug mode off and restore it afterwards."""
    set_debug_enabled(False)
    yield
    set_debug_enabled(False)


@pytest.fixture
def house_prices() -> Dataset:
    """Three houses: [bias, size] -> price."""
    # fmt: off
    x = create_matrix(3, 2, [
        1.0, 50.0,
        1.0, 60.0,
        1.0, 100.0,
    ])
    # fmt: on
    y = create_matrix(3, 1, [120.0, 150.0, 250.0])
    return Dataset(x=x, y=y, initial_theta=create_matrix(1, 2, [1.0, 1.0]))


@pytest.fixture
def logical_and() -> Dataset:
    """Truth table of AND with a bias column."""
    # fmt: off
    x = create_matrix(4, 3, [
        1.0, 0.0, 0.0,
        1.0, 0.0, 1.0,
        1.0, 1.0, 0.0,
        1.0, 1.0, 1.0,
    ])
    # fmt: on
    y = create_matrix(4, 1, [0.0, 0.0, 0.0, 1.0])
    return Dataset(x=x, y=y, initial_theta=create_matrix(1, 3, [1.0, 1.0, 1.0]))
