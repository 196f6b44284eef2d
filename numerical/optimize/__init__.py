"""Generic gradient method over scalar variables.

Example
-------
>>> from numerical.optimize import GradientMode, gradient
>>> # maximise f(x) = -x**2, so f'(x) = -2x
>>> gradient([3.5], [lambda v: -2.0 * v[0]], 0.1, 1200, GradientMode.ASC)[0] < 1e-6
True
"""

from .core import Derivative, GradientMode
from .gradient import gradient

__all__ = [
    "Derivative",
    "GradientMode",
    "gradient",
]
