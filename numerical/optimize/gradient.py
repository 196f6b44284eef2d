"""Coordinate-wise gradient ascent and descent."""

from __future__ import annotations

from typing import Sequence

from ..errors import InvalidArgumentError
from ..logging import get_logger
from ..utils import check_epochs
from .core import Derivative, GradientMode

logger = get_logger(__name__)


def gradient(
    initial_values: Sequence[float],
    derivatives: Sequence[Derivative],
    alpha: float,
    epochs: int,
    mode: GradientMode = GradientMode.DESC,
) -> list[float]:
    """Run the gradient method over a list of scalar variables.

    Each epoch visits the variables in order. ``derivatives[i]`` is evaluated
    on the current values, which already include the updates made to earlier
    variables in the same epoch, and ``values[i]`` moves by ``alpha * delta``
    (up for ``ASC``, down for ``DESC``). Exactly ``epochs`` passes run.

    Args:
        initial_values: Starting point. Not modified.
        derivatives: ``derivatives[i]`` is the partial derivative with
            respect to ``initial_values[i]``.
        alpha: Step size.
        epochs: Number of passes.
        mode: Ascent or descent.

    Returns:
        The final values.

    Raises:
        InvalidArgumentError: If the lengths differ or ``epochs`` is not a
            non-negative integer.

    Example:
        >>> result = gradient(
        ...     [5.0, 8.0],
        ...     [lambda v: 2.0 * v[0], lambda v: 2.0 * v[1]],
        ...     0.1,
        ...     1200,
        ...     GradientMode.DESC,
        ... )
        >>> [abs(r) < 1e-6 for r in result]
        [True, True]
    """
    if len(initial_values) != len(derivatives):
        raise InvalidArgumentError(
            f"Expected one derivative per variable, got {len(derivatives)} "
            f"derivatives for {len(initial_values)} variables."
        )
    epochs = check_epochs(epochs)
    mode = GradientMode(mode)

    logger.debug(
        "gradient %s: %d variables, alpha=%g, epochs=%d",
        mode.value,
        len(initial_values),
        alpha,
        epochs,
    )
    sign = 1.0 if mode is GradientMode.ASC else -1.0
    values = [float(v) for v in initial_values]
    for _ in range(epochs):
        for i, derivative in enumerate(derivatives):
            delta = derivative(values)
            values[i] += sign * alpha * delta
    return values


__all__ = ["gradient"]
