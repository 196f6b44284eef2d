"""Scalar reductions and argument checks shared across the engines."""

from __future__ import annotations

from typing import Any, Iterable

from .errors import InvalidArgumentError


def dot_product_and_sum(a: Iterable[float], b: Iterable[float]) -> float:
    """Multiply ``a`` and ``b`` pairwise and sum the products.

    Pairs stop at the shorter input, so an empty input yields ``0.0``.

    Examples
    --------
    >>> dot_product_and_sum([1.0, 2.0], [3.0, 4.0])
    11.0
    >>> dot_product_and_sum([1.0, 2.0, 3.0], [1.0, 2.0])
    5.0
    """
    total = 0.0
    for a_element, b_element in zip(a, b):
        total += a_element * b_element
    return float(total)


def check_epochs(epochs: Any) -> int:
    """Validate an epoch count and return it as an ``int``.

    Integral floats such as ``3.0`` are accepted; booleans, strings and
    fractional or negative values are not.

    Raises
    ------
    InvalidArgumentError
        If ``epochs`` is not a non-negative integer.
    """
    message = f"epochs must be a non-negative integer, got {epochs!r}."
    if isinstance(epochs, (bool, str, bytes)):
        raise InvalidArgumentError(message)
    try:
        count = int(epochs)
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidArgumentError(message) from exc
    if count != epochs or count < 0:
        raise InvalidArgumentError(message)
    return count


__all__ = ["dot_product_and_sum", "check_epochs"]
