"""Exception types raised by numerical routines.

All errors describe caller contract violations. They are raised before any
iteration starts and are never retried or suppressed internally.
"""

from __future__ import annotations


class NumericalError(Exception):
    """Base class for errors raised by this package."""


class DimensionMismatchError(NumericalError, ValueError):
    """Input shapes are inconsistent with the operation's preconditions."""


class InvalidArgumentError(NumericalError, ValueError):
    """Malformed configuration such as a zero mini-batch size."""


class IndexOutOfRangeError(NumericalError, IndexError):
    """A row or column access falls outside the matrix bounds."""


__all__ = [
    "NumericalError",
    "DimensionMismatchError",
    "InvalidArgumentError",
    "IndexOutOfRangeError",
]
