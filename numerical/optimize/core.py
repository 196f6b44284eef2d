"""Core types shared by the gradient routines."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Sequence

Derivative = Callable[[Sequence[float]], float]


class GradientMode(Enum):
    """Direction of the gradient step."""

    ASC = "asc"
    DESC = "desc"


__all__ = ["Derivative", "GradientMode"]
