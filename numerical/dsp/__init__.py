"""Sliding-window image operations.

Provides the multi-channel valid-mode convolution used for feature maps.
"""

from .conv import convolution, convolve

__all__ = ["convolve", "convolution"]
