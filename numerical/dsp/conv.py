"""Multi-channel 2D convolution.

"Convolution" here is the image-processing sense: a valid-mode sliding
window cross-correlation, summed over channels, with no kernel flip.
"""

from typing import Any, Sequence

import numpy as np

from ..diagnostics import debug_check_finite
from ..errors import DimensionMismatchError, InvalidArgumentError
from ..logging import get_logger
from ..matrix import Matrix, check_matrix, component_sum, window

logger = get_logger(__name__)


def _check_stack(matrices: Sequence[Any], name: str) -> list[Matrix]:
    checked = [check_matrix(m, f"{name}[{index}]") for index, m in enumerate(matrices)]
    shape = checked[0].shape
    for index, m in enumerate(checked[1:], start=1):
        if m.shape != shape:
            raise DimensionMismatchError(
                f"{name}[{index}] has shape {m.shape}, expected {shape}."
            )
    return checked


def convolve(kernels: Sequence[Any], channels: Sequence[Any]) -> Matrix:
    """Convolve each channel with its paired kernel and sum the results.

    Output entry ``(i, j)`` is the sum over pairs, in input order, of
    ``sum(kernel * channel[i:i+kh, j:j+kw])``.

    Args:
        kernels: One ``kh x kw`` matrix per channel.
        channels: ``ch x cw`` matrices, ``ch >= kh`` and ``cw >= kw``.

    Returns:
        ``(ch - kh + 1) x (cw - kw + 1)`` matrix.

    Raises:
        InvalidArgumentError: If the sequences are empty or differ in length.
        DimensionMismatchError: If shapes are inconsistent or a kernel is
            larger than a channel.

    Example:
        >>> import numpy as np
        >>> kernel = np.arange(9.0).reshape(3, 3)
        >>> channel = np.array([[0, 1, 0, 0], [1, 1, 1, 1], [0, 1, 1, 1], [1, 0, 0, 1.0]])
        >>> convolve([kernel], [channel]).tolist()
        [[28.0, 33.0], [18.0, 23.0]]
    """
    if len(kernels) == 0 or len(kernels) != len(channels):
        raise InvalidArgumentError(
            f"Expected one kernel per channel, got {len(kernels)} kernels and "
            f"{len(channels)} channels."
        )
    kernels = _check_stack(kernels, "kernels")
    channels = _check_stack(channels, "channels")

    kh, kw = kernels[0].shape
    ch, cw = channels[0].shape
    if ch < kh or cw < kw:
        raise DimensionMismatchError(
            f"Kernel shape {(kh, kw)} does not fit inside channel shape {(ch, cw)}."
        )

    nrows = ch - kh + 1
    ncols = cw - kw + 1
    logger.debug(
        "convolve: %d channels %s with kernels %s -> %s",
        len(channels),
        (ch, cw),
        (kh, kw),
        (nrows, ncols),
    )

    convolved = np.zeros((nrows, ncols), dtype=np.float64)
    for i in range(nrows):
        for j in range(ncols):
            for kernel, channel in zip(kernels, channels):
                convolved[i, j] += component_sum(kernel, window(channel, (i, j), (kh, kw)))

    debug_check_finite(convolved, "convolution output")
    return convolved


convolution = convolve
