"""
Example: Multi-channel convolution

Convolves a three-channel 4x4 image with three 3x3 kernels and prints the
2x2 feature map, then repeats the single-channel case.
"""

from numerical import convolve, create_matrix

KERNELS = [
    create_matrix(3, 3, [0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0]),
    create_matrix(3, 3, [9.0, 10.0, 11.0, 12.0, 13.0, 14.0, 15.0, 16.0, 17.0]),
    create_matrix(3, 3, [18.0, 19.0, 20.0, 21.0, 22.0, 23.0, 24.0, 25.0, 26.0]),
]

# fmt: off
CHANNELS = [
    create_matrix(4, 4, [
        0.0, 1.0, 0.0, 0.0,
        1.0, 1.0, 1.0, 1.0,
        0.0, 1.0, 1.0, 1.0,
        1.0, 0.0, 0.0, 1.0,
    ]),
    create_matrix(4, 4, [
        0.0, 0.0, 0.0, 1.0,
        0.0, 1.0, 0.0, 1.0,
        1.0, 0.0, 0.0, 0.0,
        1.0, 1.0, 1.0, 1.0,
    ]),
    create_matrix(4, 4, [
        1.0, 1.0, 0.0, 0.0,
        0.0, 1.0, 1.0, 0.0,
        0.0, 1.0, 1.0, 1.0,
        1.0, 0.0, 1.0, 0.0,
    ]),
]
# fmt: on


def example_single_channel():
    """Example: one kernel over one channel."""
    print("=" * 60)
    print("Example 1: Single channel")
    print("=" * 60)
    result = convolve(KERNELS[:1], CHANNELS[:1])
    print(f"Feature map:\n{result}")
    print()


def example_multi_channel():
    """Example: three kernels over three channels, summed."""
    print("=" * 60)
    print("Example 2: Three channels")
    print("=" * 60)
    result = convolve(KERNELS, CHANNELS)
    print(f"Feature map:\n{result}")
    print()


if __name__ == "__main__":
    example_single_channel()
    example_multi_channel()
    print("Convolution examples completed")
