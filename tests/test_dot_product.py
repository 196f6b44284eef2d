import numpy as np
import pytest

from numerical import dot_product_and_sum
from numerical.errors import InvalidArgumentError
from numerical.utils import check_epochs


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        ([1.0, 2.0], [1.0, 2.0], 5.0),
        ([1.0, 2.0], [3.0, 4.0], 11.0),
        ([1.0, 2.0, 3.0], [1.0, 2.0], 5.0),
        ([1.0, 2.0], [1.0, 2.0, 3.0], 5.0),
        ([], [1.0, 2.0], 0.0),
        ([1.0, 2.0], [], 0.0),
        ([], [], 0.0),
    ],
)
def test_dot_product_and_sum(a, b, expected):
    assert dot_product_and_sum(a, b) == expected


def test_dot_product_and_sum_accepts_generators():
    assert dot_product_and_sum((x for x in [2.0, 3.0]), iter([4.0, 5.0])) == 23.0


@pytest.mark.parametrize(("epochs", "expected"), [(0, 0), (5, 5), (3.0, 3), (np.int64(7), 7)])
def test_check_epochs_accepts_counts(epochs, expected):
    result = check_epochs(epochs)
    assert result == expected
    assert type(result) is int


@pytest.mark.parametrize("epochs", [-1, 2.5, "3", b"3", None, False, [1], float("inf")])
def test_check_epochs_rejects_malformed(epochs):
    with pytest.raises(InvalidArgumentError):
        check_epochs(epochs)
