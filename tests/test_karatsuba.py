import pytest

from safhe.polymul.karatsuba import karatsuba
from safhe.polymul.schoolbook import schoolbook

CASES = [
    ([1, 3, 1, 2], [2, 1, 2, 1], [2, 7, 7, 12, 7, 5, 2]),
    ([1, 2, 3], [4, 5, 6], [4, 13, 28, 27, 18]),
    ([4, 3, 2, 1], [1, 2, 3, 4], [4, 11, 20, 30, 20, 11, 4]),
    ([5, 4, 1, 3, 2], [5, 4, 3, 2, 1], [25, 40, 36, 41, 38, 23, 13, 7, 2]),
    ([3, 2, 1], [5, 4, 1], [15, 22, 16, 6, 1]),
    ([1] * 6, [1] * 6, [1, 2, 3, 4, 5, 6, 5, 4, 3, 2, 1]),
    ([4, 1, 3, 2], [1, 3, 2, 5], [4, 13, 14, 33, 17, 19, 10]),
    ([2, 3, 1, 0, 0], [1, -1, 0, 1, 0], [2, 1, -2, 1, 3, 1, 0, 0, 0]),
]


@pytest.mark.parametrize("p, q, expected", CASES)
def test_karatsuba(p, q, expected):
    assert karatsuba(p, q) == expected


@pytest.mark.parametrize("length", [1, 2, 3, 7, 8, 13, 16, 33])
def test_karatsuba_agrees_with_schoolbook(length):
    p = [(i * 37 + 11) % 101 - 50 for i in range(length)]
    q = [(i * 53 + 7) % 97 - 48 for i in range(length)]
    assert karatsuba(p, q) == schoolbook(p, q)


def test_karatsuba_empty_raises():
    with pytest.raises(ValueError):
        karatsuba([], [])


def test_karatsuba_length_mismatch_raises():
    with pytest.raises(ValueError):
        karatsuba([1, 2, 3], [1, 2])