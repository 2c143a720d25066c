import math

import pytest

from safhe.discrete_gaussian import sample_z


def test_samples_stay_within_tail_cut():
    s, n = 8.0, 1024
    bound = s * math.log2(n)
    samples = [sample_z(s, n) for _ in range(500)]
    assert all(-bound <= x <= bound for x in samples)


def test_single_point_range_gives_zero():
    assert sample_z(8.0, 1) == 0


def test_samples_are_centred():
    samples = [sample_z(8.0, 1024) for _ in range(2000)]
    assert min(samples) < 0 < max(samples)
    assert abs(sum(samples) / len(samples)) < 1.0


def test_non_positive_n_raises():
    with pytest.raises(ValueError):
        sample_z(8.0, 0)


def test_empty_range_raises():
    with pytest.raises(ValueError):
        sample_z(-2.0, 4)


def test_zero_width_raises():
    with pytest.raises(ValueError):
        sample_z(0.0, 4)