import math

import pytest

from safhe.finite_field import modulo, primitive_nth_root_of_unity, square_root_mod_p
from safhe.ring import (
    PolyMulAlgorithm,
    add,
    add_no_mod,
    binary_random_element,
    discrete_gaussian_random_element,
    mul,
    mul_no_mod,
    neg,
    neg_no_mod,
    point_wise_mul_no_mod,
    scalar_div,
    scalar_div_no_mod,
    scalar_mul,
    scalar_mul_no_mod,
    sub_no_mod,
    uniform_random_element,
)


def _roots(p, n):
    w = primitive_nth_root_of_unity(p, n)
    phi = square_root_mod_p(w, p)
    return w, pow(w, -1, p), phi, pow(phi, -1, p)


def test_ring_mul():
    p = 7681
    w, w_inv, phi, phi_inv = _roots(p, 4)
    assert mul([1, 2, 3, 4], [5, 6, 7, 8], p, w, w_inv, phi, phi_inv) == [-56, -36, 2, 60]


def test_ring_mul_rejects_unequal_lengths():
    p = 7681
    w, w_inv, phi, phi_inv = _roots(p, 4)
    with pytest.raises(ValueError):
        mul([1, 2, 3, 4], [1, 2], p, w, w_inv, phi, phi_inv)


def test_ring_mul_no_mod_fft():
    assert mul_no_mod([1, 3, 1, 2], [2, 1, 2, 1], 4, PolyMulAlgorithm.FFT, 32) == [-5, 2, 5, 12]


def test_ring_mul_no_mod_fft2():
    assert mul_no_mod([1, 2, 3, 4], [4, 3, 2, 1], 4, PolyMulAlgorithm.FFT, 32) == [-16, 0, 16, 30]


def test_ring_mul_no_mod_karatsuba():
    assert mul_no_mod(
        [2, 3, 1, 0, 0], [1, -1, 0, 1, 0], 5, PolyMulAlgorithm.KARATSUBA, 0
    ) == [1, 1, -2, 1, 3]


@pytest.mark.parametrize(
    "algo", [PolyMulAlgorithm.DEFAULT, PolyMulAlgorithm.SCHOOLBOOK, PolyMulAlgorithm.KARATSUBA]
)
def test_mul_no_mod_algorithms_agree_with_fft(algo):
    a = [3, -7, 12, 5, 0, -1, 9, 4]
    b = [-2, 8, 1, 6, -5, 11, 3, 7]
    expected = mul_no_mod(a, b, 8, PolyMulAlgorithm.FFT, 128)
    assert mul_no_mod(a, b, 8, algo, 0) == expected


def test_ntt_mul_matches_integer_product_mod_p():
    p = 7681
    w, w_inv, phi, phi_inv = _roots(p, 8)
    a = [100, -200, 37, 4, 5000, -6, 7, 1]
    b = [9, 8, -70, 6, 5, 4, 3000, -2]
    exact = mul_no_mod(a, b, 8, PolyMulAlgorithm.SCHOOLBOOK, 0)
    assert mul(a, b, p, w, w_inv, phi, phi_inv) == [modulo(x, p) for x in exact]


def test_add_and_neg_are_centred():
    p = 17
    a = [8, -8, 3]
    b = [1, -1, 5]
    assert add(a, b, p) == [-8, 8, 8]
    assert add(a, neg(a, p), p) == [0, 0, 0]
    assert all(-p // 2 < x <= p // 2 for x in add(a, b, p))


def test_scalar_mul_matches_repeated_add():
    p = 97
    a = [40, -13, 48]
    assert scalar_mul(3, a, p) == add(add(a, a, p), a, p)


def test_scalar_div_rounds_half_away_from_zero():
    assert scalar_div(10, [14, -14, 15, -15], 7) == [1, -1, 2, -2]


def test_scalar_div_inverts_scalar_mul_no_mod():
    values = [5, -12, 0, 31]
    assert scalar_div(9, scalar_mul_no_mod(9, values), 101) == values


def test_no_mod_helpers():
    a = [3, -4, 10]
    b = [2, 5, -6]
    assert add_no_mod(a, b) == [5, 1, 4]
    assert sub_no_mod(a, b) == [1, -9, 16]
    assert neg_no_mod(a) == [-3, 4, -10]
    assert point_wise_mul_no_mod(a, b) == [6, -20, -60]
    assert scalar_div_no_mod(3, scalar_mul_no_mod(3, a)) == a


def test_scalar_div_no_mod_truncates_toward_zero():
    assert scalar_div_no_mod(2, [7, -7]) == [3, -3]


def test_uniform_random_element_bounds():
    p = 101
    poly = uniform_random_element(p, 200)
    assert len(poly) == 200
    assert all(abs(x) < p // 2 for x in poly)


def test_binary_random_element():
    poly = binary_random_element(64)
    assert len(poly) == 64
    assert set(poly) <= {0, 1}


def test_discrete_gaussian_random_element_bounds():
    sigma, n = 3.0, 32
    poly = discrete_gaussian_random_element(sigma, n)
    assert len(poly) == n
    bound = sigma * math.log2(n)
    assert all(abs(x) <= bound for x in poly)