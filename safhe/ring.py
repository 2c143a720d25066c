"""Polynomial arithmetic in Z_p[x]/(x^n + 1) and over the integers."""

import secrets
from enum import Enum

from safhe import util
from safhe.discrete_gaussian import sample_z
from safhe.finite_field import modulo, reduce
from safhe.polymul.fft import fft_mul
from safhe.polymul.karatsuba import karatsuba
from safhe.polymul.ntt import intt, ntt
from safhe.polymul.schoolbook import schoolbook


class PolyMulAlgorithm(Enum):
    """Algorithm used for multiplication over the integers."""

    DEFAULT = "default"
    FFT = "fft"
    KARATSUBA = "karatsuba"
    SCHOOLBOOK = "schoolbook"


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def mul(
    a: list[int],
    b: list[int],
    p: int,
    w: int,
    w_inv: int,
    phi: int,
    inv_phi: int,
) -> list[int]:
    """Negacyclic product of ``a`` and ``b`` modulo ``p`` via the NTT."""
    if len(a) != len(b):
        raise ValueError("polynomials must have the same length")
    n = len(a)
    a_hat = ntt([reduce(x * pow(phi, i, p), p) for i, x in enumerate(a)], n, w, p)
    b_hat = ntt([reduce(x * pow(phi, i, p), p) for i, x in enumerate(b)], n, w, p)
    c = intt([reduce(x * y, p) for x, y in zip(a_hat, b_hat)], n, w_inv, p)
    return [modulo(x * pow(inv_phi, i, p), p) for i, x in enumerate(c)]


def add(a: list[int], b: list[int], p: int) -> list[int]:
    """Coefficient-wise sum, centred modulo ``p``."""
    return [modulo(x + y, p) for x, y in zip(a, b)]


def neg(a: list[int], p: int) -> list[int]:
    """Coefficient-wise negation, centred modulo ``p``."""
    return [modulo(-x, p) for x in a]


def scalar_mul(s: int, a: list[int], p: int) -> list[int]:
    """Multiply every coefficient by ``s``, centred modulo ``p``."""
    return [modulo(x * s, p) for x in a]


def scalar_div(s: int, a: list[int], p: int) -> list[int]:
    """Divide every coefficient by ``s`` rounding half away from zero, centred modulo ``p``."""
    half = _trunc_div(s, 2)
    result = []
    for x in a:
        shifted = x + half if (x < 0) == (s < 0) else x - half
        result.append(modulo(_trunc_div(shifted, s), p))
    return result


def scalar_mul_no_mod(s: int, a: list[int]) -> list[int]:
    """Multiply every coefficient by ``s``."""
    return [x * s for x in a]


def scalar_div_no_mod(s: int, a: list[int]) -> list[int]:
    """Divide every coefficient by ``s``, truncating toward zero."""
    return [_trunc_div(x, s) for x in a]


def mul_no_mod(
    a: list[int],
    b: list[int],
    n: int,
    algo: PolyMulAlgorithm,
    precision: int,
) -> list[int]:
    """Product of ``a`` and ``b`` reduced modulo ``x^n + 1`` over the integers."""
    if algo is PolyMulAlgorithm.FFT:
        res = fft_mul(a, b, precision)
    elif algo is PolyMulAlgorithm.SCHOOLBOOK:
        res = schoolbook(a, b)
    else:
        res = karatsuba(a, b)

    if len(res) < n:
        raise ValueError("product is shorter than the ring dimension")
    reduced = res[:n]
    for i in range(n, len(res)):
        sign = -1 if (i // n) % 2 else 1
        reduced[i % n] += sign * res[i]
    return reduced


def add_no_mod(a: list[int], b: list[int]) -> list[int]:
    """Coefficient-wise sum."""
    return [x + y for x, y in zip(a, b)]


def neg_no_mod(a: list[int]) -> list[int]:
    """Coefficient-wise negation."""
    return [-x for x in a]


def sub_no_mod(a: list[int], b: list[int]) -> list[int]:
    """Coefficient-wise difference."""
    return [x - y for x, y in zip(a, b)]


def point_wise_mul_no_mod(a: list[int], b: list[int]) -> list[int]:
    """Coefficient-wise product."""
    return [x * y for x, y in zip(a, b)]


def uniform_random_element(p: int, n: int) -> list[int]:
    """Sample ``n`` coefficients uniformly with magnitude below ``p // 2``."""
    half_p = p // 2
    if half_p < 1:
        raise ValueError("modulus too small to sample from")
    polynomial = []
    for _ in range(n):
        r = secrets.randbelow(half_p)
        if secrets.randbits(1):
            r = -r
        polynomial.append(r)
    return polynomial


def binary_random_element(n: int) -> list[int]:
    """Sample ``n`` coefficients from {0, 1}."""
    return util.random_binary_vector(n)


def discrete_gaussian_random_element(sigma: float, n: int) -> list[int]:
    """Sample ``n`` coefficients from the discrete Gaussian of width ``sigma``."""
    return [sample_z(sigma, n) for _ in range(n)]