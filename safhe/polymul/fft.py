"""Arbitrary-precision complex FFT and FFT-based polynomial multiplication."""

import math
from enum import Enum
from fractions import Fraction

import mpmath


class FftMode(Enum):
    """Direction of the transform."""

    FFT = "fft"
    IFFT = "ifft"


def _is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def _transform(a: list, sign: int) -> list:
    n = len(a)
    if n == 1:
        return list(a)
    even = _transform(a[0::2], sign)
    odd = _transform(a[1::2], sign)

    angle = mpmath.mpf(sign * 2.0 * math.pi / n)
    w_n = mpmath.mpc(mpmath.cos(angle), mpmath.sin(angle))
    w = mpmath.mpc(1)
    low = []
    high = []
    for e, o in zip(even, odd):
        twiddled = w * o
        low.append(e + twiddled)
        high.append(e - twiddled)
        w *= w_n
    return low + high


def fft(a: list, n: int, precision: int, mode: FftMode) -> list:
    """Transform the first ``n`` values of ``a`` at ``precision`` bits."""
    if not _is_power_of_two(n):
        raise ValueError("n must be a power of 2")
    if n == 1:
        return list(a)
    if precision < 1:
        raise ValueError("precision must be positive")
    sign = 1 if mode is FftMode.FFT else -1
    with mpmath.mp.workprec(precision):
        return _transform([mpmath.mpc(x) for x in a[:n]], sign)


def _round_half_away(x) -> int:
    if not mpmath.isfinite(x):
        raise ValueError("cannot round a non-finite value")
    man, exp = abs(x).man_exp
    magnitude = math.floor(Fraction(abs(man)) * Fraction(2) ** exp + Fraction(1, 2))
    return -magnitude if x < 0 else magnitude


def fft_mul(p: list[int], q: list[int], precision: int) -> list[int]:
    """Multiply integer polynomials of equal power-of-two length via the FFT."""
    if len(p) != len(q):
        raise ValueError("polynomials must have the same length")
    n = len(p)
    size = 2 * n
    if not _is_power_of_two(size):
        raise ValueError("padded length must be a power of 2")
    if precision < 1:
        raise ValueError("precision must be positive")

    with mpmath.mp.workprec(precision):
        padding = [mpmath.mpc(0)] * n
        p_hat = _transform([mpmath.mpc(v) for v in p] + padding, 1)
        q_hat = _transform([mpmath.mpc(v) for v in q] + padding, 1)
        product = _transform([x * y for x, y in zip(p_hat, q_hat)], -1)
        scale = mpmath.mpf(1) / size
        return [_round_half_away((c * scale).real) for c in product[:-1]]