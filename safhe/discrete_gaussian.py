"""Rejection sampling from a discrete Gaussian over the integers."""

import math
import random

_rng = random.SystemRandom()


def _rho(x: int, s: float) -> float:
    return math.exp(-math.pi * float(x) ** 2 / s**2)


def sample_z(s: float, n: int) -> int:
    """Draw one integer from the discrete Gaussian of width ``s``, tail-cut at ``s * log2(n)``."""
    if n < 1:
        raise ValueError("n must be positive")
    if s == 0:
        raise ValueError("width s must be non-zero")
    tail = math.log2(n)
    left = math.ceil(-s * tail)
    right = math.floor(s * tail)
    if left > right:
        raise ValueError("empty sampling range")
    while True:
        x = _rng.randint(left, right)
        if _rng.random() <= _rho(x, s):
            return x