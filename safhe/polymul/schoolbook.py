"""Quadratic-time polynomial multiplication."""


def schoolbook(a: list[int], b: list[int]) -> list[int]:
    """Return the coefficients of the product of polynomials ``a`` and ``b``."""
    length = len(a) + len(b) - 1
    if length < 0:
        raise ValueError("at least one polynomial must be non-empty")
    c = [0] * length
    for i, ai in enumerate(a):
        for j, bj in enumerate(b):
            c[i + j] += ai * bj
    return c