"""Sampling and rescaling helpers shared by the scheme."""

import secrets

from safhe import ring


def random_binary_vector(n: int) -> list[int]:
    """Return ``n`` independent uniformly random bits."""
    return [secrets.randbits(1) for _ in range(n)]


def scale(c: list[int], p: int, t: int) -> list[int]:
    """Rescale ``c`` by ``t / p`` with rounding, centred modulo ``p``."""
    return ring.scalar_div(p, ring.scalar_mul_no_mod(t, c), p)