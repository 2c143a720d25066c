"""Recursive number-theoretic transform and its inverse."""

from safhe.finite_field import reduce


def _is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def ntt(a: list[int], n: int, w: int, p: int) -> list[int]:
    """Evaluate ``a`` at the powers of the ``n``-th root of unity ``w`` modulo ``p``."""
    if not _is_power_of_two(n):
        raise ValueError("n must be a power of 2")
    if n == 1:
        return list(a)

    half = n // 2
    w_squared = reduce(w * w, p)
    even = ntt(a[0::2], half, w_squared, p)
    odd = ntt(a[1::2], half, w_squared, p)

    low = []
    high = []
    for i, (e, o) in enumerate(zip(even[:half], odd[:half])):
        low.append(reduce(e + reduce(pow(w, i, p) * o, p), p))
        high.append(reduce(e + reduce(pow(w, i + half, p) * o, p), p))
    return low + high


def intt(a: list[int], n: int, w_inv: int, p: int) -> list[int]:
    """Invert :func:`ntt` given the inverse root ``w_inv``."""
    transformed = ntt(a, n, w_inv, p)
    try:
        n_inv = pow(n, -1, p)
    except ValueError as exc:
        raise ValueError("n has no inverse modulo p") from exc
    return [reduce(e * n_inv, p) for e in transformed]