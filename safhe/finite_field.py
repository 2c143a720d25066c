"""Arithmetic in prime fields: reductions, roots of unity and square roots."""

from itertools import count


def reduce(a: int, p: int) -> int:
    """Return ``a`` reduced modulo ``p``, carrying the sign of ``p``."""
    return a % p


def modulo(a: int, p: int) -> int:
    """Return the representative of ``a`` modulo ``p`` centred on zero."""
    if p <= 1:
        raise ValueError("modulus must be greater than 1")
    rem = reduce(a, p)
    if rem > p // 2:
        rem -= p
    return rem


def legendre_symbol(a: int, p: int) -> int:
    """Euler's criterion: 1 for residues, ``p - 1`` for non-residues, 0 for multiples."""
    return pow(a, (p - 1) // 2, p)


def primitive_nth_root_of_unity(p: int, n: int) -> int:
    """Find a primitive ``n``-th root of unity modulo the prime ``p``."""
    if n < 2:
        raise ValueError("n must be at least 2")
    exponent = (p - 1) // n
    for x in count(1):
        g = pow(x, exponent, p)
        if pow(g, n // 2, p) != 1:
            return g
    raise AssertionError("unreachable")


def square_root_mod_p(n: int, p: int) -> int:
    """Return a square root of ``n`` modulo the odd prime ``p`` (Tonelli-Shanks)."""
    if legendre_symbol(n, p) != 1:
        raise ValueError(f"{n} is not a quadratic residue modulo {p}")

    q = (p - 1) // 2
    s = 1
    while q % 2 == 0:
        q //= 2
        s += 1

    z = 2
    while legendre_symbol(z, p) != p - 1:
        z += 1

    m = s
    c = pow(z, q, p)
    t = pow(n, q, p)
    r = pow(n, (q + 1) // 2, p)

    while reduce(t - 1, p) != 0:
        t2 = reduce(t * t, p)
        i = 1
        while i < m:
            if reduce(t2 - 1, p) == 0:
                break
            t2 = reduce(t2 * t2, p)
            i += 1
        b = pow(c, 2 ** (m - i - 1), p)
        r = reduce(r * b, p)
        c = reduce(b * b, p)
        t = reduce(t * c, p)
        m = i

    return r