"""Karatsuba polynomial multiplication."""


def _fit(values: list[int], size: int) -> list[int]:
    return (values + [0] * size)[:size]


def karatsuba(p: list[int], q: list[int]) -> list[int]:
    """Return the coefficients of ``p * q`` for polynomials of equal length."""
    if not p:
        raise ValueError("polynomials must be non-empty")
    if len(p) != len(q):
        raise ValueError("polynomials must have the same length")

    n = len(p) - 1
    if n == 0:
        return [p[0] * q[0]]
    if n == 1:
        return [p[0] * q[0], p[1] * q[0] + p[0] * q[1], p[1] * q[1]]

    m = (n + 1) // 2
    tail_p = p[n] if n == 2 * m else 0
    tail_q = q[n] if n == 2 * m else 0
    p_prime = [x + y for x, y in zip(p[:m], p[m : 2 * m])] + [tail_p]
    q_prime = [x + y for x, y in zip(q[:m], q[m : 2 * m])] + [tail_q]

    size = 2 * m + 1
    r1 = _fit(karatsuba(p[:m], q[:m]), size)
    r2 = _fit(karatsuba(p[m:], q[m:]), size)
    r3 = _fit(karatsuba(p_prime, q_prime), size)
    r4 = [c - a - b for a, b, c in zip(r1, r2, r3)]

    result = [0] * (2 * n + 1)
    for offset, part in ((0, r1), (m, r4), (2 * m, r2)):
        for i, value in enumerate(part):
            if offset + i < len(result):
                result[offset + i] += value
    return result