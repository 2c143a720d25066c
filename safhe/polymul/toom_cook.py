"""Toom-Cook 4-way polynomial multiplication."""

from safhe.ring import (
    add_no_mod,
    point_wise_mul_no_mod,
    scalar_div_no_mod,
    scalar_mul_no_mod,
    sub_no_mod,
)


def _split(x: list[int], split: int) -> tuple[list[int], list[int], list[int], list[int]]:
    return x[:split], x[split : 2 * split], x[2 * split : 3 * split], x[3 * split :]


def _evaluate(x: list[int]) -> tuple[list[int], ...]:
    """Evaluate the four-part split of ``x`` at 0, 1, -1, 2, -2, 3 and infinity."""
    x0, x1, x2, x3 = _split(x, len(x) // 4)

    at_1 = add_no_mod(add_no_mod(x0, x1), add_no_mod(x2, x3))
    at_m1 = add_no_mod(sub_no_mod(x0, x1), sub_no_mod(x2, x3))

    t1 = scalar_mul_no_mod(2, x1)
    t2 = scalar_mul_no_mod(4, x2)
    t3 = scalar_mul_no_mod(8, x3)
    at_2 = add_no_mod(add_no_mod(x0, t1), add_no_mod(t2, t3))
    at_m2 = add_no_mod(sub_no_mod(x0, t1), sub_no_mod(t2, t3))

    t1 = scalar_mul_no_mod(3, x1)
    t2 = scalar_mul_no_mod(9, x2)
    t3 = scalar_mul_no_mod(27, x3)
    at_3 = add_no_mod(add_no_mod(x0, t1), add_no_mod(t2, t3))

    return list(x0), at_1, at_m1, at_2, at_m2, at_3, x3


def toom_cook_4(a: list[int], b: list[int]) -> list[int]:
    """Multiply polynomials of equal length divisible by four using Toom-Cook 4."""
    if len(a) != len(b):
        raise ValueError("polynomials must have the same length")
    n = len(a)
    if n == 0 or n % 4:
        raise ValueError("length must be a positive multiple of 4")
    split = n // 4

    a_0, a_1, a_m1, a_2, a_m2, a_3, a_inf = _evaluate(a)
    b_0, b_1, b_m1, b_2, b_m2, b_3, b_inf = _evaluate(b)

    c_0 = point_wise_mul_no_mod(a_0, b_0)
    c_1 = point_wise_mul_no_mod(a_1, b_1)
    c_m1 = point_wise_mul_no_mod(a_m1, b_m1)
    c_2 = point_wise_mul_no_mod(a_2, b_2)
    c_m2 = point_wise_mul_no_mod(a_m2, b_m2)
    c_3 = point_wise_mul_no_mod(a_3, b_3)
    c_inf = point_wise_mul_no_mod(a_inf, b_inf)

    t0 = sub_no_mod(sub_no_mod(scalar_div_no_mod(2, add_no_mod(c_1, c_m1)), c_0), c_inf)
    t1 = scalar_div_no_mod(
        8,
        sub_no_mod(
            sub_no_mod(add_no_mod(c_2, c_m2), scalar_mul_no_mod(2, c_0)),
            scalar_mul_no_mod(128, c_inf),
        ),
    )
    v4 = scalar_div_no_mod(3, sub_no_mod(t1, t0))
    v2 = sub_no_mod(t0, v4)

    t0 = scalar_div_no_mod(2, sub_no_mod(c_1, c_m1))
    t1 = scalar_div_no_mod(3, sub_no_mod(scalar_div_no_mod(4, sub_no_mod(c_2, c_m2)), t0))
    t2 = scalar_div_no_mod(
        3,
        sub_no_mod(
            sub_no_mod(
                sub_no_mod(add_no_mod(c_3, c_0), scalar_mul_no_mod(9, v2)),
                scalar_mul_no_mod(81, v4),
            ),
            scalar_mul_no_mod(729, c_inf),
        ),
    )
    t2 = sub_no_mod(scalar_div_no_mod(8, sub_no_mod(t2, t0)), t1)
    v5 = scalar_div_no_mod(5, t2)
    v3 = sub_no_mod(t1, t2)
    v1 = sub_no_mod(sub_no_mod(t0, v3), v5)

    c = [0] * (2 * n - 1)
    parts = (c_0, v1, v2, v3, v4, v5, c_inf)
    for k, part in enumerate(parts):
        for i, value in enumerate(part[: len(c_inf)]):
            c[k * split + i] += value
    return c