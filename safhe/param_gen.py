"""Derive the roots of unity used by the NTT for each parameter set."""

import argparse

from safhe.finite_field import primitive_nth_root_of_unity, square_root_mod_p
from safhe.params import ParamSet, Params, get_params

_RULE = "-" * 30


def derive_roots(params: Params) -> tuple[int, int, int, int]:
    """Return ``(w, w_inv, phi, phi_inv)`` for the modulus and dimension of ``params``."""
    p = params.p
    w = primitive_nth_root_of_unity(p, params.n)
    try:
        w_inv = pow(w, -1, p)
    except ValueError as exc:
        raise ValueError("no modular inverse for w") from exc
    phi = square_root_mod_p(w, p)
    try:
        phi_inv = pow(phi, -1, p)
    except ValueError as exc:
        raise ValueError("no modular inverse for phi") from exc
    return w, w_inv, phi, phi_inv


def main(argv: list[str] | None = None) -> int:
    """Print the derived roots for the chosen parameter sets, all of them by default."""
    parser = argparse.ArgumentParser(
        description="Derive NTT roots of unity for the BFV parameter sets."
    )
    parser.add_argument(
        "sets",
        nargs="*",
        choices=[s.name for s in ParamSet],
        metavar="SET",
        help="parameter set names, e.g. RLWE_PARAMS_1",
    )
    args = parser.parse_args(argv)
    chosen = [ParamSet[name] for name in args.sets] or list(ParamSet)

    for param_set in chosen:
        w, w_inv, phi, phi_inv = derive_roots(get_params(param_set))
        print(f"{_RULE}{param_set.name}{_RULE}")
        print(f"w: {w}")
        print(f"w_inv: {w_inv}")
        print(f"phi: {phi}")
        print(f"phi_inv: {phi_inv}")
        print("-" * 71)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())