"""Containers for BFV plaintexts and ciphertexts."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Ciphertext:
    """A BFV ciphertext: a pair of polynomials in R_p."""

    c0: list[int]
    c1: list[int]


@dataclass(frozen=True)
class Plaintext:
    """A BFV plaintext: a polynomial with coefficients modulo ``t``."""

    message: list[int]