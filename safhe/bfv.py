"""BFV key generation, encryption, decryption and homomorphic operations."""

from __future__ import annotations

from dataclasses import dataclass

from safhe.ciphertext import Ciphertext, Plaintext
from safhe.params import ParamSet, Params, get_params
from safhe.ring import (
    add,
    binary_random_element,
    discrete_gaussian_random_element,
    mul,
    neg,
    neg_no_mod,
    scalar_div,
    scalar_mul,
    scalar_mul_no_mod,
    uniform_random_element,
)


def _ring_mul(a: list[int], b: list[int], params: Params) -> list[int]:
    return mul(a, b, params.p, params.w, params.w_inv, params.phi, params.phi_inv)


@dataclass(frozen=True)
class SecretKey:
    """A binary secret polynomial together with its parameters."""

    secret: list[int]
    params: Params

    @classmethod
    def generate(cls, params: Params) -> SecretKey:
        """Sample a fresh secret key for ``params``."""
        return cls(secret=binary_random_element(params.n), params=params)

    def decrypt(self, ct: Ciphertext) -> Plaintext:
        """Recover the plaintext held in ``ct``."""
        params = self.params
        noisy = add(ct.c0, _ring_mul(ct.c1, self.secret, params), params.p)
        message = scalar_div(params.p, scalar_mul_no_mod(params.t, noisy), params.t)
        return Plaintext(message=message)


@dataclass(frozen=True)
class PublicKey:
    """A BFV public key ``(b, a)`` with ``b = -(a * s + e)``."""

    a: list[int]
    b: list[int]
    params: Params

    @classmethod
    def from_secret_key(cls, secret_key: SecretKey) -> PublicKey:
        """Derive a public key from ``secret_key``."""
        params = secret_key.params
        a = uniform_random_element(params.p, params.n)
        e = discrete_gaussian_random_element(params.s, params.n)
        b = neg(add(_ring_mul(a, secret_key.secret, params), e, params.p), params.p)
        return cls(a=a, b=b, params=params)

    def encrypt(self, pt: Plaintext) -> Ciphertext:
        """Encrypt ``pt``, whose message must have ``n`` coefficients."""
        params = self.params
        if len(pt.message) != params.n:
            raise ValueError(
                f"message has {len(pt.message)} coefficients, expected {params.n}"
            )
        u = binary_random_element(params.n)
        e1 = discrete_gaussian_random_element(params.s, params.n)
        e2 = discrete_gaussian_random_element(params.s, params.n)
        delta = params.p // params.t

        c0 = add(
            e1,
            add(
                _ring_mul(self.b, u, params),
                scalar_mul(delta, pt.message, params.p),
                params.p,
            ),
            params.p,
        )
        c1 = add(e2, _ring_mul(self.a, u, params), params.p)
        return Ciphertext(c0=c0, c1=c1)

    def add(self, lhs: Ciphertext, rhs: Ciphertext) -> Ciphertext:
        """Homomorphic addition."""
        p = self.params.p
        return Ciphertext(c0=add(lhs.c0, rhs.c0, p), c1=add(lhs.c1, rhs.c1, p))

    def neg(self, c: Ciphertext) -> Ciphertext:
        """Homomorphic negation."""
        return Ciphertext(c0=neg_no_mod(c.c0), c1=neg_no_mod(c.c1))

    def sub(self, lhs: Ciphertext, rhs: Ciphertext) -> Ciphertext:
        """Homomorphic subtraction."""
        return self.add(lhs, self.neg(rhs))


def gen_keys(param_set: ParamSet | str) -> tuple[SecretKey, PublicKey]:
    """Generate a secret and public key pair for a named parameter set."""
    params = get_params(param_set)
    secret_key = SecretKey.generate(params)
    public_key = PublicKey.from_secret_key(secret_key)
    return secret_key, public_key