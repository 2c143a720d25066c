# safhe

An implementation of the BFV (Brakerski/Fan-Vercauteren) homomorphic
encryption scheme over the ring `Z_p[x]/(x^n + 1)`, together with the
polynomial arithmetic it is built on.

It is a teaching and experimentation tool, not a hardened cryptographic
library: no constant-time guarantees are made.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Encrypting and computing on ciphertexts

```python
from safhe.bfv import gen_keys
from safhe.ciphertext import Plaintext
from safhe.params import ParamSet

sk, pk = gen_keys(ParamSet.RLWE_PARAMS_1)

c1 = pk.encrypt(Plaintext([-8] * 1024))
c2 = pk.encrypt(Plaintext([411] * 1024))

total = pk.add(c1, c2)
print(sk.decrypt(total).message[:4])       # [403, 403, 403, 403]

difference = pk.sub(c1, c2)
print(sk.decrypt(difference).message[:4])  # [-419, -419, -419, -419]

negated = pk.neg(c1)
print(sk.decrypt(negated).message[:4])     # [8, 8, 8, 8]
```

`gen_keys` accepts a `ParamSet` member or its value, such as `"PARAMS1"`,
and returns a `SecretKey` and a `PublicKey`. Keys can also be built step by
step with `SecretKey.generate(params)` and `PublicKey.from_secret_key(sk)`.

Messages are lists of exactly `n` integers (coefficients of a polynomial);
`encrypt` raises `ValueError` for any other length. Decrypted coefficients
come back centred modulo the plaintext modulus `t = 1024`, in the range
`(-512, 512]`. Encryption adds random noise, so decryption is correct with
high probability rather than with certainty.

### What it does not do

Ciphertexts support addition, subtraction and negation only. There is no
homomorphic multiplication of ciphertexts and no relinearisation key, so
`PublicKey` has no multiplication method. The integer polynomial
multiplication routines below are available on their own.

## Parameter sets

`safhe.params.ParamSet` lists the predefined parameter sets,
`RLWE_PARAMS_1` to `RLWE_PARAMS_12`, ranging from `n = 1024` with a 30-bit
modulus up to `n = 131072` with a modulus of several thousand bits.
`safhe.params.get_params(ParamSet.RLWE_PARAMS_2)` returns the frozen
`Params` for a set: noise width `s`, ring dimension `n`, ciphertext modulus
`p`, plaintext modulus `t`, `rp`, `levels`, the NTT roots `w`, `w_inv`,
`phi`, `phi_inv`, and the bit `precision` used for FFT multiplication.

The roots can be recomputed from `p` and `n` and printed with:

```
safhe-param-gen
safhe-param-gen RLWE_PARAMS_1 RLWE_PARAMS_2
```

With no arguments every set is processed; the largest sets take a long
time. `safhe.param_gen.derive_roots(params)` returns the tuple
`(w, w_inv, phi, phi_inv)` directly.

## Polynomial arithmetic

The building blocks are usable on their own; polynomials are plain lists of
Python integers, lowest coefficient first.

```python
from safhe.polymul.karatsuba import karatsuba
from safhe.polymul.schoolbook import schoolbook
from safhe.polymul.toom_cook import toom_cook_4
from safhe.polymul.fft import fft_mul
from safhe.polymul.ntt import ntt, intt
from safhe.ring import mul_no_mod, PolyMulAlgorithm

karatsuba([1, 2, 3], [4, 5, 6])            # [4, 13, 28, 27, 18]
schoolbook([1, 2, 3], [4, 5, 6])           # [4, 13, 28, 27, 18]
toom_cook_4([1, 3, 1, 2], [2, 1, 2, 1])    # [2, 7, 7, 12, 7, 5, 2]
fft_mul([1, 3, 1, 2], [2, 1, 2, 1], 32)    # [2, 7, 7, 12, 7, 5, 2]

# Multiplication reduced modulo x^n + 1, without a coefficient modulus
mul_no_mod([1, 3, 1, 2], [2, 1, 2, 1], 4, PolyMulAlgorithm.FFT, 32)
# [-5, 2, 5, 12]

ntt([5, 6, 7, 8], 4, 3383, 7681)           # [26, 913, 7679, 6764]
```

`karatsuba` needs inputs of equal length, `toom_cook_4` lengths that are a
positive multiple of four, and `fft_mul` and `ntt` power-of-two sizes.
`safhe.polymul.fft.fft` is the underlying arbitrary-precision complex
transform, with direction chosen by `FftMode.FFT` or `FftMode.IFFT`.

`safhe.ring.mul` multiplies in `Z_p[x]/(x^n + 1)` through the negacyclic
NTT; `safhe.ring` also has coefficient-wise `add`, `neg`, `scalar_mul`,
`scalar_div` (centred modulo `p`) and their `_no_mod` counterparts, and
samplers for uniform, binary and discrete Gaussian polynomials.
`safhe.finite_field` provides `reduce`, centred `modulo`,
`legendre_symbol`, Tonelli-Shanks `square_root_mod_p` and
`primitive_nth_root_of_unity`; `safhe.discrete_gaussian.sample_z` draws a
single discrete Gaussian integer.