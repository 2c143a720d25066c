import pytest

from safhe.bfv import PublicKey, SecretKey, gen_keys
from safhe.ciphertext import Ciphertext, Plaintext
from safhe.params import ParamSet, get_params

N = 1024


@pytest.fixture(scope="module")
def keys():
    return gen_keys(ParamSet.RLWE_PARAMS_1)


def test_encryption_round_trip(keys):
    sk, pk = keys
    message = [251] * N
    ct = pk.encrypt(Plaintext(message=message))
    assert sk.decrypt(ct).message == message


def test_homomorphic_add(keys):
    sk, pk = keys
    c1 = pk.encrypt(Plaintext(message=[-8] * N))
    c2 = pk.encrypt(Plaintext(message=[411] * N))
    assert sk.decrypt(pk.add(c1, c2)).message == [403] * N


def test_homomorphic_neg(keys):
    sk, pk = keys
    c1 = pk.encrypt(Plaintext(message=[-17] * N))
    assert sk.decrypt(pk.neg(c1)).message == [17] * N


def test_homomorphic_sub(keys):
    sk, pk = keys
    c1 = pk.encrypt(Plaintext(message=[8] * N))
    c2 = pk.encrypt(Plaintext(message=[411] * N))
    assert sk.decrypt(pk.sub(c1, c2)).message == [-403] * N


def test_mixed_message_round_trip(keys):
    sk, pk = keys
    message = [(i % 1024) - 511 for i in range(N)]
    ct = pk.encrypt(Plaintext(message=message))
    assert sk.decrypt(ct).message == message


def test_secret_key_is_binary():
    params = get_params(ParamSet.RLWE_PARAMS_1)
    sk = SecretKey.generate(params)
    assert len(sk.secret) == params.n
    assert set(sk.secret) <= {0, 1}


def test_public_key_shape(keys):
    _, pk = keys
    p = pk.params.p
    assert len(pk.a) == N and len(pk.b) == N
    assert all(-p // 2 <= x <= p // 2 for x in pk.b)


def test_from_secret_key_decrypts():
    params = get_params("PARAMS1")
    sk = SecretKey.generate(params)
    pk = PublicKey.from_secret_key(sk)
    ct = pk.encrypt(Plaintext(message=[7] * N))
    assert sk.decrypt(ct).message == [7] * N


def test_ciphertext_coefficients_are_centred(keys):
    _, pk = keys
    p = pk.params.p
    ct = pk.encrypt(Plaintext(message=[1] * N))
    assert len(ct.c0) == N and len(ct.c1) == N
    assert all(-p // 2 < x <= p // 2 for x in ct.c0 + ct.c1)


def test_neg_negates_components(keys):
    _, pk = keys
    ct = Ciphertext(c0=[1, -2, 3], c1=[0, 5, -6])
    result = pk.neg(ct)
    assert result.c0 == [-1, 2, -3]
    assert result.c1 == [0, -5, 6]


def test_encrypt_rejects_wrong_length(keys):
    _, pk = keys
    with pytest.raises(ValueError):
        pk.encrypt(Plaintext(message=[1] * (N - 1)))


def test_gen_keys_unknown_set():
    with pytest.raises(ValueError):
        gen_keys("PARAMS99")


def test_gen_keys_uses_requested_params():
    sk, pk = gen_keys(ParamSet.RLWE_PARAMS_1)
    assert sk.params == get_params(ParamSet.RLWE_PARAMS_1)
    assert pk.params.n == N