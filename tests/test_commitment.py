import hashlib
from random import Random

import pytest

from cryptoprims.commitment import (
    Blake2sCommitment,
    CommitmentParameters,
    PedersenCommCompressor,
    PedersenCommitment,
    Randomness,
)
from cryptoprims.errors import IncorrectInputLengthError
from cryptoprims.pedersen import PedersenCRH, PedersenParameters, Window

WINDOW = Window(4, 9)


@pytest.fixture(scope="module")
def pedersen():
    scheme = PedersenCommitment(WINDOW)
    return scheme, scheme.setup(Random(20))


def test_blake2s_commitment_matches_reference():
    rng = Random(21)
    data = bytes([1] * 32)
    randomness = bytes(rng.getrandbits(8) for _ in range(32))
    scheme = Blake2sCommitment()
    params = scheme.setup(rng)
    result = scheme.commit(params, data, randomness)
    assert len(result) == 32
    assert result == hashlib.blake2s(data + randomness).digest()


def test_blake2s_randomness_hides():
    scheme = Blake2sCommitment()
    data = b"\x01" * 32
    assert scheme.commit(None, data, b"\x00" * 32) != scheme.commit(None, data, b"\x01" * 32)


def test_blake2s_randomness_length():
    with pytest.raises(IncorrectInputLengthError):
        Blake2sCommitment().commit(None, b"abc", b"\x00" * 31)


def test_randomness_bytes():
    assert Randomness(1).to_bytes() == b"\x01" + b"\x00" * 31
    assert Randomness().to_bytes() == b"\x00" * 32


def test_setup_shape(pedersen):
    scheme, params = pedersen
    assert len(params.randomness_generator) == scheme.curve.order.bit_length()
    assert len(params.generators) == WINDOW.num_windows


def test_zero_randomness_is_pedersen_hash(pedersen):
    scheme, params = pedersen
    data = bytes([1] * 4)
    expected = PedersenCRH(WINDOW).evaluate(PedersenParameters(params.generators), data)
    assert scheme.commit(params, data, Randomness(0)) == expected


def test_blinding_adds_scalar_multiple(pedersen):
    scheme, params = pedersen
    data = bytes([1] * 4)
    randomness = scheme.random_randomness(Random(22))
    blinded = scheme.commit(params, data, randomness)
    unblinded = scheme.commit(params, data, Randomness(0))
    base = params.randomness_generator[0]
    assert blinded - unblinded == base.scalar_mul(randomness.value)
    assert blinded.is_in_prime_subgroup()


def test_commit_input_too_long(pedersen):
    scheme, params = pedersen
    with pytest.raises(IncorrectInputLengthError):
        scheme.commit(params, b"\x00" * 5, Randomness(1))


def test_commit_wrong_parameters(pedersen):
    scheme, params = pedersen
    broken = CommitmentParameters(params.randomness_generator, params.generators[:3])
    with pytest.raises(ValueError):
        scheme.commit(broken, b"\x01", Randomness(1))


def test_compressor_returns_x(pedersen):
    scheme, params = pedersen
    compressor = PedersenCommCompressor(WINDOW)
    randomness = Randomness(12345)
    point = scheme.commit(params, b"\x02\x03", randomness)
    assert compressor.commit(params, b"\x02\x03", randomness) == point.x


def test_compressor_setup_shape():
    params = PedersenCommCompressor(WINDOW).setup(Random(23))
    assert len(params.generators) == WINDOW.num_windows
    assert all(len(powers) == WINDOW.window_size for powers in params.generators)