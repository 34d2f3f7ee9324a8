from random import Random

import pytest

from cryptoprims.curve import JUBJUB
from cryptoprims.errors import IncorrectInputLengthError
from cryptoprims.pedersen import (
    PedersenCRH,
    PedersenParameters,
    PedersenTwoToOneCRH,
    Window,
    bytes_to_bits,
)

SMALL = Window(8, 4)
LARGE = Window(127, 9)


@pytest.fixture(scope="module")
def small_setup():
    crh = PedersenCRH(SMALL)
    return crh, crh.setup(Random(1))


@pytest.fixture(scope="module")
def large_setup():
    crh = PedersenTwoToOneCRH(LARGE)
    return crh, crh.setup(Random(2))


def test_bytes_to_bits_is_lsb_first():
    assert bytes_to_bits(b"\x01\x80") == [True] + [False] * 14 + [True]


def test_bytes_to_bits_length():
    assert len(bytes_to_bits(b"abc")) == 24
    assert bytes_to_bits(b"") == []


def test_window_rejects_non_positive():
    with pytest.raises(ValueError):
        Window(0, 3)


def test_generator_powers_double():
    crh = PedersenCRH(SMALL)
    powers = crh.generator_powers(5, Random(3))
    assert len(powers) == 5
    for previous, current in zip(powers, powers[1:]):
        assert current == previous.double()
    assert all(p.is_in_prime_subgroup() for p in powers[:1])


def test_setup_shape(small_setup):
    _, params = small_setup
    assert len(params.generators) == SMALL.num_windows
    assert all(len(powers) == SMALL.window_size for powers in params.generators)


def test_empty_input_is_identity(small_setup):
    crh, params = small_setup
    assert crh.evaluate(params, b"").is_identity()


def test_single_bits_select_generators(small_setup):
    crh, params = small_setup
    assert crh.evaluate(params, b"\x01") == params.generators[0][0]
    assert crh.evaluate(params, b"\x02") == params.generators[0][1]
    assert crh.evaluate(params, b"\x00\x01") == params.generators[1][0]


def test_linear_in_disjoint_bits(small_setup):
    crh, params = small_setup
    a, b = b"\x0f\x00\xa0\x01", b"\xf0\x11\x05\x00"
    combined = bytes(x | y for x, y in zip(a, b))
    assert crh.evaluate(params, a) + crh.evaluate(params, b) == crh.evaluate(params, combined)


def test_padding_does_not_change_result(small_setup):
    crh, params = small_setup
    assert crh.evaluate(params, b"\x07") == crh.evaluate(params, b"\x07\x00\x00\x00")


def test_input_too_long(small_setup):
    crh, params = small_setup
    with pytest.raises(IncorrectInputLengthError):
        crh.evaluate(params, b"\x00" * 5)


def test_wrong_parameters(small_setup):
    crh, params = small_setup
    with pytest.raises(ValueError):
        crh.evaluate(PedersenParameters(params.generators[:2]), b"\x01")


def test_parameters_str():
    params = PedersenParameters(generators=[[JUBJUB.identity()]])
    text = str(params)
    assert text.startswith("Pedersen Hash Parameters {")
    assert "Generator 0" in text


def test_two_to_one_concatenates(large_setup):
    crh, params = large_setup
    single = PedersenCRH(LARGE)
    left, right = bytes(range(30)), bytes(range(100, 130))
    assert crh.evaluate(params, left, right) == single.evaluate(params, left + right)


def test_two_to_one_unequal_lengths(large_setup):
    crh, params = large_setup
    with pytest.raises(ValueError):
        crh.evaluate(params, b"\x01\x02", b"\x03")


def test_two_to_one_half_overflow(large_setup):
    crh, params = large_setup
    with pytest.raises(IncorrectInputLengthError):
        crh.evaluate(params, b"\x01" * 72, b"\x01" * 72)


def test_compress_uses_uncompressed_points(large_setup):
    crh, params = large_setup
    rng = Random(4)
    a, b = JUBJUB.random_point(rng), JUBJUB.random_point(rng)
    assert crh.compress(params, a, b) == crh.evaluate(params, a.to_bytes(), b.to_bytes())
    assert crh.compress(params, a, b) != crh.compress(params, b, a)