from random import Random

import pytest

from cryptoprims.curve import JUBJUB, field_to_bytes
from cryptoprims.errors import IncorrectInputLengthError, NotPrimeOrderError
from cryptoprims.injective_map import (
    PedersenCRHCompressor,
    PedersenTwoToOneCRHCompressor,
    TECompressor,
)
from cryptoprims.pedersen import PedersenCRH, PedersenTwoToOneCRH, Window

WINDOW = Window(127, 9)


@pytest.fixture(scope="module")
def params():
    return PedersenCRH(WINDOW).setup(Random(10))


def test_compressor_returns_x():
    point = JUBJUB.random_point(Random(11))
    assert TECompressor().injective_map(point) == point.x


def test_compressor_rejects_small_order_point():
    order_two = JUBJUB.point(0, -1)
    with pytest.raises(NotPrimeOrderError):
        TECompressor().injective_map(order_two)


def test_crh_compressor_matches_plain_crh(params):
    data = b"hello pedersen"
    compressed = PedersenCRHCompressor(WINDOW).evaluate(params, data)
    assert compressed == PedersenCRH(WINDOW).evaluate(params, data).x


def test_crh_compressor_setup_shape():
    p = PedersenCRHCompressor(WINDOW).setup(Random(12))
    assert len(p.generators) == WINDOW.num_windows


def test_crh_compressor_distinguishes_inputs(params):
    crh = PedersenCRHCompressor(WINDOW)
    assert crh.evaluate(params, b"\x01") != crh.evaluate(params, b"\x02")


def test_crh_compressor_input_too_long(params):
    with pytest.raises(IncorrectInputLengthError):
        PedersenCRHCompressor(WINDOW).evaluate(params, b"\x00" * 143)


def test_two_to_one_evaluate_matches_plain(params):
    crh = PedersenTwoToOneCRHCompressor(WINDOW)
    left, right = b"\x05" * 20, b"\x09" * 20
    expected = PedersenTwoToOneCRH(WINDOW).evaluate(params, left, right).x
    assert crh.evaluate(params, left, right) == expected


def test_two_to_one_compress_serializes_field_elements(params):
    crh = PedersenTwoToOneCRHCompressor(WINDOW)
    a = crh.evaluate(params, b"\x01", b"\x02")
    b = crh.evaluate(params, b"\x03", b"\x04")
    assert crh.compress(params, a, b) == crh.evaluate(params, field_to_bytes(a), field_to_bytes(b))


def test_two_to_one_unequal_lengths(params):
    with pytest.raises(ValueError):
        PedersenTwoToOneCRHCompressor(WINDOW).evaluate(params, b"\x01", b"")