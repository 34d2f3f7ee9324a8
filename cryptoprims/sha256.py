"""SHA-256 as a plain hash and as a (two-to-one) collision-resistant hash."""

from __future__ import annotations

import struct
from random import Random
from typing import Any, Optional, Union

from .schemes import CRHScheme, TwoToOneCRHScheme

BytesLike = Union[bytes, bytearray, memoryview]

BLOCK_SIZE = 64
DIGEST_SIZE = 32

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3, 0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13, 0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208, 0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

_H = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A, 0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)


def _as_bytes(data: Any) -> bytes:
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"expected a bytes-like object, got {type(data).__name__}")


def _rotr(value: int, amount: int) -> int:
    return ((value >> amount) | (value << (32 - amount))) & _MASK32


def _compress(state: tuple, block: bytes) -> tuple:
    """Run the SHA-256 compression function over one 64-byte block."""
    w = list(struct.unpack(">16I", block))
    for i in range(16, 64):
        x15, x2 = w[i - 15], w[i - 2]
        s0 = _rotr(x15, 7) ^ _rotr(x15, 18) ^ (x15 >> 3)
        s1 = _rotr(x2, 17) ^ _rotr(x2, 19) ^ (x2 >> 10)
        w.append((w[i - 16] + s0 + w[i - 7] + s1) & _MASK32)

    a, b, c, d, e, f, g, h = state
    for k, word in zip(_K, w):
        ch = (e & f) ^ (~e & _MASK32 & g)
        ma = (a & b) ^ (a & c) ^ (b & c)
        s0 = _rotr(a, 2) ^ _rotr(a, 13) ^ _rotr(a, 22)
        s1 = _rotr(e, 6) ^ _rotr(e, 11) ^ _rotr(e, 25)
        t0 = (h + s1 + ch + k + word) & _MASK32
        t1 = (s0 + ma) & _MASK32
        a, b, c, d, e, f, g, h = (t0 + t1) & _MASK32, a, b, c, (d + t0) & _MASK32, e, f, g

    return tuple((s + v) & _MASK32 for s, v in zip(state, (a, b, c, d, e, f, g, h)))


class Sha256Hasher:
    """Incremental SHA-256: feed data with ``update``, read the digest with ``finalize``."""

    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self, data: BytesLike = b"") -> None:
        self._state = _H
        self._completed_blocks = 0
        self._pending = b""
        if data:
            self.update(data)

    def update(self, data: BytesLike) -> None:
        """Absorb more input."""
        buffer = self._pending + _as_bytes(data)
        full = len(buffer) - len(buffer) % BLOCK_SIZE
        view = memoryview(buffer)
        for start in range(0, full, BLOCK_SIZE):
            self._state = _compress(self._state, bytes(view[start:start + BLOCK_SIZE]))
            self._completed_blocks += 1
        self._pending = buffer[full:]

    def finalize(self) -> bytes:
        """Return the 32-byte digest of everything absorbed so far.

        The hasher itself is left unchanged and may keep absorbing data.
        """
        bit_length = ((self._completed_blocks * BLOCK_SIZE + len(self._pending)) * 8) & _MASK64
        zeros = (55 - len(self._pending)) % BLOCK_SIZE
        tail = self._pending + b"\x80" + b"\x00" * zeros + bit_length.to_bytes(8, "big")
        state = self._state
        for start in range(0, len(tail), BLOCK_SIZE):
            state = _compress(state, tail[start:start + BLOCK_SIZE])
        return struct.pack(">8I", *state)

    def copy(self) -> "Sha256Hasher":
        """Return an independent hasher in the same state."""
        clone = Sha256Hasher()
        clone._state = self._state
        clone._completed_blocks = self._completed_blocks
        clone._pending = self._pending
        return clone


def sha256_digest(data: BytesLike) -> bytes:
    """Hash ``data`` in one call."""
    return Sha256Hasher(data).finalize()


class Sha256CRH(CRHScheme):
    """SHA-256 as a CRH; it has no parameters."""

    def setup(self, rng: Optional[Random]) -> None:
        return None

    def evaluate(self, parameters: Any, input: BytesLike) -> bytes:
        return sha256_digest(input)


class Sha256TwoToOneCRH(TwoToOneCRHScheme):
    """SHA-256 of the concatenation of two inputs; it has no parameters."""

    def setup(self, rng: Optional[Random]) -> None:
        return None

    def evaluate(self, parameters: Any, left_input: BytesLike, right_input: BytesLike) -> bytes:
        hasher = Sha256Hasher()
        hasher.update(left_input)
        hasher.update(right_input)
        return hasher.finalize()

    def compress(self, parameters: Any, left_input: BytesLike, right_input: BytesLike) -> bytes:
        return self.evaluate(parameters, left_input, right_input)