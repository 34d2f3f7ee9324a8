"""Pedersen, BLAKE2s and compressed-Pedersen commitment schemes."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from random import Random
from typing import List, Optional, Union

from .curve import JUBJUB, EdwardsPoint, TwistedEdwardsCurve
from .errors import IncorrectInputLengthError, to_uncompressed_bytes
from .injective_map import TECompressor
from .pedersen import PedersenCRH, PedersenParameters, Window
from .schemes import CommitmentScheme

BytesLike = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True)
class Randomness:
    """A blinding scalar for a Pedersen commitment."""

    value: int = 0

    def to_bytes(self) -> bytes:
        """Uncompressed encoding of the scalar."""
        return to_uncompressed_bytes(self.value)


@dataclass
class CommitmentParameters:
    """Powers of the blinding generator and per-window message generators."""

    randomness_generator: List[EdwardsPoint]
    generators: List[List[EdwardsPoint]]


class PedersenCommitment(CommitmentScheme):
    """Pedersen hash of the message plus ``r`` times a blinding generator."""

    def __init__(self, window: Window, curve: TwistedEdwardsCurve = JUBJUB) -> None:
        self.window = window
        self.curve = curve
        self._crh = PedersenCRH(window, curve)

    def random_randomness(self, rng: Random) -> Randomness:
        """Sample fresh blinding randomness."""
        return Randomness(self.curve.random_scalar(rng))

    def setup(self, rng: Random) -> CommitmentParameters:
        num_powers = self.curve.order.bit_length()
        randomness_generator = self._crh.generator_powers(num_powers, rng)
        generators = self._crh.create_generators(rng)
        return CommitmentParameters(randomness_generator, generators)

    def commit(
        self,
        parameters: CommitmentParameters,
        input: BytesLike,
        randomness: Randomness,
    ) -> EdwardsPoint:
        data = bytes(input)
        if len(data) > self.window.input_size_bits:
            raise IncorrectInputLengthError(len(data))
        if len(parameters.generators) != self.window.num_windows:
            raise ValueError(
                f"incorrect parameters with {len(parameters.generators)} windows "
                f"for {self.window.num_windows} windows"
            )
        result = self._crh.evaluate(PedersenParameters(parameters.generators), data)
        scalar = randomness.value
        for power in parameters.randomness_generator:
            if scalar & 1:
                result = result + power
            scalar >>= 1
            if not scalar:
                break
        return result


class Blake2sCommitment(CommitmentScheme):
    """BLAKE2s-256 of the message followed by 32 bytes of randomness."""

    RANDOMNESS_SIZE = 32

    def setup(self, rng: Optional[Random]) -> None:
        return None

    def commit(self, parameters: object, input: BytesLike, randomness: BytesLike) -> bytes:
        blinding = bytes(randomness)
        if len(blinding) != self.RANDOMNESS_SIZE:
            raise IncorrectInputLengthError(len(blinding))
        hasher = hashlib.blake2s(digest_size=32)
        hasher.update(bytes(input))
        hasher.update(blinding)
        return hasher.digest()


class PedersenCommCompressor(CommitmentScheme):
    """Pedersen commitment followed by an injective map of the resulting point."""

    def __init__(
        self,
        window: Window,
        compressor: Optional[TECompressor] = None,
        curve: TwistedEdwardsCurve = JUBJUB,
    ) -> None:
        self.compressor = compressor if compressor is not None else TECompressor()
        self._commitment = PedersenCommitment(window, curve)

    def setup(self, rng: Random) -> CommitmentParameters:
        return self._commitment.setup(rng)

    def commit(
        self,
        parameters: CommitmentParameters,
        input: BytesLike,
        randomness: Randomness,
    ) -> int:
        point = self._commitment.commit(parameters, input, randomness)
        return self.compressor.injective_map(point)