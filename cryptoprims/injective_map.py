"""Pedersen hashes whose curve-point output is mapped injectively to a field element."""

from __future__ import annotations

from random import Random
from typing import Optional, Union

from .curve import JUBJUB, EdwardsPoint, TwistedEdwardsCurve
from .errors import NotPrimeOrderError, to_uncompressed_bytes
from .pedersen import PedersenCRH, PedersenParameters, PedersenTwoToOneCRH, Window
from .schemes import CRHScheme, TwoToOneCRHScheme

BytesLike = Union[bytes, bytearray, memoryview]


class TECompressor:
    """Maps a prime-order twisted Edwards point to its x coordinate."""

    def injective_map(self, point: EdwardsPoint) -> int:
        if not point.is_in_prime_subgroup():
            raise NotPrimeOrderError()
        return point.x


class PedersenCRHCompressor(CRHScheme):
    """Pedersen CRH followed by an injective map of the resulting point."""

    def __init__(
        self,
        window: Window,
        compressor: Optional[TECompressor] = None,
        curve: TwistedEdwardsCurve = JUBJUB,
    ) -> None:
        self.compressor = compressor if compressor is not None else TECompressor()
        self._crh = PedersenCRH(window, curve)

    def setup(self, rng: Random) -> PedersenParameters:
        return self._crh.setup(rng)

    def evaluate(self, parameters: PedersenParameters, input: BytesLike) -> int:
        return self.compressor.injective_map(self._crh.evaluate(parameters, input))


class PedersenTwoToOneCRHCompressor(TwoToOneCRHScheme):
    """Two-to-one Pedersen CRH followed by an injective map of the resulting point."""

    def __init__(
        self,
        window: Window,
        compressor: Optional[TECompressor] = None,
        curve: TwistedEdwardsCurve = JUBJUB,
    ) -> None:
        self.compressor = compressor if compressor is not None else TECompressor()
        self._crh = PedersenTwoToOneCRH(window, curve)

    def setup(self, rng: Random) -> PedersenParameters:
        return self._crh.setup(rng)

    def evaluate(
        self,
        parameters: PedersenParameters,
        left_input: BytesLike,
        right_input: BytesLike,
    ) -> int:
        point = self._crh.evaluate(parameters, left_input, right_input)
        return self.compressor.injective_map(point)

    def compress(self, parameters: PedersenParameters, left_input: int, right_input: int) -> int:
        return self.evaluate(
            parameters,
            to_uncompressed_bytes(left_input),
            to_uncompressed_bytes(right_input),
        )