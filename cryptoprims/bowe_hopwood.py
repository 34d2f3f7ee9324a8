"""The Bowe-Hopwood variant of the Pedersen hash over twisted Edwards curves.

The input is read in 3-bit chunks. Each chunk selects a signed multiple
(+-1, +-2, +-3 or +-4) of a generator. The hash is the x coordinate of the
sum of those multiples.
"""

from __future__ import annotations

from dataclasses import dataclass
from random import Random
from typing import Iterator, List, Sequence, Union

from .curve import JUBJUB, EdwardsPoint, TwistedEdwardsCurve
from .errors import IncorrectInputLengthError, to_uncompressed_bytes
from .pedersen import Window, bytes_to_bits
from .schemes import CRHScheme, TwoToOneCRHScheme

BytesLike = Union[bytes, bytearray, memoryview]

CHUNK_SIZE = 3


@dataclass
class BoweHopwoodParameters:
    """One list of ``window_size`` generators per segment."""

    generators: List[List[EdwardsPoint]]

    def __str__(self) -> str:
        lines = ["Bowe-Hopwood-Pedersen Hash Parameters {"]
        lines.extend(
            f"\t  Generator {index}: {segment!r}"
            for index, segment in enumerate(self.generators)
        )
        lines.append("}")
        return "\n".join(lines)


def _chunks(items: Sequence, size: int) -> Iterator[Sequence]:
    for start in range(0, len(items), size):
        yield items[start:start + size]


def _encode_chunk(chunk_bits: Sequence[bool], generator: EdwardsPoint) -> EdwardsPoint:
    """Map a 3-bit chunk to (1 - 2*c2) * (1 + c0 + 2*c1) * generator."""
    encoded = generator
    if chunk_bits[0]:
        encoded = encoded + generator
    if chunk_bits[1]:
        encoded = encoded + generator.double()
    if chunk_bits[2]:
        encoded = -encoded
    return encoded


class BoweHopwoodCRH(CRHScheme):
    """Bowe-Hopwood-Pedersen hash of a byte string to a base-field element."""

    def __init__(self, window: Window, curve: TwistedEdwardsCurve = JUBJUB) -> None:
        self.window = window
        self.curve = curve

    @property
    def max_input_bits(self) -> int:
        """Largest input, in bits, that the hash accepts."""
        return self.window.window_size * self.window.num_windows * CHUNK_SIZE

    def create_generators(self, rng: Random) -> List[List[EdwardsPoint]]:
        """Sample, per segment, a base point and its successive multiples by 16."""
        generators = []
        for _ in range(self.window.num_windows):
            segment = []
            base = self.curve.random_point(rng)
            for _ in range(self.window.window_size):
                segment.append(base)
                for _ in range(4):
                    base = base.double()
            segment_copy = segment
            generators.append(segment_copy)
        return generators

    def max_window_size(self) -> int:
        """Most chunks per segment that keep segment scalars below (order - 1) / 2."""
        upper_limit = (self.curve.order - 1) // 2
        count = 0
        bound = 2
        while bound < upper_limit:
            bound <<= 4
            count += 1
        return count

    def setup(self, rng: Random) -> BoweHopwoodParameters:
        maximum = self.max_window_size()
        if self.window.window_size > maximum:
            raise ValueError(
                "Bowe-Hopwood-PedersenCRH hash must have a window size resulting in "
                f"scalars < (p-1)/2, maximum segment size is {maximum}"
            )
        return BoweHopwoodParameters(generators=self.create_generators(rng))

    def evaluate(self, parameters: BoweHopwoodParameters, input: BytesLike) -> int:
        data = bytes(input)
        if len(data) * 8 > self.max_input_bits:
            raise IncorrectInputLengthError(len(data))

        bits = bytes_to_bits(data)
        remainder = len(bits) % CHUNK_SIZE
        if remainder:
            bits.extend([False] * (CHUNK_SIZE - remainder))

        if len(parameters.generators) != self.window.num_windows:
            raise ValueError(
                f"incorrect parameters of size {len(parameters.generators)} for window "
                f"params {self.window.window_size}x{self.window.num_windows}x{CHUNK_SIZE}"
            )
        if any(len(segment) != self.window.window_size for segment in parameters.generators):
            raise ValueError(
                f"every segment must hold {self.window.window_size} generators"
            )

        result = self.curve.identity()
        segment_bits_size = self.window.window_size * CHUNK_SIZE
        for segment_bits, segment_generators in zip(
            _chunks(bits, segment_bits_size), parameters.generators
        ):
            for chunk_bits, generator in zip(
                _chunks(segment_bits, CHUNK_SIZE), segment_generators
            ):
                result = result + _encode_chunk(chunk_bits, generator)
        return result.x


class BoweHopwoodTwoToOneCRH(TwoToOneCRHScheme):
    """Bowe-Hopwood-Pedersen hash of two equal-length inputs laid side by side."""

    def __init__(self, window: Window, curve: TwistedEdwardsCurve = JUBJUB) -> None:
        self.window = window
        self.curve = curve
        self._crh = BoweHopwoodCRH(window, curve)

    @property
    def input_size_bits(self) -> int:
        return self.window.input_size_bits

    @property
    def half_input_size_bits(self) -> int:
        return self.input_size_bits // 2

    def create_generators(self, rng: Random) -> List[List[EdwardsPoint]]:
        return self._crh.create_generators(rng)

    def setup(self, rng: Random) -> BoweHopwoodParameters:
        return self._crh.setup(rng)

    def evaluate(
        self,
        parameters: BoweHopwoodParameters,
        left_input: BytesLike,
        right_input: BytesLike,
    ) -> int:
        left, right = bytes(left_input), bytes(right_input)
        if len(left) != len(right):
            raise ValueError("left and right input should be of equal length")
        if len(left) * 8 > self.half_input_size_bits:
            raise IncorrectInputLengthError(len(left))
        size = self.input_size_bits // 8
        buffer = (left + right)[:size].ljust(size, b"\x00")
        return self._crh.evaluate(parameters, buffer)

    def compress(
        self,
        parameters: BoweHopwoodParameters,
        left_input: int,
        right_input: int,
    ) -> int:
        return self.evaluate(
            parameters,
            to_uncompressed_bytes(left_input),
            to_uncompressed_bytes(right_input),
        )