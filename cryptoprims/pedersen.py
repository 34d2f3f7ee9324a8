"""Pedersen collision-resistant hashes over twisted Edwards curves."""

from __future__ import annotations

from dataclasses import dataclass
from random import Random
from typing import Iterator, List, Sequence, Union

from .curve import JUBJUB, EdwardsPoint, TwistedEdwardsCurve
from .errors import IncorrectInputLengthError, to_uncompressed_bytes
from .schemes import CRHScheme, TwoToOneCRHScheme

BytesLike = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True)
class Window:
    """How the input bits are cut up: ``num_windows`` windows of ``window_size`` bits."""

    window_size: int
    num_windows: int

    def __post_init__(self) -> None:
        if self.window_size <= 0 or self.num_windows <= 0:
            raise ValueError("window size and number of windows must be positive")

    @property
    def input_size_bits(self) -> int:
        """Largest input, in bits, that the hash accepts."""
        return self.window_size * self.num_windows


@dataclass
class PedersenParameters:
    """One list of generator powers per window."""

    generators: List[List[EdwardsPoint]]

    def __str__(self) -> str:
        lines = ["Pedersen Hash Parameters {"]
        lines.extend(
            f"\t  Generator {index}: {powers!r}"
            for index, powers in enumerate(self.generators)
        )
        lines.append("}")
        return "\n".join(lines)


def bytes_to_bits(data: BytesLike) -> List[bool]:
    """Expand bytes into bits, least significant bit of each byte first."""
    return [bool((byte >> shift) & 1) for byte in bytes(data) for shift in range(8)]


def _chunks(bits: Sequence[bool], size: int) -> Iterator[Sequence[bool]]:
    for start in range(0, len(bits), size):
        yield bits[start:start + size]


class PedersenCRH(CRHScheme):
    """Pedersen hash: the sum of generator powers selected by the input bits."""

    def __init__(self, window: Window, curve: TwistedEdwardsCurve = JUBJUB) -> None:
        self.window = window
        self.curve = curve

    @property
    def input_size_bits(self) -> int:
        return self.window.input_size_bits

    def create_generators(self, rng: Random) -> List[List[EdwardsPoint]]:
        """Sample one list of ``window_size`` powers for each window."""
        return [
            self.generator_powers(self.window.window_size, rng)
            for _ in range(self.window.num_windows)
        ]

    def generator_powers(self, num_powers: int, rng: Random) -> List[EdwardsPoint]:
        """Sample a base point and return base, 2*base, 4*base, ..."""
        powers = []
        base = self.curve.random_point(rng)
        for _ in range(num_powers):
            powers.append(base)
            base = base.double()
        return powers

    def setup(self, rng: Random) -> PedersenParameters:
        return PedersenParameters(generators=self.create_generators(rng))

    def evaluate(self, parameters: PedersenParameters, input: BytesLike) -> EdwardsPoint:
        data = bytes(input)
        total_bits = self.window.input_size_bits
        if len(data) * 8 > total_bits:
            raise IncorrectInputLengthError(len(data))
        if len(data) * 8 < total_bits:
            data = data.ljust(total_bits // 8, b"\x00")
        if len(parameters.generators) != self.window.num_windows:
            raise ValueError(
                f"incorrect parameters with {len(parameters.generators)} windows "
                f"for window params {self.window.window_size}x{self.window.num_windows}"
            )

        result = self.curve.identity()
        bits = bytes_to_bits(data)
        for window_bits, powers in zip(_chunks(bits, self.window.window_size), parameters.generators):
            for bit, base in zip(window_bits, powers):
                if bit:
                    result = result + base
        return result


class PedersenTwoToOneCRH(TwoToOneCRHScheme):
    """Pedersen hash of two equal-length inputs laid side by side."""

    def __init__(self, window: Window, curve: TwistedEdwardsCurve = JUBJUB) -> None:
        self.window = window
        self.curve = curve
        self._crh = PedersenCRH(window, curve)

    @property
    def half_input_size_bits(self) -> int:
        return self.window.input_size_bits // 2

    def create_generators(self, rng: Random) -> List[List[EdwardsPoint]]:
        return self._crh.create_generators(rng)

    def generator_powers(self, num_powers: int, rng: Random) -> List[EdwardsPoint]:
        return self._crh.generator_powers(num_powers, rng)

    def setup(self, rng: Random) -> PedersenParameters:
        return self._crh.setup(rng)

    def evaluate(
        self,
        parameters: PedersenParameters,
        left_input: BytesLike,
        right_input: BytesLike,
    ) -> EdwardsPoint:
        left, right = bytes(left_input), bytes(right_input)
        if len(left) != len(right):
            raise ValueError("left and right input should be of equal length")
        if len(left) * 8 > self.half_input_size_bits:
            raise IncorrectInputLengthError(len(left))
        size = (2 * self.half_input_size_bits) // 8
        buffer = (left + right)[:size].ljust(size, b"\x00")
        return self._crh.evaluate(parameters, buffer)

    def compress(
        self,
        parameters: PedersenParameters,
        left_input: EdwardsPoint,
        right_input: EdwardsPoint,
    ) -> EdwardsPoint:
        return self.evaluate(
            parameters,
            to_uncompressed_bytes(left_input),
            to_uncompressed_bytes(right_input),
        )