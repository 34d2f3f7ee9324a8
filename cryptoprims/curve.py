"""Twisted Edwards curves over prime fields, in affine coordinates."""

from __future__ import annotations

from dataclasses import dataclass, field
from random import Random
from typing import Optional

from .errors import SerializationError, to_uncompressed_bytes


def _sqrt_mod(n: int, p: int) -> Optional[int]:
    """Return a square root of ``n`` modulo the odd prime ``p``, or None."""
    n %= p
    if n == 0:
        return 0
    if pow(n, (p - 1) // 2, p) != 1:
        return None
    if p % 4 == 3:
        return pow(n, (p + 1) // 4, p)
    odd, twos = p - 1, 0
    while odd % 2 == 0:
        odd //= 2
        twos += 1
    z = 2
    while pow(z, (p - 1) // 2, p) != p - 1:
        z += 1
    m, c, t, root = twos, pow(z, odd, p), pow(n, odd, p), pow(n, (odd + 1) // 2, p)
    while t != 1:
        i, t_sq = 0, t
        while t_sq != 1:
            t_sq = t_sq * t_sq % p
            i += 1
        b = pow(c, 1 << (m - i - 1), p)
        m, c, t, root = i, b * b % p, t * b * b % p, root * b % p
    return root


@dataclass(frozen=True)
class TwistedEdwardsCurve:
    """The curve a*x^2 + y^2 = 1 + d*x^2*y^2 over the field of ``modulus``."""

    modulus: int
    a: int
    d: int
    order: int
    cofactor: int
    name: str = ""

    @property
    def field_bytes(self) -> int:
        """Byte width of a serialized base-field element."""
        return (self.modulus.bit_length() + 7) // 8

    def identity(self) -> "EdwardsPoint":
        """The neutral element (0, 1)."""
        return EdwardsPoint(self, 0, 1)

    def point(self, x: int, y: int) -> "EdwardsPoint":
        """Build a point, reducing coordinates and checking it lies on the curve."""
        return EdwardsPoint(self, x % self.modulus, y % self.modulus)

    def is_on_curve(self, x: int, y: int) -> bool:
        """Whether (x, y) satisfies the curve equation."""
        p = self.modulus
        x2, y2 = x * x % p, y * y % p
        return (self.a * x2 + y2) % p == (1 + self.d * x2 * y2) % p

    def random_point(self, rng: Random) -> "EdwardsPoint":
        """Sample a non-identity point of the prime-order subgroup."""
        p = self.modulus
        while True:
            y = rng.randrange(p)
            y2 = y * y % p
            denominator = (self.a - self.d * y2) % p
            if denominator == 0:
                continue
            x = _sqrt_mod((1 - y2) * pow(denominator, -1, p), p)
            if x is None:
                continue
            if rng.getrandbits(1):
                x = -x % p
            candidate = EdwardsPoint(self, x, y).scalar_mul(self.cofactor)
            if not candidate.is_identity():
                return candidate

    def random_scalar(self, rng: Random) -> int:
        """Sample a scalar uniformly from [0, order)."""
        return rng.randrange(self.order)


@dataclass(frozen=True)
class EdwardsPoint:
    """An affine point on a twisted Edwards curve."""

    curve: TwistedEdwardsCurve = field(repr=False)
    x: int
    y: int

    def __post_init__(self) -> None:
        p = self.curve.modulus
        if not (0 <= self.x < p and 0 <= self.y < p):
            raise ValueError("coordinates must be reduced modulo the field prime")
        if not self.curve.is_on_curve(self.x, self.y):
            raise ValueError(f"({self.x}, {self.y}) is not on the curve")

    def __add__(self, other: "EdwardsPoint") -> "EdwardsPoint":
        if not isinstance(other, EdwardsPoint):
            return NotImplemented
        if other.curve != self.curve:
            raise ValueError("points lie on different curves")
        curve = self.curve
        p = curve.modulus
        x1x2 = self.x * other.x % p
        y1y2 = self.y * other.y % p
        t = curve.d * x1x2 * y1y2 % p
        x3 = (self.x * other.y + self.y * other.x) * pow((1 + t) % p, -1, p) % p
        y3 = (y1y2 - curve.a * x1x2) * pow((1 - t) % p, -1, p) % p
        return EdwardsPoint(curve, x3, y3)

    def __neg__(self) -> "EdwardsPoint":
        return EdwardsPoint(self.curve, -self.x % self.curve.modulus, self.y)

    def __sub__(self, other: "EdwardsPoint") -> "EdwardsPoint":
        if not isinstance(other, EdwardsPoint):
            return NotImplemented
        return self + (-other)

    def __mul__(self, scalar: int) -> "EdwardsPoint":
        if not isinstance(scalar, int):
            return NotImplemented
        return self.scalar_mul(scalar)

    __rmul__ = __mul__

    def double(self) -> "EdwardsPoint":
        """Return 2 * self."""
        return self + self

    def scalar_mul(self, scalar: int) -> "EdwardsPoint":
        """Return scalar * self by double-and-add."""
        if scalar < 0:
            return (-self).scalar_mul(-scalar)
        result = self.curve.identity()
        addend = self
        while scalar:
            if scalar & 1:
                result = result + addend
            addend = addend.double()
            scalar >>= 1
        return result

    def is_identity(self) -> bool:
        """Whether this is the neutral element."""
        return self.x == 0 and self.y == 1

    def is_in_prime_subgroup(self) -> bool:
        """Whether the point's order divides the prime subgroup order."""
        return self.scalar_mul(self.curve.order).is_identity()

    def to_bytes(self) -> bytes:
        """Uncompressed encoding: x then y, each little-endian."""
        width = self.curve.field_bytes
        return self.x.to_bytes(width, "little") + self.y.to_bytes(width, "little")


def field_to_bytes(value: int) -> bytes:
    """Serialize a base-field element to its 32-byte little-endian form."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise SerializationError(f"cannot serialize {type(value).__name__} as a field element")
    return to_uncompressed_bytes(value)


_JUBJUB_MODULUS = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001

JUBJUB = TwistedEdwardsCurve(
    modulus=_JUBJUB_MODULUS,
    a=_JUBJUB_MODULUS - 1,
    d=(-10240 * pow(10241, -1, _JUBJUB_MODULUS)) % _JUBJUB_MODULUS,
    order=0x0E7DB4EA6533AFA906673B0101343B00A6682093CCC81082D0970E5ED6F72CB7,
    cofactor=8,
    name="jubjub",
)