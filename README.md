# cryptoprims

Cryptographic primitives in pure Python, with no runtime dependencies:

- **Collision-resistant hashes**: the Pedersen hash, the Bowe–Hopwood–Pedersen hash and
  SHA-256, each in a single-input form and a two-to-one form (the kind used for the inner
  nodes of a Merkle tree).
- **Commitments**: Pedersen commitments, BLAKE2s commitments, and Pedersen commitments
  compressed to a field element.
- **Scheme interfaces** (`cryptoprims.schemes`): `CRHScheme`, `TwoToOneCRHScheme`,
  `CommitmentScheme` and `AsymmetricEncryptionScheme`.
- **Twisted Edwards arithmetic** (`cryptoprims.curve`): `TwistedEdwardsCurve`,
  `EdwardsPoint` and the ready-made curve `JUBJUB`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Curves and points

`TwistedEdwardsCurve(modulus, a, d, order, cofactor, name)` describes the curve
`a*x^2 + y^2 = 1 + d*x^2*y^2`. `JUBJUB` is defined in `cryptoprims.curve` and is the
default curve of every scheme.

```python
import random

from cryptoprims.curve import JUBJUB

rng = random.Random(0)
p = JUBJUB.random_point(rng)        # a non-identity point of the prime-order subgroup
q = p.double() + p                  # 3 * p
assert q == p.scalar_mul(3) == 3 * p
assert (q - q).is_identity()
assert p.is_in_prime_subgroup()
p.to_bytes()                        # x then y, each 32 bytes little-endian
```

`JUBJUB.point(x, y)` builds a point and raises `ValueError` if it is not on the curve.
`JUBJUB.random_scalar(rng)` samples a scalar below the subgroup order.

Randomness everywhere is drawn from a `random.Random` you pass in, so results are
reproducible from a seed. Point arithmetic branches on secret bits and is not
constant-time.

## Pedersen hash

```python
from cryptoprims.pedersen import PedersenCRH, PedersenTwoToOneCRH, Window

crh = PedersenCRH(Window(window_size=4, num_windows=9))
params = crh.setup(rng)
point = crh.evaluate(params, b"\x01\x02\x03\x04")
```

The input must fit in `window_size * num_windows` bits; a shorter input is padded with
zero bytes and a longer one raises `IncorrectInputLengthError`. Parameters whose number of
windows does not match the window raise `ValueError`. `bytes_to_bits` expands bytes into
bits, least significant bit first.

`PedersenTwoToOneCRH.evaluate(parameters, left, right)` hashes two inputs of equal length
(`ValueError` otherwise), each at most half the input size. `compress(parameters, left,
right)` hashes two earlier output points through their uncompressed byte encodings.

## Compressing to a field element

`TECompressor().injective_map(point)` returns the point's x coordinate, and raises
`NotPrimeOrderError` if the point is not in the prime-order subgroup.
`PedersenCRHCompressor` and `PedersenTwoToOneCRHCompressor` (in
`cryptoprims.injective_map`) apply it to the Pedersen hash output, so they return an
integer. Their `compress` takes two such integers and hashes their 32-byte little-endian
encodings.

## Bowe–Hopwood–Pedersen hash

```python
from cryptoprims.bowe_hopwood import BoweHopwoodCRH

bh = BoweHopwoodCRH(Window(window_size=63, num_windows=8))
params = bh.setup(rng)
digest = bh.evaluate(params, bytes([1, 2, 3]))   # an integer: the x coordinate
```

The input is read in 3-bit chunks, each selecting a signed multiple of a generator; it may
hold at most `window_size * num_windows * 3` bits. `max_window_size()` gives the largest
`window_size` that `setup` accepts for the curve; a larger one raises `ValueError`.
`BoweHopwoodTwoToOneCRH` lays two equal-length inputs side by side in a buffer of
`window_size * num_windows` bits; its `compress` hashes two earlier outputs.

## SHA-256

```python
from cryptoprims.sha256 import Sha256CRH, Sha256Hasher, Sha256TwoToOneCRH, sha256_digest

sha256_digest(b"abc")

hasher = Sha256Hasher()
hasher.update(b"ab")
hasher.update(b"c")
hasher.finalize()          # leaves the hasher usable; copy() clones it

Sha256CRH().evaluate(None, b"abc")
Sha256TwoToOneCRH().evaluate(None, b"left", b"right")   # SHA-256 of the concatenation
```

The SHA-256 schemes take no parameters; `setup` returns `None`.

## Commitments

```python
from cryptoprims.commitment import Blake2sCommitment, PedersenCommCompressor, PedersenCommitment

blake = Blake2sCommitment()
digest = blake.commit(blake.setup(rng), b"\x01" * 32, bytes(32))

pedersen = PedersenCommitment(Window(window_size=4, num_windows=9))
params = pedersen.setup(rng)
r = pedersen.random_randomness(rng)
commitment = pedersen.commit(params, b"\x01" * 4, r)
```

`Blake2sCommitment` hashes the message followed by exactly 32 bytes of randomness with
BLAKE2s-256; other lengths raise `IncorrectInputLengthError`. `PedersenCommitment` adds
`r` times a blinding generator to the Pedersen hash of the message; `Randomness` wraps the
scalar `r`. `PedersenCommCompressor` maps the commitment point to its x coordinate.

## Errors

`cryptoprims.errors` defines `CryptoError` and its subclasses
`IncorrectInputLengthError`, `NotPrimeOrderError` and `SerializationError`, along with
`to_uncompressed_bytes`, which serializes bytes, 32-byte field elements, length-prefixed
lists and objects with a `to_bytes()` method. Mismatched parameters, unequal two-to-one
inputs and off-curve points raise `ValueError` instead.

## What is not included

`AsymmetricEncryptionScheme` is an interface only: the package ships no encryption scheme
that implements it. There is no Poseidon hash, no Merkle tree, no constraint-system
(circuit) form of any scheme, and no command-line tool.