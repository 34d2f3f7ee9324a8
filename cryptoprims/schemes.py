"""Abstract interfaces for hashes, commitments and public-key encryption."""

from __future__ import annotations

from abc import ABC, abstractmethod
from random import Random
from typing import Any, Tuple


class CRHScheme(ABC):
    """A collision-resistant hash function of a single input."""

    @abstractmethod
    def setup(self, rng: Random) -> Any:
        """Sample public parameters."""

    @abstractmethod
    def evaluate(self, parameters: Any, input: Any) -> Any:
        """Hash ``input`` under ``parameters``."""


class TwoToOneCRHScheme(ABC):
    """A hash of two inputs, used for the inner nodes of a Merkle tree."""

    @abstractmethod
    def setup(self, rng: Random) -> Any:
        """Sample public parameters."""

    @abstractmethod
    def evaluate(self, parameters: Any, left_input: Any, right_input: Any) -> Any:
        """Hash two raw inputs together."""

    @abstractmethod
    def compress(self, parameters: Any, left_input: Any, right_input: Any) -> Any:
        """Hash two outputs of this scheme together."""


class CommitmentScheme(ABC):
    """A commitment to a byte string under some randomness."""

    @abstractmethod
    def setup(self, rng: Random) -> Any:
        """Sample public parameters."""

    @abstractmethod
    def commit(self, parameters: Any, input: bytes, randomness: Any) -> Any:
        """Commit to ``input`` using ``randomness``."""


class AsymmetricEncryptionScheme(ABC):
    """A public-key encryption scheme."""

    @abstractmethod
    def setup(self, rng: Random) -> Any:
        """Sample public parameters."""

    @abstractmethod
    def keygen(self, parameters: Any, rng: Random) -> Tuple[Any, Any]:
        """Return a ``(public_key, secret_key)`` pair."""

    @abstractmethod
    def encrypt(
        self, parameters: Any, public_key: Any, message: Any, randomness: Any
    ) -> Any:
        """Encrypt ``message`` to ``public_key``."""

    @abstractmethod
    def decrypt(self, parameters: Any, secret_key: Any, ciphertext: Any) -> Any:
        """Recover the plaintext of ``ciphertext``."""