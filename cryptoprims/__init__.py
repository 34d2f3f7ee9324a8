"""Pedersen, Bowe-Hopwood and SHA-256 hashes, commitments, scheme interfaces and twisted Edwards curves."""

__version__ = "0.1.0"
__all__ = [
    "errors",
    "schemes",
    "curve",
    "sha256",
    "pedersen",
    "injective_map",
    "commitment",
    "bowe_hopwood",
]