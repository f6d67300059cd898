"""Digest primitives and the algorithm registry.

Each registered algorithm pairs a textual name with its multihash code and
fixed output length. Lookups by name or by code resolve to the same
``Algorithm`` object. The registry only grows: an existing name or code can
never be rebound.
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass
from typing import Any, Callable

from blot.exceptions import (
    AlgorithmConflictError,
    UnknownCodecError,
    UnsupportedAlgorithmError,
)
from blot.protocols import DigestPrimitive, Hasher

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = "sha2-256"


@dataclass(frozen=True)
class Algorithm:
    """A hashlib-backed digest primitive.

    Attributes:
        name: Registry key, e.g. ``"sha3-256"``.
        code: Multihash codec identifier.
        length: Digest size in bytes.
        factory: Zero-argument callable returning a fresh hashlib object.
    """

    name: str
    code: int
    length: int
    factory: Callable[[], Any]

    def hasher(self) -> Hasher:
        return self.factory()

    def digest(self, data: bytes) -> bytes:
        h = self.factory()
        h.update(data)
        return h.digest()


BUILTIN_ALGORITHMS: tuple[Algorithm, ...] = (
    Algorithm("sha1", 0x11, 20, hashlib.sha1),
    Algorithm("sha2-256", 0x12, 32, hashlib.sha256),
    Algorithm("sha2-512", 0x13, 64, hashlib.sha512),
    Algorithm("sha3-512", 0x14, 64, hashlib.sha3_512),
    Algorithm("sha3-384", 0x15, 48, hashlib.sha3_384),
    Algorithm("sha3-256", 0x16, 32, hashlib.sha3_256),
    Algorithm("sha3-224", 0x17, 28, hashlib.sha3_224),
    Algorithm("blake2b-512", 0xB240, 64, hashlib.blake2b),
    Algorithm("blake2s-256", 0xB260, 32, hashlib.blake2s),
)

_BY_NAME: dict[str, DigestPrimitive] = {alg.name: alg for alg in BUILTIN_ALGORITHMS}
_BY_CODE: dict[int, DigestPrimitive] = {alg.code: alg for alg in BUILTIN_ALGORITHMS}


def get_algorithm(name: str) -> DigestPrimitive:
    """Resolve a digest primitive by name.

    Raises:
        UnsupportedAlgorithmError: If no algorithm is registered as ``name``.
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        raise UnsupportedAlgorithmError(name) from None


def get_algorithm_by_code(code: int) -> DigestPrimitive:
    """Resolve a digest primitive by its multihash code.

    Raises:
        UnknownCodecError: If no algorithm is registered under ``code``.
    """
    try:
        return _BY_CODE[code]
    except KeyError:
        raise UnknownCodecError(code) from None


def available_algorithms() -> list[str]:
    """Return the registered algorithm names in registration order."""
    return list(_BY_NAME)


def register_algorithm(algorithm: DigestPrimitive) -> None:
    """Add a digest primitive to the registry.

    Raises:
        AlgorithmConflictError: If the name or the code is already registered.
    """
    if algorithm.name in _BY_NAME or algorithm.code in _BY_CODE:
        raise AlgorithmConflictError(algorithm.name, algorithm.code)
    _BY_NAME[algorithm.name] = algorithm
    _BY_CODE[algorithm.code] = algorithm
    logger.debug(
        "Registered digest algorithm %s (code=%#x, length=%d)",
        algorithm.name, algorithm.code, algorithm.length,
    )
