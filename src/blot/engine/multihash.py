"""Multihash envelope: ``uvar(code) || uvar(length) || digest``.

The envelope makes a digest self-describing, so a consumer can re-derive or
verify it without knowing out of band which algorithm produced it.
"""

from __future__ import annotations

from dataclasses import dataclass

from blot.engine import uvar
from blot.engine.digest import get_algorithm, get_algorithm_by_code
from blot.exceptions import (
    LengthMismatchError,
    MultihashError,
    TruncatedEnvelopeError,
)
from blot.protocols import DigestPrimitive


@dataclass(frozen=True)
class Multihash:
    """A digest tagged with the algorithm that produced it.

    Construct through ``from_digest`` or ``decode`` to get the length
    invariants checked; the bare constructor trusts its inputs.
    """

    code: int
    length: int
    digest: bytes

    @classmethod
    def from_digest(cls, algorithm: DigestPrimitive, digest: bytes) -> Multihash:
        """Wrap a raw digest produced by ``algorithm``.

        Raises:
            LengthMismatchError: If ``digest`` is not ``algorithm.length`` bytes.
        """
        if len(digest) != algorithm.length:
            raise LengthMismatchError(algorithm.length, len(digest))
        return cls(code=algorithm.code, length=algorithm.length, digest=bytes(digest))

    @property
    def algorithm(self) -> DigestPrimitive:
        return get_algorithm_by_code(self.code)

    @property
    def name(self) -> str:
        return self.algorithm.name

    def encode(self) -> bytes:
        return encode(self.code, self.length, self.digest)

    def hex(self) -> str:
        """Lowercase hex of the full envelope, e.g. ``1220a6a6...``."""
        return self.encode().hex()

    def __str__(self) -> str:
        return self.hex()


def encode(code: int, length: int, digest: bytes) -> bytes:
    """Encode a ``(code, length, digest)`` triple into envelope bytes."""
    return uvar.encode(code) + uvar.encode(length) + bytes(digest)


def decode(buf: bytes) -> Multihash:
    """Decode envelope bytes into a Multihash.

    Raises:
        TruncatedEnvelopeError: Buffer ends inside a varint or the digest.
        UnknownCodecError: Codec is not registered.
        LengthMismatchError: Declared length differs from the codec's output
            size, or extra bytes follow the digest.
    """
    code, rest = uvar.decode(buf)
    algorithm = get_algorithm_by_code(code)
    length, digest = uvar.decode(rest)

    if length != algorithm.length:
        raise LengthMismatchError(algorithm.length, length)
    if len(digest) < length:
        raise TruncatedEnvelopeError(
            f"declared {length} digest bytes, only {len(digest)} present"
        )
    if len(digest) > length:
        raise LengthMismatchError(length, len(digest))

    return Multihash(code=code, length=length, digest=digest)


def from_hex(text: str) -> Multihash:
    """Decode a hex-encoded envelope.

    Raises:
        MultihashError: As ``decode``, or if ``text`` is not hex.
    """
    try:
        buf = bytes.fromhex(text.strip())
    except ValueError:
        raise MultihashError(f"Not a hex string: {text!r}") from None
    return decode(buf)


def for_algorithm(name: str, digest: bytes) -> Multihash:
    """Wrap ``digest`` under the algorithm registered as ``name``."""
    return Multihash.from_digest(get_algorithm(name), digest)
