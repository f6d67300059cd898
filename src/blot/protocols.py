"""Protocol definitions for Blot.

Defines the pluggable digest primitive interface. Any object with a name,
a multihash code, a fixed output length and the two hashing methods below
can back a hash request; the built-in ones wrap hashlib.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Hasher(Protocol):
    """Incremental hashing state (the hashlib object interface)."""

    def update(self, data: bytes, /) -> None:
        ...

    def digest(self) -> bytes:
        ...


@runtime_checkable
class DigestPrimitive(Protocol):
    """Protocol for interchangeable digest functions.

    Implementations must be pure: ``hasher()`` returns fresh state on every
    call, so one primitive can serve concurrent requests.
    """

    name: str
    code: int
    length: int

    def hasher(self) -> Hasher:
        """Return a new, empty incremental hasher."""
        ...

    def digest(self, data: bytes) -> bytes:
        """Return the fixed-length digest of ``data``."""
        ...
