"""Blot exception hierarchy.

All Blot-specific exceptions inherit from BlotError. Every failure is raised
synchronously to the caller; nothing is retried or substituted.
"""

from __future__ import annotations


class BlotError(Exception):
    """Base exception for all Blot errors."""


class UnsupportedAlgorithmError(BlotError):
    """Raised when a digest algorithm name is not in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unsupported digest algorithm: {name}")


class AlgorithmConflictError(BlotError):
    """Raised when registering an algorithm whose name or code is taken.

    The registry is additive: existing identifiers never change meaning.
    """

    def __init__(self, name: str, code: int) -> None:
        self.name = name
        self.code = code
        super().__init__(
            f"Algorithm already registered: {name} (code {code:#x})"
        )


class MalformedRedactionError(BlotError):
    """Raised when a Redacted node does not fit the active algorithm."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Malformed redaction: {message}")


class NonCanonicalNumericError(BlotError):
    """Raised for numbers with no canonical form (NaN, infinities)."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Number has no canonical representation: {value!r}")


class DuplicateKeyError(BlotError):
    """Raised when a Dict carries the same key more than once."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Duplicate dict key: {key!r}")


class NestingTooDeepError(BlotError):
    """Raised when a value nests deeper than max_depth.

    With no max_depth configured, raised when nesting exceeds the
    interpreter recursion limit instead.
    """

    def __init__(self, max_depth: int | None) -> None:
        self.max_depth = max_depth
        if max_depth is None:
            super().__init__("Value nesting exceeds the interpreter recursion limit")
        else:
            super().__init__(f"Value nesting exceeds max_depth={max_depth}")


class InvalidTimestampError(BlotError):
    """Raised for naive datetimes or unparsable ISO-8601 text."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid UTC timestamp: {value!r}")


class InvalidValueError(BlotError):
    """Raised when a Python object has no Value representation."""

    def __init__(self, obj: object) -> None:
        self.obj = obj
        super().__init__(
            f"Cannot convert {type(obj).__name__} to a blot value: {obj!r}"
        )


class SealError(BlotError):
    """Raised when text is not a valid redaction marker."""


class MultihashError(BlotError):
    """Base class for Multihash envelope decoding failures."""


class TruncatedEnvelopeError(MultihashError):
    """Raised when the buffer ends before the envelope is complete."""

    def __init__(self, message: str = "buffer ended before envelope was complete") -> None:
        super().__init__(f"Truncated multihash: {message}")


class UnknownCodecError(MultihashError):
    """Raised when the envelope names a codec not in the registry."""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"Unknown multihash codec: {code:#x}")


class LengthMismatchError(MultihashError):
    """Raised when the declared digest length is inconsistent."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Multihash length mismatch: expected {expected} bytes, got {actual}"
        )


class VarintOverflowError(MultihashError):
    """Raised when an unsigned varint does not fit in 64 bits."""

    def __init__(self) -> None:
        super().__init__("Unsigned varint overflows 64 bits")


class NonMinimalVarintError(MultihashError):
    """Raised when a varint carries redundant trailing zero groups."""

    def __init__(self, encoded: bytes) -> None:
        self.encoded = encoded
        super().__init__(f"Unsigned varint is not minimally encoded: {encoded.hex()}")
