"""Canonical objecthash-style hashing for Blot values.

Every node hashes to ``H(tag || content)``. Scalars feed their canonical
bytes; composites feed the digests of their children, so sub-structure
hashes compose into the parent. Sets and dicts sort child digests
byte-wise, which makes them independent of input order. A Redacted node
contributes its stored digest verbatim without recursion.

All functions are pure: each node gets a fresh hasher from the primitive
and the value tree is only read.
"""

from __future__ import annotations

import logging
import math
from typing import Any

from blot.engine.multihash import Multihash
from blot.exceptions import (
    DuplicateKeyError,
    MalformedRedactionError,
    NestingTooDeepError,
    NonCanonicalNumericError,
)
from blot.models.config import HashConfig, resolve_config
from blot.models.value import (
    Bool,
    Dict,
    Float,
    Integer,
    List,
    Null,
    Raw,
    Redacted,
    Set,
    Tag,
    Timestamp,
    Unicode,
    Value,
)
from blot.protocols import DigestPrimitive

logger = logging.getLogger(__name__)


def float_normalize(f: float) -> str:
    """Return the canonical text of a finite float.

    Format is ``<sign><exponent>:<mantissa bits>`` where the value equals
    ``mantissa * 2**exponent`` with the mantissa in ``(0.5, 1]``. Both
    zeros map to ``+0:``.

    Raises:
        NonCanonicalNumericError: For NaN or infinite input.
    """
    if math.isnan(f) or math.isinf(f):
        raise NonCanonicalNumericError(f)
    if f == 0.0:
        return "+0:"

    parts = []
    if f < 0:
        parts.append("-")
        f = -f
    else:
        parts.append("+")

    e = 0
    while f > 1:
        f /= 2
        e += 1
    while f <= 0.5:
        f *= 2
        e -= 1
    parts.append(f"{e}:")

    # Halving/doubling is exact in binary, so this terminates within
    # the 53 bits of a double's significand.
    while f != 0:
        if f >= 1:
            parts.append("1")
            f -= 1
        else:
            parts.append("0")
        f *= 2

    return "".join(parts)


def primitive(algorithm: DigestPrimitive, tag: Tag, data: bytes) -> bytes:
    """Digest a scalar: ``H(tag || data)``."""
    h = algorithm.hasher()
    h.update(tag.to_bytes())
    h.update(data)
    return h.digest()


def collection(algorithm: DigestPrimitive, tag: Tag, chunks: list[bytes]) -> bytes:
    """Digest a composite: ``H(tag || chunk_1 || chunk_2 || ...)``."""
    h = algorithm.hasher()
    h.update(tag.to_bytes())
    for chunk in chunks:
        h.update(chunk)
    return h.digest()


class _Canonicalizer:
    """One hash request: a resolved algorithm plus the policy flags."""

    def __init__(self, algorithm: DigestPrimitive, config: HashConfig) -> None:
        self.algorithm = algorithm
        self.config = config

    def digest(self, value: Value, depth: int = 0) -> bytes:
        max_depth = self.config.max_depth
        if max_depth is not None and depth > max_depth:
            raise NestingTooDeepError(max_depth)

        alg = self.algorithm

        if isinstance(value, Null):
            return primitive(alg, Tag.NULL, b"")
        if isinstance(value, Bool):
            return primitive(alg, Tag.BOOL, b"1" if value.value else b"0")
        if isinstance(value, Integer):
            if self.config.common_json:
                return self._float(self._int_as_float(value.value))
            return primitive(alg, Tag.INTEGER, str(value.value).encode("ascii"))
        if isinstance(value, Float):
            return self._float(value.value)
        if isinstance(value, Unicode):
            return primitive(alg, Tag.UNICODE, value.value.encode("utf-8"))
        if isinstance(value, Raw):
            return primitive(alg, Tag.RAW, bytes(value.value))
        if isinstance(value, Timestamp):
            return primitive(alg, Tag.TIMESTAMP, value.isoformat().encode("ascii"))
        if isinstance(value, Redacted):
            return self._redacted(value)
        if isinstance(value, List):
            return collection(
                alg, Tag.LIST, [self.digest(item, depth + 1) for item in value.items]
            )
        if isinstance(value, Set):
            return self._set(value, depth)
        if isinstance(value, Dict):
            return self._dict(value, depth)

        raise TypeError(f"Not a blot value: {type(value).__name__}")

    def _float(self, f: float) -> bytes:
        return primitive(self.algorithm, Tag.FLOAT, float_normalize(f).encode("ascii"))

    @staticmethod
    def _int_as_float(n: int) -> float:
        try:
            return float(n)
        except OverflowError:
            raise NonCanonicalNumericError(n) from None

    def _redacted(self, value: Redacted) -> bytes:
        alg = self.algorithm
        if value.algorithm is not None and value.algorithm != alg.name:
            raise MalformedRedactionError(
                f"sealed with {value.algorithm}, hashing with {alg.name}"
            )
        if len(value.digest) != alg.length:
            raise MalformedRedactionError(
                f"{alg.name} digests are {alg.length} bytes, "
                f"redaction carries {len(value.digest)}"
            )
        return bytes(value.digest)

    def _set(self, value: Set, depth: int) -> bytes:
        digests = sorted(self.digest(item, depth + 1) for item in value.items)
        if self.config.deduplicate_sets:
            digests = [d for i, d in enumerate(digests) if i == 0 or d != digests[i - 1]]
        return collection(self.algorithm, Tag.SET, digests)

    def _dict(self, value: Dict, depth: int) -> bytes:
        entries: dict[str, Value] = {}
        for key, item in value.entries:
            if key in entries and self.config.reject_duplicate_keys:
                raise DuplicateKeyError(key)
            entries[key] = item

        key_tag = Tag.UNICODE
        pairs = sorted(
            primitive(self.algorithm, key_tag, key.encode("utf-8"))
            + self.digest(item, depth + 1)
            for key, item in entries.items()
        )
        return collection(self.algorithm, Tag.DICT, pairs)


def blot(value: Value, config: HashConfig | None = None, **overrides: Any) -> bytes:
    """Return the raw canonical digest of ``value``.

    Args:
        value: Root of the value tree.
        config: Hash configuration; the baseline when omitted.
        **overrides: HashConfig fields to override for this call.

    Raises:
        UnsupportedAlgorithmError: Before any hashing, for unknown algorithms.
        BlotError: Any node that cannot be canonicalized aborts the request.
    """
    config = resolve_config(config, **overrides)
    algorithm = config.digest_algorithm()
    logger.debug(
        "Hashing %s with %s (common_json=%s, dedup=%s)",
        type(value).__name__, algorithm.name,
        config.common_json, config.deduplicate_sets,
    )
    try:
        return _Canonicalizer(algorithm, config).digest(value)
    except RecursionError:
        raise NestingTooDeepError(config.max_depth) from None


def hash_value(value: Value, config: HashConfig | None = None, **overrides: Any) -> Multihash:
    """Hash ``value`` and wrap the digest in a Multihash envelope."""
    config = resolve_config(config, **overrides)
    algorithm = config.digest_algorithm()
    return Multihash.from_digest(algorithm, blot(value, config))


def redact(value: Value, config: HashConfig | None = None, **overrides: Any) -> Redacted:
    """Replace ``value`` with a Redacted node carrying its digest.

    The parent of the returned node hashes exactly as it would with the
    original subtree in place.
    """
    config = resolve_config(config, **overrides)
    return Redacted(digest=blot(value, config), algorithm=config.algorithm)
