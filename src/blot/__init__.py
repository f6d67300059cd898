"""Blot: objecthash-style content hashing with Multihash envelopes.

Two semantically equal structures hash identically regardless of key order,
number formatting or whitespace, and the digest records which algorithm made it.
"""

from blot._version import __version__

# Entry points
from blot.api import hash_json, hash_object, seal_object
from blot.convert import from_json, to_value
from blot.engine.hashing import blot, hash_value, redact

# Value model
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

# Configuration
from blot.models.config import HashConfig, SequenceMode

# Envelope, seals and algorithms
from blot.engine.digest import (
    Algorithm,
    available_algorithms,
    get_algorithm,
    register_algorithm,
)
from blot.engine.multihash import Multihash
from blot.models.seal import Seal, format_seal, parse_seal
from blot.protocols import DigestPrimitive

# Exceptions
from blot.exceptions import (
    BlotError,
    DuplicateKeyError,
    LengthMismatchError,
    MalformedRedactionError,
    MultihashError,
    NonCanonicalNumericError,
    NonMinimalVarintError,
    TruncatedEnvelopeError,
    UnknownCodecError,
    UnsupportedAlgorithmError,
)

__all__ = [
    "__version__",
    # Entry points
    "blot",
    "hash_value",
    "hash_object",
    "hash_json",
    "redact",
    "seal_object",
    "to_value",
    "from_json",
    # Value model
    "Value",
    "Tag",
    "Null",
    "Bool",
    "Integer",
    "Float",
    "Unicode",
    "Raw",
    "Timestamp",
    "List",
    "Set",
    "Dict",
    "Redacted",
    # Configuration
    "HashConfig",
    "SequenceMode",
    # Envelope, seals and algorithms
    "Algorithm",
    "DigestPrimitive",
    "Multihash",
    "Seal",
    "available_algorithms",
    "format_seal",
    "get_algorithm",
    "parse_seal",
    "register_algorithm",
    # Exceptions
    "BlotError",
    "DuplicateKeyError",
    "LengthMismatchError",
    "MalformedRedactionError",
    "MultihashError",
    "NonCanonicalNumericError",
    "NonMinimalVarintError",
    "TruncatedEnvelopeError",
    "UnknownCodecError",
    "UnsupportedAlgorithmError",
]
