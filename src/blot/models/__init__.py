"""Blot domain models.

Re-exports key models for convenient access.
"""

from blot.models.config import HashConfig, SequenceMode
from blot.models.seal import Seal, format_seal, parse_seal
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

__all__ = [
    # Values
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
    # Config
    "HashConfig",
    "SequenceMode",
    # Seals
    "Seal",
    "format_seal",
    "parse_seal",
]
