"""High-level entry points.

Each function resolves one ``HashConfig`` up front and uses it both for
conversion (sequence mode, seal algorithm) and for hashing, so the two
stages never disagree.
"""

from __future__ import annotations

from typing import Any

from blot.convert import from_json, to_value
from blot.engine.hashing import hash_value, redact
from blot.engine.multihash import Multihash
from blot.models.config import HashConfig, resolve_config
from blot.models.seal import Seal


def hash_object(obj: Any, config: HashConfig | None = None, **overrides: Any) -> Multihash:
    """Hash a plain Python object (or an already built Value).

    Example::

        >>> hash_object(["foo", "bar"]).hex()
        '122032ae896c413cfdc79eec68be9139c86ded8b279238467c216cf2bec4d5f1e4a2'
    """
    config = resolve_config(config, **overrides)
    config.digest_algorithm()  # unknown algorithms fail before conversion
    return hash_value(to_value(obj, config), config)


def hash_json(text: str | bytes, config: HashConfig | None = None, **overrides: Any) -> Multihash:
    """Parse JSON text and hash the resulting value."""
    config = resolve_config(config, **overrides)
    config.digest_algorithm()  # unknown algorithms fail before conversion
    return hash_value(from_json(text, config), config)


def seal_object(obj: Any, config: HashConfig | None = None, **overrides: Any) -> Seal:
    """Hash ``obj`` and return the seal that can stand in for it."""
    config = resolve_config(config, **overrides)
    redacted = redact(to_value(obj, config), config)
    return Seal(Multihash.from_digest(config.digest_algorithm(), redacted.digest))
