"""Conversion from Python objects and JSON text to Blot values.

This is the boundary between producers and the hashing core. The sequence
policy is applied here: ambiguous sequences (Python lists and tuples, JSON
arrays) become ``List`` or ``Set`` according to ``HashConfig.sequence_mode``,
at every depth. Values that are already typed pass through unchanged.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal
from typing import Any

from blot.exceptions import (
    InvalidTimestampError,
    InvalidValueError,
    NestingTooDeepError,
    SealError,
)
from blot.models.config import HashConfig, SequenceMode, resolve_config
from blot.models.seal import Seal, is_seal, parse_seal
from blot.models.value import (
    Bool,
    Dict,
    Float,
    Integer,
    List,
    Null,
    Raw,
    Set,
    Timestamp,
    Unicode,
    Value,
    is_value,
)

logger = logging.getLogger(__name__)

_RAW_RE = re.compile(r"0x((?:[0-9a-fA-F]{2})*)")
_TIMESTAMP_RE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z")


def to_value(obj: Any, config: HashConfig | None = None, **overrides: Any) -> Value:
    """Convert a plain Python object into a Value tree.

    Mapping:
        None -> Null, bool -> Bool, int -> Integer, float/Decimal -> Float,
        str -> Unicode, bytes -> Raw, aware datetime -> Timestamp,
        list/tuple -> List or Set (sequence mode), set/frozenset -> Set,
        Mapping with str keys -> Dict, Seal -> Redacted, Value -> itself.

    Raises:
        InvalidValueError: For objects with no mapping, including
            non-string dict keys.
        InvalidTimestampError: For naive datetimes.
        NestingTooDeepError: If ``obj`` nests deeper than ``max_depth``.
    """
    config = resolve_config(config, **overrides)
    try:
        return _convert(obj, config)
    except RecursionError:
        raise NestingTooDeepError(config.max_depth) from None


def _check_depth(config: HashConfig, depth: int) -> None:
    if config.max_depth is not None and depth > config.max_depth:
        raise NestingTooDeepError(config.max_depth)


def _convert(obj: Any, config: HashConfig, depth: int = 0) -> Value:
    _check_depth(config, depth)
    if is_value(obj):
        return obj
    if obj is None:
        return Null()
    # bool before int: bool is an int subclass
    if isinstance(obj, bool):
        return Bool(obj)
    if isinstance(obj, int):
        return Integer(obj)
    if isinstance(obj, float):
        return Float(obj)
    if isinstance(obj, Decimal):
        return Float(float(obj))
    if isinstance(obj, str):
        return Unicode(obj)
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return Raw(bytes(obj))
    if isinstance(obj, datetime):
        return Timestamp(obj)
    if isinstance(obj, Seal):
        return obj.to_value()
    if isinstance(obj, Mapping):
        return _convert_pairs(obj.items(), config, depth)
    if isinstance(obj, (set, frozenset)):
        return Set(tuple(_convert(item, config, depth + 1) for item in obj))
    if isinstance(obj, (list, tuple)):
        items = tuple(_convert(item, config, depth + 1) for item in obj)
        return Set(items) if config.sequence_mode == SequenceMode.SET else List(items)
    raise InvalidValueError(obj)


def _convert_pairs(pairs: Any, config: HashConfig, depth: int) -> Dict:
    entries = []
    for key, item in pairs:
        if not isinstance(key, str):
            raise InvalidValueError(key)
        entries.append((key, _convert(item, config, depth + 1)))
    return Dict(tuple(entries))


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------


class _JsonObject(list):
    """Key/value pairs of a JSON object, duplicates preserved."""


def classify_string(text: str, algorithm: str) -> Value:
    """Type a JSON string the way Blot notation reads it.

    In order: a redaction marker valid for ``algorithm`` -> Redacted,
    ``0x``-prefixed hex -> Raw, ``YYYY-MM-DDTHH:MM:SSZ`` -> Timestamp,
    anything else -> Unicode.
    """
    if is_seal(text):
        try:
            return parse_seal(text, algorithm).to_value()
        except SealError as e:
            logger.debug("String kept as text, not a %s seal: %s", algorithm, e)

    match = _RAW_RE.fullmatch(text)
    if match:
        return Raw(bytes.fromhex(match.group(1)))

    if _TIMESTAMP_RE.fullmatch(text):
        try:
            return Timestamp.parse(text)
        except InvalidTimestampError:
            pass  # shaped like a timestamp but not a real date; keep as text

    return Unicode(text)


def _from_json_obj(obj: Any, config: HashConfig, classify: bool, depth: int = 0) -> Value:
    _check_depth(config, depth)
    if isinstance(obj, _JsonObject):
        return Dict(tuple(
            (key, _from_json_obj(item, config, classify, depth + 1)) for key, item in obj
        ))
    if isinstance(obj, list):
        items = tuple(_from_json_obj(item, config, classify, depth + 1) for item in obj)
        return Set(items) if config.sequence_mode == SequenceMode.SET else List(items)
    if isinstance(obj, str) and classify:
        return classify_string(obj, config.algorithm)
    return _convert(obj, config, depth)


def from_json(
    text: str | bytes,
    config: HashConfig | None = None,
    *,
    classify_strings: bool = True,
    **overrides: Any,
) -> Value:
    """Parse JSON text into a Value tree.

    Duplicate object members are preserved so the Dict key policy can act
    on them. With ``classify_strings`` (the default) string members are
    typed by ``classify_string``; otherwise every string is Unicode.

    Raises:
        json.JSONDecodeError: For invalid JSON.
        NestingTooDeepError: If the document nests deeper than ``max_depth``
            or than the JSON decoder can follow.
    """
    config = resolve_config(config, **overrides)
    try:
        parsed = json.loads(text, object_pairs_hook=_JsonObject)
        value = _from_json_obj(parsed, config, classify_strings)
    except RecursionError:
        raise NestingTooDeepError(config.max_depth) from None
    logger.debug(
        "Parsed JSON into %s (sequence_mode=%s)",
        type(value).__name__, config.sequence_mode.value,
    )
    return value
