"""Value model for Blot.

A closed tagged union of frozen dataclasses, one per objecthash type. Values
carry data only; hashing lives in ``blot.engine.hashing``. Composite variants
hold tuples so a tree is immutable once built.

Build trees directly::

    from blot.models.value import Dict, List, Unicode, Integer

    Dict.of({"foo": List((Unicode("bar"), Integer(1)))})

or let ``blot.convert.to_value`` do it from plain Python objects.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import ClassVar, Union

from blot.exceptions import InvalidTimestampError


class Tag(str, enum.Enum):
    """Objecthash type tags, one ASCII byte each."""

    NULL = "n"
    BOOL = "b"
    INTEGER = "i"
    FLOAT = "f"
    UNICODE = "u"
    RAW = "r"
    TIMESTAMP = "t"
    LIST = "l"
    SET = "s"
    DICT = "d"

    def to_bytes(self) -> bytes:
        return self.value.encode("ascii")


TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


@dataclass(frozen=True)
class Null:
    tag: ClassVar[Tag] = Tag.NULL


@dataclass(frozen=True)
class Bool:
    tag: ClassVar[Tag] = Tag.BOOL

    value: bool


@dataclass(frozen=True)
class Integer:
    """Arbitrary-precision signed integer."""

    tag: ClassVar[Tag] = Tag.INTEGER

    value: int


@dataclass(frozen=True)
class Float:
    """IEEE-754 double. NaN and infinities are rejected at hash time."""

    tag: ClassVar[Tag] = Tag.FLOAT

    value: float


@dataclass(frozen=True)
class Unicode:
    tag: ClassVar[Tag] = Tag.UNICODE

    value: str


@dataclass(frozen=True)
class Raw:
    """Opaque bytes, e.g. an embedded digest."""

    tag: ClassVar[Tag] = Tag.RAW

    value: bytes


@dataclass(frozen=True)
class Timestamp:
    """A UTC instant with second precision.

    Aware datetimes in any zone are converted to UTC and sub-second
    precision is dropped. Naive datetimes are ambiguous and rejected.
    """

    tag: ClassVar[Tag] = Tag.TIMESTAMP

    value: datetime

    def __post_init__(self) -> None:
        if self.value.tzinfo is None or self.value.utcoffset() is None:
            raise InvalidTimestampError(self.value)
        utc = self.value.astimezone(timezone.utc).replace(microsecond=0)
        object.__setattr__(self, "value", utc)

    @classmethod
    def parse(cls, text: str) -> Timestamp:
        """Parse ``YYYY-MM-DDTHH:MM:SSZ`` text."""
        try:
            parsed = datetime.strptime(text, TIMESTAMP_FORMAT)
        except ValueError:
            raise InvalidTimestampError(text) from None
        return cls(parsed.replace(tzinfo=timezone.utc))

    def isoformat(self) -> str:
        """Canonical text form, e.g. ``2018-10-13T15:50:00Z``.

        Every field is zero-padded, so year 999 reads ``0999``.
        """
        v = self.value
        return (
            f"{v.year:04d}-{v.month:02d}-{v.day:02d}"
            f"T{v.hour:02d}:{v.minute:02d}:{v.second:02d}Z"
        )


@dataclass(frozen=True)
class List:
    """Ordered sequence; element order is part of the hash."""

    tag: ClassVar[Tag] = Tag.LIST

    items: tuple[Value, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True)
class Set:
    """Unordered collection. Duplicates are kept here; the hashing
    policy decides whether they collapse."""

    tag: ClassVar[Tag] = Tag.SET

    items: tuple[Value, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True)
class Dict:
    """String-keyed mapping, stored as entry pairs.

    Pairs rather than a mapping so a producer that supplies the same key
    twice (e.g. a JSON object with repeated members) can be detected by
    the hashing policy instead of silently keeping one.
    """

    tag: ClassVar[Tag] = Tag.DICT

    entries: tuple[tuple[str, Value], ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.entries, tuple):
            object.__setattr__(
                self, "entries", tuple((k, v) for k, v in self.entries)
            )

    @classmethod
    def of(cls, mapping: Mapping[str, Value]) -> Dict:
        return cls(tuple(mapping.items()))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, Value]]) -> Dict:
        return cls(tuple(pairs))

    def keys(self) -> list[str]:
        return [k for k, _ in self.entries]


@dataclass(frozen=True)
class Redacted:
    """Stand-in for an elided subtree.

    ``digest`` is the raw digest of the original subtree and is used verbatim
    by the parent. ``algorithm`` names the algorithm that produced it when
    known, so a mismatch with the active algorithm can be reported.
    """

    digest: bytes
    algorithm: str | None = None

    def __repr__(self) -> str:
        return f"Redacted(digest={self.digest.hex()!r}, algorithm={self.algorithm!r})"


Value = Union[
    Null, Bool, Integer, Float, Unicode, Raw, Timestamp, List, Set, Dict, Redacted
]

SCALAR_TYPES = (Null, Bool, Integer, Float, Unicode, Raw, Timestamp)
COMPOSITE_TYPES = (List, Set, Dict)
VALUE_TYPES = SCALAR_TYPES + COMPOSITE_TYPES + (Redacted,)


def is_value(obj: object) -> bool:
    return isinstance(obj, VALUE_TYPES)

