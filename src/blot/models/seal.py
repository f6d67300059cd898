"""Textual redaction markers.

A seal is a Multihash written as text with a redaction prefix, so a redacted
subtree can travel inside JSON as a plain string. Two prefixes are accepted:

* ``**REDACTED**`` -- the classic objecthash marker. It may be followed by a
  full multihash or by a bare digest.
* ``77`` -- the seal mark byte ``0x77`` in hex, always followed by a full
  multihash.
"""

from __future__ import annotations

from dataclasses import dataclass

from blot.engine import multihash
from blot.engine.digest import get_algorithm
from blot.exceptions import MultihashError, SealError
from blot.models.value import Redacted

CLASSIC_PREFIX = "**REDACTED**"
SEAL_MARK = 0x77
SEAL_PREFIX = f"{SEAL_MARK:02x}"


@dataclass(frozen=True)
class Seal:
    """A redaction marker resolved to a Multihash."""

    multihash: multihash.Multihash

    @property
    def digest(self) -> bytes:
        return self.multihash.digest

    def to_value(self) -> Redacted:
        return Redacted(digest=self.multihash.digest, algorithm=self.multihash.name)

    def format(self, classic: bool = False) -> str:
        return format_seal(self.multihash, classic=classic)

    def __str__(self) -> str:
        return self.format()


def format_seal(mh: multihash.Multihash, classic: bool = False) -> str:
    """Render ``mh`` as a redaction marker string."""
    prefix = CLASSIC_PREFIX if classic else SEAL_PREFIX
    return prefix + mh.hex()


def is_seal(text: str) -> bool:
    """Whether ``text`` carries one of the redaction prefixes."""
    return text.startswith(CLASSIC_PREFIX) or text.startswith(SEAL_PREFIX)


def parse_seal(text: str, algorithm: str) -> Seal:
    """Parse a redaction marker produced under ``algorithm``.

    Raises:
        SealError: If ``text`` has no redaction prefix, is not hex, or
            carries an envelope that is malformed or for another algorithm.
        UnsupportedAlgorithmError: If ``algorithm`` is not registered.
    """
    alg = get_algorithm(algorithm)

    if text.startswith(CLASSIC_PREFIX):
        body, classic = text[len(CLASSIC_PREFIX):], True
    elif text.startswith(SEAL_PREFIX):
        body, classic = text[len(SEAL_PREFIX):], False
    else:
        raise SealError(f"Not a redaction marker: {text!r}")

    try:
        data = bytes.fromhex(body)
    except ValueError:
        raise SealError(f"Redaction marker is not hex: {text!r}") from None

    # Classic objecthash redactions carry the bare digest.
    if classic and len(data) == alg.length:
        return Seal(multihash.Multihash.from_digest(alg, data))

    try:
        mh = multihash.decode(data)
    except MultihashError as e:
        raise SealError(f"Invalid multihash in redaction marker: {e}") from e

    if mh.code != alg.code:
        raise SealError(
            f"Redaction marker is sealed with {mh.name}, expected {alg.name}"
        )
    return Seal(mh)
