"""Unsigned variable-length integers (LEB128, as used by multiformats).

Seven bits per byte, least significant group first; the high bit marks
continuation. Values are bounded to 64 bits, i.e. at most 9 encoded bytes
under the multiformats rules.
"""

from __future__ import annotations

from blot.exceptions import (
    NonMinimalVarintError,
    TruncatedEnvelopeError,
    VarintOverflowError,
)

MAX_BYTES = 9
MAX_VALUE = (1 << 63) - 1


def encode(value: int) -> bytes:
    """Encode a non-negative integer as an unsigned varint."""
    if value < 0 or value > MAX_VALUE:
        raise ValueError(f"uvar out of range: {value}")
    out = bytearray()
    while value > 0x7F:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    out.append(value)
    return bytes(out)


def decode(buf: bytes) -> tuple[int, bytes]:
    """Decode a varint from the start of ``buf``.

    Returns:
        Tuple of (value, remaining bytes).

    Raises:
        TruncatedEnvelopeError: If ``buf`` ends mid-varint.
        VarintOverflowError: If the varint runs past ``MAX_BYTES``.
        NonMinimalVarintError: If a shorter encoding of the same value exists.
    """
    value = 0
    for i, byte in enumerate(buf):
        if i >= MAX_BYTES:
            raise VarintOverflowError()
        value |= (byte & 0x7F) << (7 * i)
        if not byte & 0x80:
            # a zero final group after the first byte only pads the value
            if byte == 0 and i > 0:
                raise NonMinimalVarintError(bytes(buf[: i + 1]))
            return value, bytes(buf[i + 1:])
    raise TruncatedEnvelopeError("unterminated varint")
