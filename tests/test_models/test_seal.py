"""Tests for textual redaction markers."""

from __future__ import annotations

import pytest

from blot.engine.hashing import hash_value
from blot.exceptions import SealError
from blot.models.seal import Seal, format_seal, is_seal, parse_seal
from blot.models.value import Redacted, Unicode
from tests import vectors

FOO_DIGEST = bytes.fromhex(vectors.FOO[4:])


class TestParseSeal:

    def test_seal_mark(self) -> None:
        seal = parse_seal("77" + vectors.FOO, "sha2-256")
        assert seal.digest == FOO_DIGEST

    def test_classic_multihash(self) -> None:
        seal = parse_seal("**REDACTED**" + vectors.FOO, "sha2-256")
        assert seal.digest == FOO_DIGEST

    def test_both_prefixes_agree(self) -> None:
        classic = parse_seal("**REDACTED**" + vectors.FOO, "sha2-256")
        marked = parse_seal("77" + vectors.FOO, "sha2-256")
        assert classic == marked

    def test_classic_bare_digest(self) -> None:
        seal = parse_seal("**REDACTED**" + FOO_DIGEST.hex(), "sha2-256")
        assert seal.multihash.hex() == vectors.FOO

    def test_seal_mark_requires_multihash(self) -> None:
        with pytest.raises(SealError):
            parse_seal("77" + FOO_DIGEST.hex(), "sha2-256")

    def test_wrong_algorithm(self) -> None:
        with pytest.raises(SealError):
            parse_seal("77" + vectors.FOO, "sha3-256")

    def test_not_a_marker(self) -> None:
        with pytest.raises(SealError):
            parse_seal(vectors.FOO, "sha2-256")

    def test_not_hex(self) -> None:
        with pytest.raises(SealError):
            parse_seal("**REDACTED**nothex", "sha2-256")

    def test_truncated(self) -> None:
        with pytest.raises(SealError):
            parse_seal("77" + vectors.FOO[:-2], "sha2-256")

    @pytest.mark.parametrize("prefix", ["77", "**REDACTED**"])
    def test_padded_envelope_rejected(self, prefix: str) -> None:
        padded = "920020" + vectors.FOO[4:]
        with pytest.raises(SealError):
            parse_seal(prefix + padded, "sha2-256")


class TestSeal:

    def test_to_value(self) -> None:
        value = parse_seal("77" + vectors.FOO, "sha2-256").to_value()
        assert value == Redacted(digest=FOO_DIGEST, algorithm="sha2-256")

    def test_format(self) -> None:
        mh = hash_value(Unicode("foo"))
        assert format_seal(mh) == "77" + vectors.FOO
        assert format_seal(mh, classic=True) == "**REDACTED**" + vectors.FOO
        assert str(Seal(mh)) == "77" + vectors.FOO

    def test_format_parse_round_trip(self) -> None:
        mh = hash_value(Unicode("foo"), algorithm="blake2b-512")
        assert parse_seal(format_seal(mh), "blake2b-512").multihash == mh

    def test_is_seal(self) -> None:
        assert is_seal("**REDACTED**00")
        assert is_seal("7700")
        assert not is_seal("foo")
