"""Tests for pretty-print support on multihashes and value trees."""

from __future__ import annotations

from io import StringIO

from blot.engine.multihash import from_hex
from blot.formatting import multihash_text, pprint_multihash, pprint_value
from blot.models.value import Dict, Integer, List, Redacted, Set, Unicode
from tests import vectors


class TestMultihash:

    def test_plain_text_is_hex(self) -> None:
        mh = from_hex(vectors.FOO)
        assert multihash_text(mh).plain == vectors.FOO

    def test_segments_styled(self) -> None:
        text = multihash_text(from_hex(vectors.FOO))
        assert len(text.spans) == 3

    def test_pprint_compact(self) -> None:
        buf = StringIO()
        pprint_multihash(from_hex(vectors.FOO), file=buf)
        assert buf.getvalue().strip() == vectors.FOO

    def test_pprint_verbose(self) -> None:
        buf = StringIO()
        pprint_multihash(from_hex(vectors.FOO), verbose=True, file=buf)
        output = buf.getvalue()
        assert "Codec:" in output
        assert "(sha2-256)" in output
        assert "Length:" in output
        assert "Digest: 0x" + vectors.FOO[4:] in output


class TestValueTree:

    def test_renders_types_and_keys(self) -> None:
        value = Dict.of({
            "names": Set((Unicode("a"), Unicode("[b]"))),
            "count": Integer(2),
            "hidden": Redacted(b"\xab" * 4, "sha2-256"),
            "empty": List(()),
        })
        buf = StringIO()
        pprint_value(value, file=buf)
        output = buf.getvalue()
        assert "dict (4)" in output
        assert "names" in output
        assert "set (2)" in output
        assert "'[b]'" in output
        assert "integer 2" in output
        assert "redacted (sha2-256) abababab" in output
        assert "list (0)" in output
