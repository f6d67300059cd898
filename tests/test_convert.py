"""Tests for converting Python objects and JSON text into values.

The sequence policy and JSON string typing live here.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from blot.convert import classify_string, from_json, to_value
from blot.engine.hashing import blot, hash_value
from blot.exceptions import (
    DuplicateKeyError,
    InvalidTimestampError,
    InvalidValueError,
    NestingTooDeepError,
)
from blot.models.config import HashConfig, SequenceMode
from blot.models.seal import Seal, parse_seal
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
    Timestamp,
    Unicode,
)
from tests import vectors


class TestToValue:

    @pytest.mark.parametrize(
        "obj,expected",
        [
            (None, Null()),
            (True, Bool(True)),
            (False, Bool(False)),
            (0, Integer(0)),
            (-5, Integer(-5)),
            (1.5, Float(1.5)),
            ("foo", Unicode("foo")),
            (b"\x00\x01", Raw(b"\x00\x01")),
            (bytearray(b"\xff"), Raw(b"\xff")),
        ],
    )
    def test_scalars(self, obj, expected) -> None:
        assert to_value(obj) == expected

    def test_bool_is_not_integer(self) -> None:
        assert to_value(True) != to_value(1)

    def test_decimal(self) -> None:
        assert to_value(Decimal("2.5")) == Float(2.5)

    def test_datetime(self) -> None:
        dt = datetime(2018, 10, 13, 15, 50, tzinfo=timezone.utc)
        assert to_value(dt) == Timestamp(dt)

    def test_naive_datetime(self) -> None:
        with pytest.raises(InvalidTimestampError):
            to_value(datetime(2018, 10, 13))

    def test_list_default_mode(self) -> None:
        assert to_value(["a", ("b",)]) == List((Unicode("a"), List((Unicode("b"),))))

    def test_list_set_mode_every_depth(self) -> None:
        value = to_value({"k": ["a", ["b"]]}, sequence_mode=SequenceMode.SET)
        assert value == Dict.of({"k": Set((Unicode("a"), Set((Unicode("b"),))))})

    def test_python_set_always_set(self) -> None:
        assert isinstance(to_value({"a"}), Set)
        assert isinstance(to_value(frozenset(["a"]), sequence_mode="list"), Set)

    def test_existing_values_pass_through(self) -> None:
        value = List((Integer(1),))
        assert to_value(value, sequence_mode="set") is value

    def test_mixed_tree(self) -> None:
        value = to_value(["foo", List((Integer(1),))])
        assert value == List((Unicode("foo"), List((Integer(1),))))

    def test_seal_becomes_redacted(self) -> None:
        seal = parse_seal("77" + vectors.FOO, "sha2-256")
        assert isinstance(to_value([seal]).items[0], Redacted)

    def test_non_string_key(self) -> None:
        with pytest.raises(InvalidValueError):
            to_value({1: "a"})

    def test_unsupported_object(self) -> None:
        with pytest.raises(InvalidValueError):
            to_value(object())

    def test_max_depth(self) -> None:
        assert to_value([[["x"]]], max_depth=3) == List((List((List((Unicode("x"),)),)),))
        with pytest.raises(NestingTooDeepError):
            to_value([[["x"]]], max_depth=2)
        with pytest.raises(NestingTooDeepError):
            to_value({"a": {"b": 1}}, max_depth=1)

    def test_nesting_past_recursion_limit(self) -> None:
        deep: list = []
        for _ in range(5000):
            deep = [deep]
        with pytest.raises(NestingTooDeepError) as exc_info:
            to_value(deep)
        assert exc_info.value.max_depth is None


class TestClassifyString:

    def test_seal(self) -> None:
        value = classify_string("77" + vectors.FOO, "sha2-256")
        assert isinstance(value, Redacted)

    def test_seal_for_other_algorithm_stays_text(self) -> None:
        text = "77" + vectors.FOO
        assert classify_string(text, "sha3-256") == Unicode(text)

    def test_raw(self) -> None:
        assert classify_string("0xdeadBEEF", "sha2-256") == Raw(b"\xde\xad\xbe\xef")

    def test_empty_raw(self) -> None:
        assert classify_string("0x", "sha2-256") == Raw(b"")

    def test_odd_hex_stays_text(self) -> None:
        assert classify_string("0xabc", "sha2-256") == Unicode("0xabc")

    def test_bare_hex_stays_text(self) -> None:
        assert classify_string("deadbeef", "sha2-256") == Unicode("deadbeef")

    def test_timestamp(self) -> None:
        value = classify_string("2018-10-13T15:50:00Z", "sha2-256")
        assert isinstance(value, Timestamp)
        assert value.isoformat() == "2018-10-13T15:50:00Z"

    def test_impossible_date_stays_text(self) -> None:
        assert classify_string("2018-02-30T00:00:00Z", "sha2-256") == Unicode(
            "2018-02-30T00:00:00Z"
        )

    def test_fractional_seconds_stay_text(self) -> None:
        text = "2018-10-13T15:50:00.5Z"
        assert classify_string(text, "sha2-256") == Unicode(text)


class TestFromJson:

    def test_golden_lists(self) -> None:
        assert hash_value(from_json('["foo", "bar"]')).hex() == vectors.FOO_BAR_LIST
        assert hash_value(from_json("[]")).hex() == vectors.EMPTY_LIST

    def test_whitespace_and_key_order_irrelevant(self) -> None:
        a = from_json('{"a": 1, "b": [true, null]}')
        b = from_json('{ "b" : [ true , null ] ,\n "a" : 1 }')
        assert blot(a) == blot(b)

    def test_float_mix(self) -> None:
        assert hash_value(from_json(vectors.FLOAT_MIX_JSON)).hex() == vectors.FLOAT_MIX
        assert hash_value(from_json(vectors.INT_FLOAT_MIX_JSON)).hex() == vectors.INT_FLOAT_MIX

    def test_number_spelling_irrelevant(self) -> None:
        assert blot(from_json("[1.5, 1e3]")) == blot(from_json("[15e-1, 1000.0]"))

    def test_set_mode(self, set_config: HashConfig) -> None:
        a = from_json('["foo", "bar"]', set_config)
        b = from_json('["bar", "foo"]', set_config)
        assert isinstance(a, Set)
        assert blot(a) == blot(b)
        assert blot(a) != blot(from_json('["foo", "bar"]'))
        assert hash_value(a).hex() == vectors.FOO_BAR_SET

    def test_set_mode_with_repeated_member(self, set_config: HashConfig) -> None:
        once = from_json('["foo", "bar"]', set_config)
        twice = from_json('["bar", "foo", "foo"]', set_config)
        assert blot(once, set_config) == blot(twice, set_config)
        assert blot(once, deduplicate_sets=False) != blot(twice, deduplicate_sets=False)
        assert hash_value(twice, set_config).hex() == vectors.FOO_BAR_SET
        assert hash_value(twice, deduplicate_sets=False).hex() == vectors.BAR_FOO_FOO_SET_KEPT

    def test_duplicate_members_reach_policy(self) -> None:
        value = from_json('{"a": 1, "a": 2}')
        assert len(value.entries) == 2
        with pytest.raises(DuplicateKeyError):
            blot(value)
        assert blot(value, reject_duplicate_keys=False) == blot(from_json('{"a": 2}'))

    def test_classic_redaction(self) -> None:
        text = '["**REDACTED**%s", "bar"]' % vectors.FOO[4:]
        assert hash_value(from_json(text)).hex() == vectors.FOO_BAR_LIST

    def test_seal_redaction(self) -> None:
        text = '["77%s", "bar"]' % vectors.FOO
        assert hash_value(from_json(text)).hex() == vectors.FOO_BAR_LIST

    def test_classify_disabled(self) -> None:
        value = from_json('["0x00", "2018-10-13T15:50:00Z"]', classify_strings=False)
        assert value == List((Unicode("0x00"), Unicode("2018-10-13T15:50:00Z")))

    def test_nan_literal_parsed(self) -> None:
        assert isinstance(from_json("NaN"), Float)

    def test_bytes_input(self) -> None:
        assert from_json(b'{"foo": "bar"}') == Dict.of({"foo": Unicode("bar")})

    def test_invalid_json(self) -> None:
        with pytest.raises(json.JSONDecodeError):
            from_json("[1,")

    def test_max_depth(self) -> None:
        assert from_json('{"a": [1]}', max_depth=2)
        with pytest.raises(NestingTooDeepError):
            from_json('{"a": [1]}', max_depth=1)

    @pytest.mark.parametrize("max_depth", [10, None])
    def test_nesting_past_decoder_limit(self, max_depth) -> None:
        text = "[" * 5000 + "]" * 5000
        with pytest.raises(NestingTooDeepError) as exc_info:
            from_json(text, max_depth=max_depth)
        assert exc_info.value.max_depth == max_depth

    @pytest.mark.parametrize("text,expected", vectors.COMMON_JSON)
    def test_common_json_vectors(self, text: str, expected: str) -> None:
        config = HashConfig(common_json=True)
        assert hash_value(from_json(text, config), config).hex() == expected
