"""Tests for domain value objects (RelationKey, TypeList, RecordIdList, coerce_record_id)."""

import pytest

from app.domain.value_objects.core import (
    RecordIdList,
    RelationKey,
    TypeList,
    coerce_record_id,
    is_valid_relation_key,
)


class TestRelationKey:
    """RelationKey: [A-Za-z0-9_]+, meta key is '_ref_' + key."""

    def test_valid_keys(self) -> None:
        RelationKey("related")
        RelationKey("linked_story")
        RelationKey("1")

    @pytest.mark.parametrize("value", ["", "has space", "dash-key", "ünï", "a.b", "related\n", "\nrelated"])
    def test_invalid_keys_rejected(self, value: str) -> None:
        with pytest.raises(ValueError, match="A-Za-z0-9_"):
            RelationKey(value)

    def test_meta_key_round_trip(self) -> None:
        key = RelationKey("related")
        assert key.meta_key == "_ref_related"
        assert RelationKey.from_meta_key("_ref_related") == key

    def test_from_meta_key_requires_prefix(self) -> None:
        with pytest.raises(ValueError, match="Not a reference meta key"):
            RelationKey.from_meta_key("related")

    def test_is_valid_relation_key_rejects_non_strings(self) -> None:
        assert is_valid_relation_key("ok_1")
        assert not is_valid_relation_key(None)
        assert not is_valid_relation_key(12)

    def test_parse_returns_none_for_invalid(self) -> None:
        assert RelationKey.parse("related") == RelationKey("related")
        assert RelationKey.parse("related\n") is None
        assert RelationKey.parse(None) is None


class TestTypeList:
    """Scalar-or-list content type names normalized to an ordered tuple."""

    def test_none_and_empty_string_are_empty(self) -> None:
        assert TypeList.from_raw(None).values == ()
        assert TypeList.from_raw("").values == ()
        assert not TypeList.from_raw([])

    def test_scalar_becomes_single_entry(self) -> None:
        assert TypeList.from_raw("post").values == ("post",)

    def test_list_keeps_order_and_drops_duplicates_and_blanks(self) -> None:
        assert TypeList.from_raw(["page", "post", "page", " ", ""]).values == ("page", "post")


class TestCoerceRecordId:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(5, 5), ("42", 42), (" 7 ", 7), (0, None), (-3, None), ("abc", None), (None, None), (True, None), (1.5, None)],
    )
    def test_coercion(self, value, expected) -> None:
        assert coerce_record_id(value) == expected


class TestRecordIdList:
    """Attached target ids: ordered, unique, positive integers."""

    def test_none_is_empty(self) -> None:
        assert RecordIdList.from_raw(None).as_list() == []

    def test_scalar_becomes_list(self) -> None:
        assert RecordIdList.from_raw(9).as_list() == [9]
        assert RecordIdList.from_raw("9").as_list() == [9]

    def test_digit_strings_coerced_and_junk_dropped(self) -> None:
        assert RecordIdList.from_raw(["3", 1, "x", 0, "3", 2]).as_list() == [3, 1, 2]

    def test_len_and_bool(self) -> None:
        ids = RecordIdList.from_raw([1, 2])
        assert len(ids) == 2
        assert ids
        assert not RecordIdList.from_raw([])
