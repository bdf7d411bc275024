"""AttachmentStore and ReverseIndex tests over in-memory record and meta stores."""

import pytest

from app.domain.enums import RecordStatus
from tests.fakes import ReferencesHarness


@pytest.fixture
async def seeded(harness: ReferencesHarness) -> ReferencesHarness:
    """post 1 (source), post 2, page 3, draft post 4; 'related' and 'pages' on post."""
    harness.records.add("post", "Source")
    harness.records.add("post", "Second")
    harness.records.add("page", "About")
    harness.records.add("post", "Draft", status=RecordStatus.DRAFT)
    await harness.registry.upsert("post", "related", ["post", "page"], "Related")
    await harness.registry.upsert("post", "pages", "page", "Pages")
    return harness


class TestAttachmentStore:
    async def test_get_all_lists_every_key_of_the_type(self, seeded: ReferencesHarness) -> None:
        assert await seeded.store.get_all(1) == {"related": [], "pages": []}

    async def test_get_all_missing_record_is_none(self, seeded: ReferencesHarness) -> None:
        assert await seeded.store.get_all(99) is None

    async def test_get_all_type_without_definitions_is_empty(self, seeded: ReferencesHarness) -> None:
        assert await seeded.store.get_all(3) == {}

    async def test_set_replaces_whole_list(self, seeded: ReferencesHarness) -> None:
        assert await seeded.store.set(1, "related", [2, 3])
        assert await seeded.store.set(1, "related", ["3"])
        assert await seeded.store.get(1, "related") == [3]
        assert seeded.meta.rows[(1, "_ref_related")] == "[3]"

    async def test_set_leaves_other_keys_untouched(self, seeded: ReferencesHarness) -> None:
        await seeded.store.set(1, "related", [2])
        await seeded.store.set(1, "pages", [3])
        await seeded.store.set(1, "related", [3, 2])
        assert await seeded.store.get_all(1) == {"related": [3, 2], "pages": [3]}
        assert seeded.meta.rows[(1, "_ref_pages")] == "[3]"

    async def test_set_normalizes_scalars_and_duplicates(self, seeded: ReferencesHarness) -> None:
        await seeded.store.set(1, "related", "2")
        assert await seeded.store.get(1, "related") == [2]
        await seeded.store.set(1, "related", [2, "2", "x", 3])
        assert await seeded.store.get(1, "related") == [2, 3]

    async def test_set_none_clears(self, seeded: ReferencesHarness) -> None:
        await seeded.store.set(1, "related", [2])
        await seeded.store.set(1, "related", None)
        assert await seeded.store.get(1, "related") == []

    async def test_set_rejects_unknown_key_or_record(self, seeded: ReferencesHarness) -> None:
        assert await seeded.store.set(1, "nope", [2]) is False
        assert await seeded.store.set(3, "related", [2]) is False
        assert await seeded.store.set(99, "related", [2]) is False
        assert seeded.meta.rows == {}

    async def test_malformed_stored_value_reads_empty(self, seeded: ReferencesHarness) -> None:
        seeded.meta.put_raw(1, "_ref_related", "not json")
        assert await seeded.store.get(1, "related") == []

    async def test_get_unknown_key_is_empty(self, seeded: ReferencesHarness) -> None:
        assert await seeded.store.get(1, "nope") == []


class TestReverseIndex:
    async def test_finds_each_referencing_key(self, seeded: ReferencesHarness) -> None:
        await seeded.store.set(1, "related", [3, 2])
        await seeded.store.set(1, "pages", [3])
        hits = await seeded.reverse.find(3)
        assert [(h.record_id, h.meta_key) for h in hits] == [
            (1, "_ref_pages"),
            (1, "_ref_related"),
        ]
        assert hits[0].record_type == "post"
        assert hits[0].raw_value == "[3]"

    async def test_matches_digit_strings_as_integers(self, seeded: ReferencesHarness) -> None:
        seeded.meta.put_raw(2, "_ref_related", '["3", "12"]')
        hits = await seeded.reverse.find(3)
        assert [h.record_id for h in hits] == [2]
        assert await seeded.reverse.find(1) == []

    async def test_filters_by_source_type_and_status(self, seeded: ReferencesHarness) -> None:
        seeded.meta.put_raw(4, "_ref_related", "[3]")
        await seeded.store.set(1, "related", [3])

        assert [h.record_id for h in await seeded.reverse.find(3)] == [1, 4]
        assert [h.record_id for h in await seeded.reverse.find(3, only_published=True)] == [1]
        assert await seeded.reverse.find(3, source_types=["page"]) == []
        assert len(await seeded.reverse.find(3, source_types=["post", ""])) == 2

    async def test_skips_malformed_and_non_reference_rows(self, seeded: ReferencesHarness) -> None:
        seeded.meta.put_raw(1, "_ref_related", "{broken")
        seeded.meta.put_raw(2, "_ref_related", '{"3": true}')
        seeded.meta.put_raw(2, "other_key", "[3]")
        seeded.meta.put_raw(1, "_ref_pages", "[3]")
        hits = await seeded.reverse.find(3)
        assert [(h.record_id, h.meta_key) for h in hits] == [(1, "_ref_pages")]
