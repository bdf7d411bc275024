"""RelationRegistry and ConfigStore tests over in-memory option and content type stores."""

from app.application.services import ConfigStore
from app.domain.enums import RejectionReason, UpsertOutcome
from app.domain.value_objects import TypeList
from tests.fakes import FakeCache, FakeOptionRepository, ReferencesHarness


class TestConfigStore:
    async def test_load_defaults_when_option_missing(self) -> None:
        store = ConfigStore(FakeOptionRepository())
        settings = await store.load()
        assert settings.refs == {}
        assert settings.next_id == 1

    async def test_install_never_overwrites(self) -> None:
        options = FakeOptionRepository({"post_references_settings": {"refs": {}, "next_id": 9}})
        store = ConfigStore(options)
        assert await store.install() is False
        assert (await store.load()).next_id == 9

    async def test_install_creates_default_blob(self) -> None:
        options = FakeOptionRepository()
        assert await ConfigStore(options).install() is True
        assert options.options["post_references_settings"] == {"refs": {}, "next_id": 1}

    async def test_save_invalidates_cache(self) -> None:
        cache = FakeCache()
        store = ConfigStore(FakeOptionRepository(), cache)
        settings = await store.load()
        settings.append("k", "K", "post", TypeList())
        await store.save(settings)
        assert store.cache_key in cache.deleted

    async def test_load_after_save_skips_cache(self) -> None:
        cache = FakeCache()
        store = ConfigStore(FakeOptionRepository(), cache)
        settings = await store.load()
        cache.data.clear()
        settings.append("k", "K", "post", TypeList())
        await store.save(settings)
        cache.data[store.cache_key] = {"refs": {}, "next_id": 1}

        reloaded = await store.load()
        assert len(reloaded.refs) == 1
        assert cache.data[store.cache_key] == {"refs": {}, "next_id": 1}

    async def test_settings_page_does_not_cache_uncommitted_blob(self) -> None:
        harness = ReferencesHarness("post", "page", cache=FakeCache())
        await harness.settings_page.handle(
            {"action": "add_new_reference", "ref_id": "related", "ref_post": "post", "ref_title": "Related"}
        )
        await harness.settings_page.render()
        assert harness.cache.data == {}

    async def test_load_reads_through_cache(self) -> None:
        cache = FakeCache()
        options = FakeOptionRepository({"post_references_settings": {"refs": {}, "next_id": 5}})
        store = ConfigStore(options, cache)
        await store.load()
        assert cache.data[store.cache_key] == {"refs": {}, "next_id": 5}
        options.options.clear()
        assert (await store.load()).next_id == 5

    async def test_unavailable_cache_is_bypassed(self) -> None:
        cache = FakeCache(available=False)
        options = FakeOptionRepository({"post_references_settings": {"refs": {}, "next_id": 3}})
        store = ConfigStore(options, cache)
        assert (await store.load()).next_id == 3
        assert cache.data == {}


class TestUpsert:
    async def test_creates_then_updates_in_place(self, harness: ReferencesHarness) -> None:
        created = await harness.registry.upsert("post", "related", ["post", "page"], "Related")
        assert created.outcome is UpsertOutcome.CREATED
        assert created.internal_id == 1

        updated = await harness.registry.upsert("post", "related", "page", "Also see")
        assert updated.outcome is UpsertOutcome.UPDATED
        assert updated.internal_id == 1

        [definition] = await harness.registry.list(source_type="post", key="related")
        assert definition.title == "Also see"
        assert definition.target_types == ("page",)

    async def test_same_key_on_other_source_type_is_separate(self, harness: ReferencesHarness) -> None:
        await harness.registry.upsert("post", "related", "post", "A")
        other = await harness.registry.upsert("page", "related", "post", "B")
        assert other.outcome is UpsertOutcome.CREATED
        assert other.internal_id == 2
        assert len(await harness.registry.list(key="related")) == 2

    async def test_rejections(self, harness: ReferencesHarness) -> None:
        registry = harness.registry
        cases = [
            (("ghost", "k", "post", "T"), RejectionReason.UNKNOWN_SOURCE_TYPE, "ghost"),
            (("post", "k", None, "T"), RejectionReason.EMPTY_TARGET_TYPES, None),
            (("post", "k", [], "T"), RejectionReason.EMPTY_TARGET_TYPES, None),
            (("post", "k", ["page", "ghost"], "T"), RejectionReason.UNKNOWN_TARGET_TYPE, "ghost"),
            (("post", "bad key", "post", "T"), RejectionReason.INVALID_KEY, "bad key"),
            (("post", "related\n", "post", "T"), RejectionReason.INVALID_KEY, "related\n"),
        ]
        for args, reason, detail in cases:
            result = await registry.upsert(*args)
            assert result.outcome is UpsertOutcome.REJECTED
            assert result.reason is reason
            assert result.detail == detail
            assert not result.ok
        assert await registry.list() == []
        assert harness.options.set_calls == 0


class TestRemove:
    async def test_remove_deletes_all_matches(self, harness: ReferencesHarness) -> None:
        registry = harness.registry
        await registry.upsert("post", "related", "post", "A")
        await registry.append("related", "Dup", "post", "page")
        await registry.upsert("page", "related", "post", "B")

        assert await registry.remove("post", "related") == 2
        remaining = await registry.list()
        assert [(d.source_type, d.key) for d in remaining] == [("page", "related")]

    async def test_remove_nothing_does_not_save(self, harness: ReferencesHarness) -> None:
        assert await harness.registry.remove("post", "missing") == 0
        assert harness.options.set_calls == 0

    async def test_remove_keeps_attachment_rows(self, harness: ReferencesHarness) -> None:
        post = harness.records.add("post", "P")
        await harness.registry.upsert("post", "related", "post", "A")
        await harness.store.set(post.id, "related", [post.id])
        await harness.registry.remove("post", "related")
        assert (post.id, "_ref_related") in harness.meta.rows


class TestAdminPath:
    async def test_append_skips_content_type_checks(self, harness: ReferencesHarness) -> None:
        created = await harness.registry.append("k", "T", "ghost", ["nowhere"])
        assert created.internal_id == 1
        assert created.source_type == "ghost"

    async def test_ids_are_not_reused_after_delete(self, harness: ReferencesHarness) -> None:
        registry = harness.registry
        first = await registry.append("a", "A", "post", None)
        await registry.append("b", "B", "post", None)
        assert await registry.delete(first.internal_id)
        third = await registry.append("c", "C", "post", None)
        assert third.internal_id == 3
        assert await registry.next_id() == 4
        assert await registry.get(first.internal_id) is None

    async def test_replace_unknown_returns_none(self, harness: ReferencesHarness) -> None:
        result = await harness.registry.replace(
            42, key="k", title="T", source_type="post", target_types=None
        )
        assert result is None
        assert harness.options.set_calls == 0

    async def test_delete_unknown_returns_false(self, harness: ReferencesHarness) -> None:
        assert await harness.registry.delete(42) is False
