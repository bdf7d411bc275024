"""Reference list rendering, filters and [ref] shortcode expansion."""

import pytest

from app.application.dtos.rendering import ReferenceItem
from app.application.use_cases.rendering.shortcode import parse_attributes
from app.domain.enums import RecordStatus
from tests.fakes import SITE_URL, ReferencesHarness


@pytest.fixture
async def linked(harness: ReferencesHarness) -> ReferencesHarness:
    """post 1 links related -> [3, 2, 4] (4 is a draft) and pages -> [5]."""
    harness.records.add("post", "Source", slug="source", body="Intro [ref] outro")
    harness.records.add("post", "Beta", slug="beta")
    harness.records.add("post", "Alpha <b>", slug="alpha")
    harness.records.add("post", "Hidden", status=RecordStatus.DRAFT)
    harness.records.add("page", "About")
    await harness.registry.upsert("post", "related", "post", "Related")
    await harness.registry.upsert("post", "pages", "page", "Pages")
    await harness.store.set(1, "related", [3, 2, 4])
    await harness.store.set(1, "pages", [5])
    return harness


class TestReferenceListRenderer:
    async def test_blocks_keep_attached_order_and_drop_unpublished(self, linked: ReferencesHarness) -> None:
        blocks = await linked.renderer.blocks(1)
        assert [b.key for b in blocks] == ["related", "pages"]
        related = blocks[0]
        assert related.ids == (3, 2, 4)
        assert [i.record_id for i in related.items] == [3, 2]
        assert related.items[1].url == f"{SITE_URL}/post/beta/"
        assert blocks[1].items[0].url == f"{SITE_URL}/?p=5"

    async def test_blocks_restricted_to_key(self, linked: ReferencesHarness) -> None:
        blocks = await linked.renderer.blocks(1, key="pages")
        assert [b.key for b in blocks] == ["pages"]

    async def test_no_block_when_all_targets_unpublished(self, linked: ReferencesHarness) -> None:
        await linked.store.set(1, "related", [4])
        assert [b.key for b in await linked.renderer.blocks(1)] == ["pages"]

    async def test_missing_record_renders_nothing(self, linked: ReferencesHarness) -> None:
        assert await linked.renderer.blocks(99) == []
        assert await linked.renderer.render(99) == ""

    async def test_render_escapes_titles(self, linked: ReferencesHarness) -> None:
        html = await linked.renderer.render(1, key="related")
        assert html.startswith('<ul class="reference-list-related">')
        assert html.endswith("</ul>")
        assert "Alpha &lt;b&gt;" in html
        assert f'<a href="{SITE_URL}/post/beta/">Beta</a>' in html
        assert "Hidden" not in html

    async def test_render_all_keys_concatenates_blocks(self, linked: ReferencesHarness) -> None:
        html = await linked.renderer.render(1)
        assert html.index("reference-list-related") < html.index("reference-list-pages")

    async def test_item_filter_for_one_key(self, linked: ReferencesHarness) -> None:
        seen = []

        def only_first(items: list[ReferenceItem], attrs, key, ids):
            seen.append((attrs, key, tuple(ids)))
            return items[:1]

        linked.filters.add_items_filter(only_first, key="related")
        [related, pages] = await linked.renderer.blocks(1)
        assert [i.record_id for i in related.items] == [3]
        assert len(pages.items) == 1
        assert seen == [({"id": 1, "key": None}, "related", (3, 2, 4))]

    async def test_item_filter_emptying_list_drops_block(self, linked: ReferencesHarness) -> None:
        linked.filters.add_items_filter(lambda items, attrs, key, ids: [])
        assert await linked.renderer.render(1) == ""

    async def test_output_filter_applied_per_block(self, linked: ReferencesHarness) -> None:
        linked.filters.add_output_filter(lambda html, attrs, key, ids: f"<div data-key={key}>{html}</div>")
        linked.filters.add_output_filter(lambda html, attrs, key, ids: html.upper(), key="pages")
        html = await linked.renderer.render(1)
        assert html.count("<div data-key=related>") == 1
        assert "<DIV DATA-KEY=PAGES>" in html


class TestParseAttributes:
    def test_quoted_and_bare_values(self) -> None:
        attrs = parse_attributes(' id=12 key="related" Extra=\'x y\'')
        assert attrs == {"id": "12", "key": "related", "extra": "x y"}

    def test_empty(self) -> None:
        assert parse_attributes("") == {}


class TestShortcodeExpander:
    async def test_tag_defaults_to_current_record(self, linked: ReferencesHarness) -> None:
        body = (await linked.records.get_by_id(1)).body
        out = await linked.expander.expand(body, current_record_id=1)
        assert out.startswith("Intro <ul")
        assert out.endswith("</ul> outro")
        assert "[ref]" not in out

    async def test_tag_with_id_and_key(self, linked: ReferencesHarness) -> None:
        out = await linked.expander.expand("[ref id='1' key=pages]", current_record_id=None)
        assert out == await linked.renderer.render(1, key="pages")

    async def test_unknown_attributes_ignored(self, linked: ReferencesHarness) -> None:
        out = await linked.expander.expand('[ref key="pages" style="big"]', current_record_id=1)
        assert 'class="reference-list-pages"' in out

    async def test_no_record_context_yields_empty(self, linked: ReferencesHarness) -> None:
        assert await linked.expander.expand("a[ref]b") == "ab"

    async def test_escaped_tag_is_literal(self, linked: ReferencesHarness) -> None:
        assert await linked.expander.expand("see [[ref]]", current_record_id=1) == "see [ref]"

    async def test_body_without_tags_untouched(self, linked: ReferencesHarness) -> None:
        assert await linked.expander.expand("[reference] [b]", current_record_id=1) == "[reference] [b]"
