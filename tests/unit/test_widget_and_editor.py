"""ReferencesWidget and EditorFieldService tests."""

import pytest

from app.application.dtos.rendering import WidgetArgs, WidgetInstance
from app.core.constants import NONCE_ACTION, NONCE_FIELD
from app.domain.enums import RecordStatus
from tests.fakes import ReferencesHarness


@pytest.fixture
async def site(harness: ReferencesHarness) -> ReferencesHarness:
    """post 1 (source), post 2 'Zeta', page 3 'About', draft post 4, product 5."""
    harness.records.add("post", "Source")
    harness.records.add("post", "Zeta", slug="zeta")
    harness.records.add("page", "About", slug="about")
    harness.records.add("post", "Draft", status=RecordStatus.DRAFT)
    harness.records.add("product", "Gadget")
    await harness.registry.upsert("post", "related", ["post", "page"], "Related")
    return harness


class TestWidget:
    def test_update_strips_markup_and_merges(self, harness: ReferencesHarness) -> None:
        instance = harness.widget.update(
            {"title": "<b>Hot</b> links", "message": "<script>x()</script>Read on"},
            {"title": "Old", "ref": "_ref_related"},
        )
        assert instance == WidgetInstance(title="Hot links", message="Read on", ref="_ref_related")

    async def test_render_lists_published_targets(self, site: ReferencesHarness) -> None:
        await site.store.set(1, "related", [3, 4, 2])
        instance = WidgetInstance(title="See also", message="More <reading>", ref="_ref_related")
        html = await site.widget.render(instance, 1, WidgetArgs(before_widget="<aside>", after_widget="</aside>"))
        assert html.startswith("<aside>")
        assert html.endswith("</aside>")
        assert '<h2 class="widget-title">See also</h2>' in html
        assert "More &lt;reading&gt;" in html
        assert html.index("About") < html.index("Zeta")
        assert "Draft" not in html

    @pytest.mark.parametrize(
        ("ref", "record_id"),
        [
            ("_ref_related", None),
            ("_ref_missing", 1),
            ("", 1),
            ("_ref_", 1),
            ("related", 1),
            ("_ref_related", 3),
            ("_ref_related", 99),
        ],
    )
    async def test_render_nothing_when_not_applicable(self, site: ReferencesHarness, ref, record_id) -> None:
        await site.store.set(1, "related", [2])
        assert await site.widget.render(WidgetInstance(ref=ref), record_id) == ""

    async def test_render_nothing_without_published_targets(self, site: ReferencesHarness) -> None:
        instance = WidgetInstance(ref="_ref_related")
        assert await site.widget.render(instance, 1) == ""
        await site.store.set(1, "related", [4])
        assert await site.widget.render(instance, 1) == ""

    async def test_form_lists_definitions(self, site: ReferencesHarness) -> None:
        html = await site.widget.form(WidgetInstance(ref="_ref_related"))
        assert '<option value="_ref_related" selected>Related (related)</option>' in html

    async def test_form_hint_without_definitions(self, harness: ReferencesHarness) -> None:
        html = await harness.widget.form(WidgetInstance())
        assert "References settings page" in html
        assert 'href="/admin/references"' in html


class TestEditorFields:
    async def test_fields_offer_published_targets_by_title(self, site: ReferencesHarness) -> None:
        await site.store.set(1, "related", [2])
        form = await site.editor.fields(1)
        assert form is not None
        [field] = form.fields
        assert field.field_name == "_ref_related"
        assert [c.title for c in field.candidates] == ["About", "Source", "Zeta"]
        assert field.selected == (2,)
        site.nonces.verify(form.nonce, NONCE_ACTION, 1)

    async def test_empty_target_types_offer_every_type(self, site: ReferencesHarness) -> None:
        await site.registry.append("anything", "Anything", "page", None)
        [field] = (await site.editor.fields(3)).fields
        assert "Gadget" in [c.title for c in field.candidates]

    async def test_fields_missing_record(self, site: ReferencesHarness) -> None:
        assert await site.editor.fields(99) is None
        assert await site.editor.render(99) == ""

    async def test_render_has_nonce_and_multiselect(self, site: ReferencesHarness) -> None:
        html = await site.editor.render(1)
        assert f'name="{NONCE_FIELD}"' in html
        assert 'name="_ref_related[]" multiple="multiple"' in html

    async def test_render_empty_for_type_without_definitions(self, site: ReferencesHarness) -> None:
        assert await site.editor.render(5) == ""

    async def test_save_replaces_every_key(self, site: ReferencesHarness) -> None:
        await site.registry.upsert("post", "pages", "page", "Pages")
        await site.store.set(1, "pages", [3])
        nonce = site.nonces.create(NONCE_ACTION, 1)
        outcome = await site.editor.save(1, {NONCE_FIELD: nonce, "_ref_related": ["3", "2"]})
        assert outcome.saved
        assert outcome.written_keys == ("related", "pages")
        assert await site.store.get(1, "related") == [3, 2]
        assert await site.store.get(1, "pages") == []

    @pytest.mark.parametrize(
        ("form", "autosave", "reason"),
        [
            ({"_ref_related": ["2"]}, True, "autosave"),
            ({}, False, "empty_form"),
            ({"_ref_related": ["2"]}, False, "invalid_nonce"),
            ({NONCE_FIELD: "garbage", "_ref_related": ["2"]}, False, "invalid_nonce"),
        ],
    )
    async def test_save_aborts_silently(self, site: ReferencesHarness, form, autosave, reason) -> None:
        outcome = await site.editor.save(1, form, autosave=autosave)
        assert not outcome.saved
        assert outcome.reason == reason
        assert site.meta.rows == {}

    async def test_nonce_bound_to_record(self, site: ReferencesHarness) -> None:
        nonce = site.nonces.create(NONCE_ACTION, 2)
        outcome = await site.editor.save(1, {NONCE_FIELD: nonce, "_ref_related": ["2"]})
        assert outcome.reason == "invalid_nonce"

    async def test_save_missing_record(self, site: ReferencesHarness) -> None:
        nonce = site.nonces.create(NONCE_ACTION, 99)
        outcome = await site.editor.save(99, {NONCE_FIELD: nonce})
        assert outcome.reason == "record_not_found"
