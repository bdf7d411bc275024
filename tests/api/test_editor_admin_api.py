"""Editor fields, admin settings screen and record CRUD over HTTP."""

import re

import pytest
from httpx import AsyncClient

from app.core.constants import NONCE_ACTION, NONCE_FIELD
from tests.fakes import ReferencesHarness


@pytest.fixture
async def site(api_harness: ReferencesHarness) -> ReferencesHarness:
    h = api_harness
    h.records.add("post", "Source")
    h.records.add("post", "Beta")
    h.records.add("page", "About")
    await h.registry.upsert("post", "related", ["post", "page"], "Related")
    return h


class TestEditor:
    async def test_fields_page(self, client: AsyncClient, site: ReferencesHarness, editor_headers: dict) -> None:
        response = await client.get("/api/v1/records/1/editor/references", headers=editor_headers)
        assert response.status_code == 200
        assert 'name="_ref_related[]"' in response.text
        nonce = re.search(rf'name="{NONCE_FIELD}" value="([^"]+)"', response.text).group(1)
        site.nonces.verify(nonce, NONCE_ACTION, 1)

    async def test_fields_page_requires_edit_posts(self, client: AsyncClient, site: ReferencesHarness) -> None:
        response = await client.get("/api/v1/records/1/editor/references")
        assert response.status_code == 401

    async def test_fields_page_missing_record(
        self, client: AsyncClient, site: ReferencesHarness, editor_headers: dict
    ) -> None:
        response = await client.get("/api/v1/records/99/editor/references", headers=editor_headers)
        assert response.status_code == 404

    async def test_save(self, client: AsyncClient, site: ReferencesHarness, editor_headers: dict) -> None:
        nonce = site.nonces.create(NONCE_ACTION, 1)
        response = await client.post(
            "/api/v1/records/1/editor/references",
            data={NONCE_FIELD: nonce, "_ref_related[]": ["3", "2"]},
            headers=editor_headers,
        )
        assert response.status_code == 200
        assert response.json() == {"saved": True, "reason": None, "written_keys": ["related"]}
        assert await site.store.get(1, "related") == [3, 2]

    async def test_bad_nonce_is_silent(self, client: AsyncClient, site: ReferencesHarness, editor_headers: dict) -> None:
        response = await client.post(
            "/api/v1/records/1/editor/references",
            data={NONCE_FIELD: "forged", "_ref_related[]": ["2"]},
            headers=editor_headers,
        )
        assert response.status_code == 200
        assert response.json()["saved"] is False
        assert response.json()["reason"] == "invalid_nonce"
        assert site.meta.rows == {}

    async def test_autosave_skipped(self, client: AsyncClient, site: ReferencesHarness, editor_headers: dict) -> None:
        nonce = site.nonces.create(NONCE_ACTION, 1)
        response = await client.post(
            "/api/v1/records/1/editor/references",
            params={"autosave": True},
            data={NONCE_FIELD: nonce, "_ref_related[]": ["2"]},
            headers=editor_headers,
        )
        assert response.json()["reason"] == "autosave"


class TestAdminPage:
    async def test_requires_manage_options(
        self, client: AsyncClient, site: ReferencesHarness, editor_headers: dict
    ) -> None:
        response = await client.get("/api/v1/admin/references", headers=editor_headers)
        assert response.status_code == 403

    async def test_render(self, client: AsyncClient, site: ReferencesHarness, admin_headers: dict) -> None:
        response = await client.get("/api/v1/admin/references", headers=admin_headers)
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert 'name="ref_id" value="related"' in response.text

    async def test_add_with_multiselect(self, client: AsyncClient, site: ReferencesHarness, admin_headers: dict) -> None:
        response = await client.post(
            "/api/v1/admin/references",
            data={
                "action": "add_new_reference",
                "ref_title": "Pages",
                "ref_id": "pages",
                "ref_post": "post",
                "linked_post[]": ["page", "product"],
                "sbm": "Add",
            },
            headers=admin_headers,
        )
        assert response.status_code == 200
        assert "Reference added." in response.text
        [definition] = await site.registry.list(key="pages")
        assert definition.target_types == ("page", "product")

    async def test_delete(self, client: AsyncClient, site: ReferencesHarness, admin_headers: dict) -> None:
        response = await client.post(
            "/api/v1/admin/references",
            data={"action": "manage_reference", "sbm": "Delete", "ref_index": "1", "ref_title": "Related"},
            headers=admin_headers,
        )
        assert "Reference deleted." in response.text
        assert await site.registry.list() == []


class TestRecords:
    async def test_crud(self, client: AsyncClient, api_harness: ReferencesHarness, editor_headers: dict) -> None:
        response = await client.post(
            "/api/v1/records",
            json={"content_type": "post", "title": "Hello", "slug": "hello", "status": "publish"},
            headers=editor_headers,
        )
        assert response.status_code == 201
        record_id = response.json()["id"]

        response = await client.patch(
            f"/api/v1/records/{record_id}", json={"title": "Hello again"}, headers=editor_headers
        )
        assert response.json()["title"] == "Hello again"
        assert response.json()["slug"] == "hello"

        response = await client.get(f"/api/v1/records/{record_id}")
        assert response.json()["status"] == "publish"

        response = await client.delete(f"/api/v1/records/{record_id}", headers=editor_headers)
        assert response.status_code == 204
        assert (await client.get(f"/api/v1/records/{record_id}")).status_code == 404

    async def test_unknown_content_type(
        self, client: AsyncClient, api_harness: ReferencesHarness, editor_headers: dict
    ) -> None:
        response = await client.post(
            "/api/v1/records", json={"content_type": "movie", "title": "x"}, headers=editor_headers
        )
        assert response.status_code == 400
        assert response.json()["details"] == {"field": "content_type"}

    async def test_missing_record(self, client: AsyncClient, api_harness: ReferencesHarness, editor_headers: dict) -> None:
        assert (await client.patch("/api/v1/records/5", json={}, headers=editor_headers)).status_code == 404
        assert (await client.delete("/api/v1/records/5", headers=editor_headers)).status_code == 404
        assert (await client.get("/api/v1/records/5/content")).status_code == 404
