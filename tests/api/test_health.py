"""Health, root page and request id header."""

import pytest
from httpx import AsyncClient

from app.core.config import get_settings


async def test_liveness(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": get_settings().app_version}


async def test_readiness_without_database(client: AsyncClient) -> None:
    if get_settings().sql_configured:
        pytest.skip("DATABASE_URL is set")
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "not_configured"}


async def test_root_page(client: AsyncClient) -> None:
    response = await client.get("/")
    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "/docs" in response.text


async def test_request_id_forwarded_or_generated(client: AsyncClient) -> None:
    header = get_settings().request_id_header
    response = await client.get("/api/v1/health", headers={header: "trace-42"})
    assert response.headers[header] == "trace-42"

    response = await client.get("/api/v1/health", headers={header: "not valid!"})
    assert response.headers[header] != "not valid!"
    assert len(response.headers[header]) == 36
