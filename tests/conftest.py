"""Pytest configuration and fixtures for the references service.

Env is set before app.* is imported: Settings requires SECRET_KEY. HTTP tests
use app.main:app through httpx ASGITransport with the reference services
overridden by in-memory fakes (tests.fakes); DB-backed fixtures skip when
DATABASE_URL is unset.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-pytest-only-0123456789")
os.environ.setdefault("REDIS_ENABLED", "false")
os.environ.setdefault("TELEMETRY_ENABLED", "false")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from app.api.v1 import dependencies as deps  # noqa: E402
from app.core.config import get_settings  # noqa: E402
from app.core.constants import (  # noqa: E402
    CAPABILITY_EDIT_POSTS,
    CAPABILITY_MANAGE_OPTIONS,
)
from app.core.limiter import limiter  # noqa: E402
from app.infrastructure.security.jwt import create_capability_token  # noqa: E402
from app.main import app  # noqa: E402
from tests.fakes import ReferencesHarness  # noqa: E402

limiter.enabled = False


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def harness() -> ReferencesHarness:
    """Reference services over in-memory stores; content types post, page, product."""
    return ReferencesHarness("post", "page", "product")


@pytest.fixture
def api_harness(harness: ReferencesHarness):
    """Route every reference dependency to the harness for the duration of a test."""
    h = harness
    overrides = {
        deps.get_content_type_repo: lambda: h.content_types,
        deps.get_content_type_repo_for_write: lambda: h.content_types,
        deps.get_record_repo: lambda: h.records,
        deps.get_record_repo_for_write: lambda: h.records,
        deps.get_relation_registry: lambda: h.registry,
        deps.get_relation_registry_for_write: lambda: h.registry,
        deps.get_attachment_store: lambda: h.store,
        deps.get_attachment_store_for_write: lambda: h.store,
        deps.get_reverse_index: lambda: h.reverse,
        deps.get_reference_list_renderer: lambda: h.renderer,
        deps.get_shortcode_expander: lambda: h.expander,
        deps.get_references_widget: lambda: h.widget,
        deps.get_editor_field_service: lambda: h.editor,
        deps.get_editor_field_service_for_write: lambda: h.editor,
        deps.get_settings_page_service: lambda: h.settings_page,
    }
    app.dependency_overrides.update(overrides)
    yield h
    app.dependency_overrides.clear()


def _bearer(*capabilities: str) -> dict[str, str]:
    token = create_capability_token("tester", capabilities)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers() -> dict[str, str]:
    """Bearer token with manage_options and edit_posts."""
    return _bearer(CAPABILITY_MANAGE_OPTIONS, CAPABILITY_EDIT_POSTS)


@pytest.fixture
def editor_headers() -> dict[str, str]:
    """Bearer token with edit_posts only."""
    return _bearer(CAPABILITY_EDIT_POSTS)


@pytest.fixture
async def db_session() -> AsyncSession:
    """Database session for repository/integration tests. Rolls back after test.

    Skips (pytest.skip) when DATABASE_URL is not set. Use
    @pytest.mark.requires_db on tests that need it; run without DB via:
    pytest -m 'not requires_db'.
    """
    if not get_settings().sql_configured:
        pytest.skip(
            "Postgres not configured: set DATABASE_URL, then run: alembic upgrade head"
        )
    from app.infrastructure.persistence.database import get_session_factory

    async with get_session_factory()() as session:
        yield session
        await session.rollback()
