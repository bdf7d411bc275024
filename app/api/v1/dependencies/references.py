"""Reference services wired from repositories, cache, templates (composition root).

Read paths use get_db; write paths use get_db_transactional so one request
commits or rolls back as a unit.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.services import (
    ICacheService,
    INonceService,
    IPermalinkBuilder,
    ITemplateRenderer,
)
from app.application.services.attachment_store import AttachmentStore
from app.application.services.config_store import ConfigStore
from app.application.services.reference_filters import ReferenceFilters
from app.application.services.relation_registry import RelationRegistry
from app.application.services.reverse_index import ReverseIndex
from app.application.use_cases.admin import SettingsPageService
from app.application.use_cases.editor import EditorFieldService
from app.application.use_cases.rendering import (
    ReferenceListRenderer,
    ReferencesWidget,
    ShortcodeExpander,
)
from app.core.config import get_settings
from app.infrastructure.persistence.database import get_db, get_db_transactional
from app.infrastructure.persistence.repositories import (
    ContentTypeRepository,
    OptionRepository,
    RecordMetaRepository,
    RecordRepository,
)
from app.infrastructure.security.nonce import NonceService
from app.infrastructure.services import PermalinkBuilder, ReferenceTemplateRenderer

SETTINGS_PAGE_PATH = "/api/v1/admin/references"


# ---- Shared, session-independent services ----


def get_cache(request: Request) -> ICacheService | None:
    """Redis cache set by lifespan (None when disabled)."""
    return getattr(request.app.state, "cache", None)


def get_reference_filters(request: Request) -> ReferenceFilters:
    """Process-wide filter registry (app.state.reference_filters)."""
    filters = getattr(request.app.state, "reference_filters", None)
    if filters is None:
        filters = ReferenceFilters()
        request.app.state.reference_filters = filters
    return filters


@lru_cache
def get_template_renderer() -> ITemplateRenderer:
    """Compiled once per process; templates are immutable."""
    return ReferenceTemplateRenderer(template_globals={"settings_url": SETTINGS_PAGE_PATH})


def get_permalink_builder() -> IPermalinkBuilder:
    return PermalinkBuilder(get_settings().site_url)


def get_nonce_service() -> INonceService:
    settings = get_settings()
    return NonceService(
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
        ttl_minutes=settings.nonce_ttl_minutes,
    )


# ---- Repositories ----


def get_content_type_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ContentTypeRepository:
    return ContentTypeRepository(db)


def get_content_type_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> ContentTypeRepository:
    return ContentTypeRepository(db)


def get_record_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> RecordRepository:
    return RecordRepository(db)


def get_record_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> RecordRepository:
    return RecordRepository(db)


# ---- Registry / stores ----


def _config_store(db: AsyncSession, cache: ICacheService | None) -> ConfigStore:
    settings = get_settings()
    return ConfigStore(
        OptionRepository(db),
        cache,
        option_name=settings.settings_option_name,
        cache_ttl=settings.cache_ttl_settings,
    )


def get_relation_registry(
    db: Annotated[AsyncSession, Depends(get_db)],
    cache: Annotated[ICacheService | None, Depends(get_cache)],
) -> RelationRegistry:
    """Registry for read routes."""
    return RelationRegistry(_config_store(db, cache), ContentTypeRepository(db))


def get_relation_registry_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    cache: Annotated[ICacheService | None, Depends(get_cache)],
) -> RelationRegistry:
    """Registry for routes that save the settings blob."""
    return RelationRegistry(_config_store(db, cache), ContentTypeRepository(db))


def get_attachment_store(
    db: Annotated[AsyncSession, Depends(get_db)],
    registry: Annotated[RelationRegistry, Depends(get_relation_registry)],
) -> AttachmentStore:
    return AttachmentStore(registry, RecordRepository(db), RecordMetaRepository(db))


def get_attachment_store_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    cache: Annotated[ICacheService | None, Depends(get_cache)],
) -> AttachmentStore:
    registry = RelationRegistry(_config_store(db, cache), ContentTypeRepository(db))
    return AttachmentStore(registry, RecordRepository(db), RecordMetaRepository(db))


def get_reverse_index(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ReverseIndex:
    return ReverseIndex(RecordMetaRepository(db))


# ---- Rendering ----


def get_reference_list_renderer(
    db: Annotated[AsyncSession, Depends(get_db)],
    attachment_store: Annotated[AttachmentStore, Depends(get_attachment_store)],
    filters: Annotated[ReferenceFilters, Depends(get_reference_filters)],
    templates: Annotated[ITemplateRenderer, Depends(get_template_renderer)],
    permalinks: Annotated[IPermalinkBuilder, Depends(get_permalink_builder)],
) -> ReferenceListRenderer:
    return ReferenceListRenderer(
        attachment_store, RecordRepository(db), filters, templates, permalinks
    )


def get_shortcode_expander(
    renderer: Annotated[ReferenceListRenderer, Depends(get_reference_list_renderer)],
) -> ShortcodeExpander:
    return ShortcodeExpander(renderer)


def get_references_widget(
    db: Annotated[AsyncSession, Depends(get_db)],
    registry: Annotated[RelationRegistry, Depends(get_relation_registry)],
    templates: Annotated[ITemplateRenderer, Depends(get_template_renderer)],
    permalinks: Annotated[IPermalinkBuilder, Depends(get_permalink_builder)],
) -> ReferencesWidget:
    return ReferencesWidget(
        registry, RecordRepository(db), RecordMetaRepository(db), templates, permalinks
    )


# ---- Editor / admin ----


def get_editor_field_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    registry: Annotated[RelationRegistry, Depends(get_relation_registry)],
    attachment_store: Annotated[AttachmentStore, Depends(get_attachment_store)],
    nonce_service: Annotated[INonceService, Depends(get_nonce_service)],
    templates: Annotated[ITemplateRenderer, Depends(get_template_renderer)],
) -> EditorFieldService:
    """Editor fields for GET (read session)."""
    return EditorFieldService(
        registry, attachment_store, RecordRepository(db), nonce_service, templates
    )


def get_editor_field_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    cache: Annotated[ICacheService | None, Depends(get_cache)],
    nonce_service: Annotated[INonceService, Depends(get_nonce_service)],
    templates: Annotated[ITemplateRenderer, Depends(get_template_renderer)],
) -> EditorFieldService:
    """Editor fields for POST (one transaction for every key written)."""
    registry = RelationRegistry(_config_store(db, cache), ContentTypeRepository(db))
    record_repo = RecordRepository(db)
    store = AttachmentStore(registry, record_repo, RecordMetaRepository(db))
    return EditorFieldService(registry, store, record_repo, nonce_service, templates)


def get_settings_page_service(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    cache: Annotated[ICacheService | None, Depends(get_cache)],
    templates: Annotated[ITemplateRenderer, Depends(get_template_renderer)],
) -> SettingsPageService:
    content_types = ContentTypeRepository(db)
    registry = RelationRegistry(_config_store(db, cache), content_types)
    return SettingsPageService(registry, content_types, templates)
