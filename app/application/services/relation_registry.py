"""Relation registry: query and update relation definitions held by the ConfigStore."""

from __future__ import annotations

import logging
from typing import Any

from app.application.dtos.relation_definition import UpsertResult
from app.application.interfaces.repositories import IContentTypeRepository
from app.application.services.config_store import ConfigStore
from app.domain.entities import RelationDefinition
from app.domain.enums import RejectionReason
from app.domain.value_objects import RelationKey, TypeList
from app.shared.telemetry.tracing import traced

logger = logging.getLogger(__name__)


class RelationRegistry:
    """List, upsert and remove relation definitions.

    Two write paths exist. The programmatic one (upsert/remove) is keyed by
    (source_type, key) and validates content types. The admin-form one
    (append/replace/delete) is keyed by internal id and does not check that
    content types exist.
    """

    def __init__(
        self,
        config_store: ConfigStore,
        content_type_repo: IContentTypeRepository,
    ) -> None:
        self.config_store = config_store
        self.content_type_repo = content_type_repo

    async def list(
        self, source_type: str | None = None, key: str | None = None
    ) -> list[RelationDefinition]:
        """Definitions matching source_type and/or key (exact), in storage order."""
        settings = await self.config_store.load()
        return settings.filter(source_type=source_type, key=key)

    async def get(self, internal_id: int) -> RelationDefinition | None:
        settings = await self.config_store.load()
        return settings.refs.get(internal_id)

    async def next_id(self) -> int:
        """Internal id the next appended definition will receive."""
        settings = await self.config_store.load()
        return settings.next_id

    @traced("references.registry.upsert")
    async def upsert(
        self,
        source_type: str,
        key: str,
        target_types: Any,
        title: str,
    ) -> UpsertResult:
        """Create or update the definition for (source_type, key).

        target_types may be a single name or a list; it must be non-empty and
        name existing content types. An existing (source_type, key) pair is
        updated in place and keeps its internal id.
        """
        relation_key = RelationKey.parse(key)
        if relation_key is None:
            return UpsertResult.rejected(RejectionReason.INVALID_KEY, key)
        key = relation_key.value
        if not await self.content_type_repo.exists(source_type):
            return UpsertResult.rejected(RejectionReason.UNKNOWN_SOURCE_TYPE, source_type)
        types = TypeList.from_raw(target_types)
        if not types:
            return UpsertResult.rejected(RejectionReason.EMPTY_TARGET_TYPES)
        for name in types:
            if not await self.content_type_repo.exists(name):
                return UpsertResult.rejected(RejectionReason.UNKNOWN_TARGET_TYPE, name)

        settings = await self.config_store.load()
        existing = settings.find_first(source_type, key)
        if existing is None:
            created = settings.append(key, title, source_type, types)
            await self.config_store.save(settings)
            logger.info(
                "Created relation definition %d (%s on %s)",
                created.internal_id,
                key,
                source_type,
            )
            return UpsertResult.created(created.internal_id)

        settings.replace(existing.internal_id, title=title, target_types=types)
        await self.config_store.save(settings)
        logger.info(
            "Updated relation definition %d (%s on %s)",
            existing.internal_id,
            key,
            source_type,
        )
        return UpsertResult.updated(existing.internal_id)

    async def remove(self, source_type: str, key: str) -> int:
        """Delete every definition matching (source_type, key). Returns how many.

        Attachment data stored under the key is left untouched.
        """
        settings = await self.config_store.load()
        matches = settings.filter(source_type=source_type, key=key)
        if not matches:
            return 0
        for definition in matches:
            settings.discard(definition.internal_id)
        await self.config_store.save(settings)
        logger.info(
            "Removed %d relation definition(s) for %s on %s", len(matches), key, source_type
        )
        return len(matches)

    async def append(
        self,
        key: str,
        title: str,
        source_type: str,
        target_types: Any,
    ) -> RelationDefinition:
        """Admin-form add. Content types are stored as given, without existence checks."""
        settings = await self.config_store.load()
        if settings.find_first(source_type, key) is not None:
            logger.warning(
                "Relation key %r already defined on %s; both fields will share one attachment list",
                key,
                source_type,
            )
        created = settings.append(key, title, source_type, TypeList.from_raw(target_types))
        await self.config_store.save(settings)
        await self._warn_unknown_types(created)
        return created

    async def replace(
        self,
        internal_id: int,
        *,
        key: str,
        title: str,
        source_type: str,
        target_types: Any,
    ) -> RelationDefinition | None:
        """Admin-form update of one definition by internal id. None if unknown."""
        settings = await self.config_store.load()
        updated = settings.replace(
            internal_id,
            key=key,
            title=title,
            source_type=source_type,
            target_types=TypeList.from_raw(target_types),
        )
        if updated is None:
            return None
        await self.config_store.save(settings)
        await self._warn_unknown_types(updated)
        return updated

    async def delete(self, internal_id: int) -> bool:
        """Admin-form delete by internal id. Attachment data is orphaned, not purged."""
        settings = await self.config_store.load()
        if not settings.discard(internal_id):
            return False
        await self.config_store.save(settings)
        logger.info("Deleted relation definition %d", internal_id)
        return True

    async def _warn_unknown_types(self, definition: RelationDefinition) -> None:
        for name in (definition.source_type, *definition.target_types):
            if not await self.content_type_repo.exists(name):
                logger.warning(
                    "Relation definition %d references unknown content type %r",
                    definition.internal_id,
                    name,
                )
