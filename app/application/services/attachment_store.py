"""Attachment store: per-record target id lists, one per relation key, in record meta."""

from __future__ import annotations

import logging
from typing import Any

from app.application.interfaces.repositories import (
    IRecordMetaRepository,
    IRecordRepository,
)
from app.application.services.relation_registry import RelationRegistry
from app.domain.value_objects import RecordIdList
from app.shared.telemetry.tracing import traced

logger = logging.getLogger(__name__)


class AttachmentStore:
    """Read and replace the target ids attached to a record.

    Only keys defined for the record's content type are reachable. Writes
    replace the whole list in a single meta write (no merge).
    """

    def __init__(
        self,
        registry: RelationRegistry,
        record_repo: IRecordRepository,
        meta_repo: IRecordMetaRepository,
    ) -> None:
        self.registry = registry
        self.record_repo = record_repo
        self.meta_repo = meta_repo

    async def get_all(self, record_id: int) -> dict[str, list[int]] | None:
        """Map of relation key to attached ids for every definition on the record's type.

        Returns None when the record does not exist. Absent lists read as [].
        """
        record = await self.record_repo.get_by_id(record_id)
        if record is None:
            return None
        links: dict[str, list[int]] = {}
        for definition in await self.registry.list(source_type=record.content_type):
            raw = await self.meta_repo.get_value(record.id, definition.meta_key)
            links[definition.key] = RecordIdList.from_raw(raw).as_list()
        return links

    async def get(self, record_id: int, key: str) -> list[int]:
        """Attached ids for one key; [] when the record or definition is missing."""
        links = await self.get_all(record_id)
        if not links:
            return []
        return links.get(key, [])

    @traced("references.attachments.set")
    async def set(self, record_id: int, key: str, target_ids: Any) -> bool:
        """Replace the ids stored under key. False if record or definition is missing."""
        record = await self.record_repo.get_by_id(record_id)
        if record is None:
            logger.debug("set attachments: record %s not found", record_id)
            return False
        definitions = await self.registry.list(source_type=record.content_type, key=key)
        if not definitions:
            logger.debug(
                "set attachments: no definition %r for content type %s",
                key,
                record.content_type,
            )
            return False
        ids = RecordIdList.from_raw(target_ids)
        await self.meta_repo.set_value(record.id, definitions[0].meta_key, ids.as_list())
        return True
