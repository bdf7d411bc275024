"""Reference list rendering: attached, published targets as one <ul> per relation key."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from app.application.dtos.record import RecordResult
from app.application.dtos.rendering import ReferenceBlock, ReferenceItem
from app.application.interfaces.repositories import IRecordRepository
from app.application.interfaces.services import IPermalinkBuilder, ITemplateRenderer
from app.application.services.attachment_store import AttachmentStore
from app.application.services.reference_filters import ReferenceFilters

logger = logging.getLogger(__name__)

REFERENCE_LIST_TEMPLATE = "reference_list.html"


class ReferenceListRenderer:
    """Builds and renders reference blocks for a record.

    A key with no attached ids, or whose targets are all unpublished (or
    filtered away), produces no block at all.
    """

    def __init__(
        self,
        attachment_store: AttachmentStore,
        record_repo: IRecordRepository,
        filters: ReferenceFilters,
        templates: ITemplateRenderer,
        permalinks: IPermalinkBuilder,
    ) -> None:
        self.attachment_store = attachment_store
        self.record_repo = record_repo
        self.filters = filters
        self.templates = templates
        self.permalinks = permalinks

    def _to_item(self, record: RecordResult) -> ReferenceItem:
        return ReferenceItem(
            record_id=record.id,
            title=record.title,
            url=self.permalinks.permalink(record.id, record.content_type, record.slug),
            content_type=record.content_type,
        )

    async def blocks(
        self,
        record_id: int,
        key: str | None = None,
        attrs: Mapping[str, Any] | None = None,
    ) -> list[ReferenceBlock]:
        """Blocks for record_id, restricted to key when given."""
        attrs = attrs if attrs is not None else {"id": record_id, "key": key}
        links = await self.attachment_store.get_all(record_id)
        if not links:
            return []
        blocks: list[ReferenceBlock] = []
        for rel_key, ids in links.items():
            if key is not None and rel_key != key:
                continue
            if not ids:
                continue
            published = await self.record_repo.get_published_by_ids(ids)
            items = self.filters.apply_items(
                [self._to_item(r) for r in published], attrs, rel_key, ids
            )
            if not items:
                continue
            blocks.append(ReferenceBlock(key=rel_key, ids=tuple(ids), items=tuple(items)))
        return blocks

    async def render(self, record_id: int, key: str | None = None) -> str:
        """HTML for every non-empty block, each passed through the output filters."""
        attrs = {"id": record_id, "key": key}
        output: list[str] = []
        for block in await self.blocks(record_id, key=key, attrs=attrs):
            html = self.templates.render(REFERENCE_LIST_TEMPLATE, block=block)
            output.append(self.filters.apply_output(html, attrs, block.key, block.ids))
        logger.debug("Rendered %d reference block(s) for record %s", len(output), record_id)
        return "".join(output)
