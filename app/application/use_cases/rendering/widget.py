"""Sidebar widget listing one relation's published targets for the current record."""

from __future__ import annotations

import logging
from typing import Any

from app.application.dtos.rendering import ReferenceItem, WidgetArgs, WidgetInstance
from app.application.interfaces.repositories import (
    IRecordMetaRepository,
    IRecordRepository,
)
from app.application.interfaces.services import IPermalinkBuilder, ITemplateRenderer
from app.application.services.relation_registry import RelationRegistry
from app.domain.value_objects import RecordIdList, RelationKey
from app.shared.utils.sanitization import InputSanitizer

logger = logging.getLogger(__name__)

WIDGET_TEMPLATE = "widget.html"
WIDGET_FORM_TEMPLATE = "widget_form.html"


class ReferencesWidget:
    """Configurable widget: title, message and one '_ref_<key>' to list.

    Output is produced only on a single-record view whose content type has a
    definition with that meta key, and only when at least one attached
    target is published.
    """

    def __init__(
        self,
        registry: RelationRegistry,
        record_repo: IRecordRepository,
        meta_repo: IRecordMetaRepository,
        templates: ITemplateRenderer,
        permalinks: IPermalinkBuilder,
    ) -> None:
        self.registry = registry
        self.record_repo = record_repo
        self.meta_repo = meta_repo
        self.templates = templates
        self.permalinks = permalinks

    def update(
        self, new_instance: dict[str, Any], old_instance: dict[str, Any] | None = None
    ) -> WidgetInstance:
        """Merge new settings over old ones, stripping markup from every value."""
        merged = dict(old_instance or {})
        for name, value in (new_instance or {}).items():
            merged[name] = InputSanitizer.strip_tags(str(value) if value is not None else "")
        return WidgetInstance.from_mapping(merged)

    async def render(
        self,
        instance: WidgetInstance,
        current_record_id: int | None,
        args: WidgetArgs | None = None,
    ) -> str:
        if current_record_id is None or not instance.ref:
            return ""
        record = await self.record_repo.get_by_id(current_record_id)
        if record is None:
            return ""

        try:
            relation_key = RelationKey.from_meta_key(instance.ref)
        except ValueError:
            return ""
        definitions = await self.registry.list(
            source_type=record.content_type, key=relation_key.value
        )
        if not definitions:
            return ""
        definition = definitions[0]

        ids = RecordIdList.from_raw(await self.meta_repo.get_value(record.id, definition.meta_key))
        if not ids:
            return ""
        published = await self.record_repo.get_published_by_ids(ids.as_list())
        if not published:
            return ""

        items = [
            ReferenceItem(
                record_id=r.id,
                title=r.title,
                url=self.permalinks.permalink(r.id, r.content_type, r.slug),
                content_type=r.content_type,
            )
            for r in published
        ]
        return self.templates.render(
            WIDGET_TEMPLATE,
            args=args or WidgetArgs(),
            instance=instance,
            items=items,
        )

    async def form(self, instance: WidgetInstance) -> str:
        """Settings form: title, message and a select of every definition's meta key."""
        definitions = await self.registry.list()
        return self.templates.render(
            WIDGET_FORM_TEMPLATE,
            instance=instance,
            definitions=definitions,
        )
