"""Edit-screen reference fields: one multi-select per relation defined on the record's type."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from app.application.dtos.rendering import (
    CandidateOption,
    EditorField,
    EditorForm,
    SaveOutcome,
)
from app.application.interfaces.repositories import IRecordRepository
from app.application.interfaces.services import INonceService, ITemplateRenderer
from app.application.services.attachment_store import AttachmentStore
from app.application.services.relation_registry import RelationRegistry
from app.core.constants import NONCE_ACTION, NONCE_FIELD
from app.domain.exceptions import NonceVerificationException
from app.shared.telemetry.tracing import add_span_attributes, traced

logger = logging.getLogger(__name__)

EDITOR_FIELDS_TEMPLATE = "editor_fields.html"


class EditorFieldService:
    """Builds, renders and saves the reference fields of one record.

    Saving is all-or-nothing per submission: every definition on the
    record's type is written from the form, a missing field clearing its
    list. A bad nonce, an autosave or an empty submission writes nothing.
    """

    def __init__(
        self,
        registry: RelationRegistry,
        attachment_store: AttachmentStore,
        record_repo: IRecordRepository,
        nonce_service: INonceService,
        templates: ITemplateRenderer,
    ) -> None:
        self.registry = registry
        self.attachment_store = attachment_store
        self.record_repo = record_repo
        self.nonce_service = nonce_service
        self.templates = templates

    async def fields(self, record_id: int) -> EditorForm | None:
        """Fields for the record's edit screen; None if the record does not exist."""
        record = await self.record_repo.get_by_id(record_id)
        if record is None:
            return None
        selected = await self.attachment_store.get_all(record.id) or {}
        fields: list[EditorField] = []
        for definition in await self.registry.list(source_type=record.content_type):
            candidates = await self.record_repo.list_published(
                definition.target_types or None
            )
            fields.append(
                EditorField(
                    definition=definition,
                    field_name=definition.meta_key,
                    candidates=tuple(CandidateOption(c.id, c.title) for c in candidates),
                    selected=tuple(selected.get(definition.key, [])),
                )
            )
        return EditorForm(
            record_id=record.id,
            nonce=self.nonce_service.create(NONCE_ACTION, record.id),
            fields=tuple(fields),
        )

    async def render(self, record_id: int) -> str:
        form = await self.fields(record_id)
        if form is None or not form.fields:
            return ""
        return self.templates.render(
            EDITOR_FIELDS_TEMPLATE, form=form, nonce_field=NONCE_FIELD
        )

    @traced("references.editor.save")
    async def save(
        self,
        record_id: int,
        form: Mapping[str, Any],
        *,
        autosave: bool = False,
    ) -> SaveOutcome:
        """Persist submitted selections for every definition on the record's type."""
        if autosave:
            return SaveOutcome(saved=False, reason="autosave")
        if not form:
            return SaveOutcome(saved=False, reason="empty_form")
        try:
            self.nonce_service.verify(form.get(NONCE_FIELD), NONCE_ACTION, record_id)
        except NonceVerificationException as exc:
            logger.info(
                "Editor save for record %s ignored: %s", record_id, exc.details.get("reason")
            )
            return SaveOutcome(saved=False, reason="invalid_nonce")

        record = await self.record_repo.get_by_id(record_id)
        if record is None:
            return SaveOutcome(saved=False, reason="record_not_found")
        definitions = await self.registry.list(source_type=record.content_type)
        if not definitions:
            return SaveOutcome(saved=False, reason="no_definitions")

        written: list[str] = []
        for definition in definitions:
            if definition.key in written:
                continue
            await self.attachment_store.set(
                record.id, definition.key, form.get(definition.meta_key)
            )
            written.append(definition.key)
        add_span_attributes(**{"references.editor.written_keys": len(written)})
        logger.debug("Saved reference fields %s on record %s", written, record.id)
        return SaveOutcome(saved=True, written_keys=tuple(written))
