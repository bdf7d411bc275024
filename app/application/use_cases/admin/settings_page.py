"""Admin settings screen for relation definitions (add, update, delete by internal id)."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from app.application.dtos.settings_page import SettingsNotice
from app.application.interfaces.repositories import IContentTypeRepository
from app.application.interfaces.services import ITemplateRenderer
from app.application.services.relation_registry import RelationRegistry
from app.domain.enums import ManageButton, SettingsAction
from app.domain.value_objects import RelationKey, coerce_record_id

logger = logging.getLogger(__name__)

SETTINGS_PAGE_TEMPLATE = "settings_page.html"

MSG_TITLE_EMPTY = "Metabox title is empty!"
MSG_INVALID_KEY = "Meta key contains invalid chars!"
MSG_NOT_FOUND = "Reference not found."
MSG_ADDED = "Reference added."
MSG_UPDATED = "Reference updated."
MSG_DELETED = "Reference deleted."


def _text(form: Mapping[str, Any], name: str) -> str:
    value = form.get(name)
    if isinstance(value, (list, tuple)):
        value = value[0] if value else ""
    return str(value).strip() if value is not None else ""


class SettingsPageService:
    """Handles settings form posts and renders the settings page."""

    def __init__(
        self,
        registry: RelationRegistry,
        content_type_repo: IContentTypeRepository,
        templates: ITemplateRenderer,
    ) -> None:
        self.registry = registry
        self.content_type_repo = content_type_repo
        self.templates = templates

    async def handle(self, form: Mapping[str, Any]) -> list[SettingsNotice]:
        """Apply one submitted form; returns the notices to show above the page."""
        action = _text(form, "action")
        if action not in {a.value for a in SettingsAction}:
            return []

        title = _text(form, "ref_title")
        if not title:
            return [SettingsNotice("error", MSG_TITLE_EMPTY)]

        key = _text(form, "ref_id")
        source_type = _text(form, "ref_post")
        target_types = form.get("linked_post")

        if action == SettingsAction.ADD_NEW_REFERENCE.value:
            if RelationKey.parse(key) is None:
                return [SettingsNotice("error", MSG_INVALID_KEY)]
            created = await self.registry.append(key, title, source_type, target_types)
            logger.info("Settings page added definition %d (%s)", created.internal_id, key)
            return [SettingsNotice("success", MSG_ADDED)]

        internal_id = coerce_record_id(_text(form, "ref_index"))
        if internal_id is None:
            return [SettingsNotice("error", MSG_NOT_FOUND)]

        button = _text(form, "sbm")
        if button == ManageButton.DELETE.value:
            if not await self.registry.delete(internal_id):
                return [SettingsNotice("error", MSG_NOT_FOUND)]
            return [SettingsNotice("success", MSG_DELETED)]
        if button == ManageButton.UPDATE.value:
            if RelationKey.parse(key) is None:
                return [SettingsNotice("error", MSG_INVALID_KEY)]
            updated = await self.registry.replace(
                internal_id,
                key=key,
                title=title,
                source_type=source_type,
                target_types=target_types,
            )
            if updated is None:
                return [SettingsNotice("error", MSG_NOT_FOUND)]
            return [SettingsNotice("success", MSG_UPDATED)]
        return []

    async def render(self, notices: list[SettingsNotice] | None = None) -> str:
        definitions = await self.registry.list()
        content_types = await self.content_type_repo.list_all(show_ui_only=True)
        return self.templates.render(
            SETTINGS_PAGE_TEMPLATE,
            notices=notices or [],
            definitions=definitions,
            content_types=content_types,
            next_id=await self.registry.next_id(),
        )
