"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, auth and the reference
services. Routes depend only on these, not on infrastructure directly.
"""

from app.api.v1.dependencies.auth import (
    CurrentUser,
    get_current_user,
    get_current_user_optional,
    require_capability,
)
from app.api.v1.dependencies.db import get_db, get_db_transactional
from app.api.v1.dependencies.forms import get_form_data
from app.api.v1.dependencies.references import (
    get_attachment_store,
    get_attachment_store_for_write,
    get_cache,
    get_content_type_repo,
    get_content_type_repo_for_write,
    get_editor_field_service,
    get_editor_field_service_for_write,
    get_nonce_service,
    get_permalink_builder,
    get_record_repo,
    get_record_repo_for_write,
    get_reference_filters,
    get_reference_list_renderer,
    get_references_widget,
    get_relation_registry,
    get_relation_registry_for_write,
    get_reverse_index,
    get_settings_page_service,
    get_shortcode_expander,
    get_template_renderer,
)

__all__ = [
    "CurrentUser",
    "get_attachment_store",
    "get_attachment_store_for_write",
    "get_cache",
    "get_content_type_repo",
    "get_content_type_repo_for_write",
    "get_current_user",
    "get_current_user_optional",
    "get_db",
    "get_db_transactional",
    "get_editor_field_service",
    "get_editor_field_service_for_write",
    "get_form_data",
    "get_nonce_service",
    "get_permalink_builder",
    "get_record_repo",
    "get_record_repo_for_write",
    "get_reference_filters",
    "get_reference_list_renderer",
    "get_references_widget",
    "get_relation_registry",
    "get_relation_registry_for_write",
    "get_reverse_index",
    "get_settings_page_service",
    "get_shortcode_expander",
    "get_template_renderer",
    "require_capability",
]
