"""Application services: relation registry, attachment store, reverse index."""

from app.application.services.attachment_store import AttachmentStore
from app.application.services.config_store import ConfigStore
from app.application.services.reference_filters import ReferenceFilters
from app.application.services.relation_registry import RelationRegistry
from app.application.services.reverse_index import ReverseIndex

__all__ = [
    "AttachmentStore",
    "ConfigStore",
    "ReferenceFilters",
    "RelationRegistry",
    "ReverseIndex",
]
