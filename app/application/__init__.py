"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories, cache, nonces, templates).
"""

from app.application.interfaces import (
    ICacheService,
    IContentTypeRepository,
    INonceService,
    IOptionRepository,
    IPermalinkBuilder,
    IRecordMetaRepository,
    IRecordRepository,
    ITemplateRenderer,
)
from app.application.services import (
    AttachmentStore,
    ConfigStore,
    ReferenceFilters,
    RelationRegistry,
    ReverseIndex,
)

__all__ = [
    "AttachmentStore",
    "ConfigStore",
    "ICacheService",
    "IContentTypeRepository",
    "INonceService",
    "IOptionRepository",
    "IPermalinkBuilder",
    "IRecordMetaRepository",
    "IRecordRepository",
    "ITemplateRenderer",
    "ReferenceFilters",
    "RelationRegistry",
    "ReverseIndex",
]
