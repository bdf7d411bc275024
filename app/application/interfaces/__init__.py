"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure.
"""

from app.application.interfaces.repositories import (
    IContentTypeRepository,
    IOptionRepository,
    IRecordMetaRepository,
    IRecordRepository,
)
from app.application.interfaces.services import (
    ICacheService,
    INonceService,
    IPermalinkBuilder,
    ITemplateRenderer,
)

__all__ = [
    "ICacheService",
    "IContentTypeRepository",
    "INonceService",
    "IOptionRepository",
    "IPermalinkBuilder",
    "IRecordMetaRepository",
    "IRecordRepository",
    "ITemplateRenderer",
]
