"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.content_type_repo import (
    ContentTypeRepository,
)
from app.infrastructure.persistence.repositories.option_repo import OptionRepository
from app.infrastructure.persistence.repositories.record_meta_repo import (
    RecordMetaRepository,
)
from app.infrastructure.persistence.repositories.record_repo import RecordRepository

__all__ = [
    "BaseRepository",
    "ContentTypeRepository",
    "OptionRepository",
    "RecordMetaRepository",
    "RecordRepository",
]
