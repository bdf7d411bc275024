"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.content_type import ContentType
from app.infrastructure.persistence.models.mixins import TimestampMixin
from app.infrastructure.persistence.models.option import Option
from app.infrastructure.persistence.models.record import Record
from app.infrastructure.persistence.models.record_meta import RecordMeta

__all__ = [
    "ContentType",
    "Option",
    "Record",
    "RecordMeta",
    "TimestampMixin",
]
