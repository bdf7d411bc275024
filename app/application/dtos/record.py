"""DTOs for content records and their reference meta (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime

from app.domain.enums import RecordStatus


@dataclass(frozen=True)
class RecordResult:
    """Content record read-model."""

    id: int
    content_type: str
    title: str
    slug: str | None
    status: RecordStatus
    body: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_published(self) -> bool:
        return self.status is RecordStatus.PUBLISH


@dataclass(frozen=True)
class ReferenceMetaRow:
    """One stored attachment row, joined with its owning record (raw, undecoded)."""

    record_id: int
    record_type: str
    meta_key: str
    meta_value: str | None


@dataclass(frozen=True)
class ReferencingRecord:
    """Reverse lookup hit: a record whose attachment list contains the target."""

    record_id: int
    record_type: str
    meta_key: str
    raw_value: str
