"""Record repository. Returns application DTOs."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.record import RecordResult
from app.domain.enums import RecordStatus
from app.infrastructure.persistence.models.record import Record
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.datetime import ensure_utc


def _to_result(r: Record) -> RecordResult:
    """Map ORM to RecordResult."""
    return RecordResult(
        id=r.id,
        content_type=r.content_type,
        title=r.title,
        slug=r.slug,
        status=RecordStatus(r.status),
        body=r.body or "",
        created_at=ensure_utc(r.created_at),
        updated_at=ensure_utc(r.updated_at),
    )


class RecordRepository(BaseRepository[Record]):
    """Content records."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Record)

    async def get_by_id(self, record_id: int) -> RecordResult | None:
        row = await self.get_model(record_id)
        return _to_result(row) if row else None

    async def get_published_by_ids(self, record_ids: Iterable[int]) -> list[RecordResult]:
        """Published records among record_ids, in the order of record_ids."""
        ids = list(dict.fromkeys(record_ids))
        if not ids:
            return []
        result = await self.db.execute(
            select(Record).where(
                Record.id.in_(ids),
                Record.status == RecordStatus.PUBLISH.value,
            )
        )
        by_id = {r.id: r for r in result.scalars().all()}
        return [_to_result(by_id[i]) for i in ids if i in by_id]

    async def list_published(
        self, content_types: Iterable[str] | None = None
    ) -> list[RecordResult]:
        """Published records (of content_types when given) ordered by title."""
        stmt = (
            select(Record)
            .where(Record.status == RecordStatus.PUBLISH.value)
            .order_by(Record.title.asc(), Record.id.asc())
        )
        types = [t for t in (content_types or []) if t]
        if types:
            stmt = stmt.where(Record.content_type.in_(types))
        result = await self.db.execute(stmt)
        return [_to_result(r) for r in result.scalars().all()]

    async def create(  # type: ignore[override]
        self,
        content_type: str,
        title: str,
        *,
        slug: str | None = None,
        status: RecordStatus = RecordStatus.DRAFT,
        body: str = "",
    ) -> RecordResult:
        entity = Record(
            content_type=content_type,
            title=title,
            slug=slug,
            status=RecordStatus(status).value,
            body=body,
        )
        created = await super().create(entity)
        return _to_result(created)

    async def update(  # type: ignore[override]
        self,
        record_id: int,
        *,
        title: str | None = None,
        slug: str | None = None,
        status: RecordStatus | None = None,
        body: str | None = None,
    ) -> RecordResult | None:
        """Partially update a record; None if not found."""
        entity = await self.get_model(record_id)
        if entity is None:
            return None
        if title is not None:
            entity.title = title
        if slug is not None:
            entity.slug = slug
        if status is not None:
            entity.status = RecordStatus(status).value
        if body is not None:
            entity.body = body
        updated = await super().update(entity)
        return _to_result(updated)

    async def delete(self, record_id: int) -> bool:  # type: ignore[override]
        """Delete a record; its meta rows go with it."""
        entity = await self.get_model(record_id)
        if entity is None:
            return False
        await super().delete(entity)
        return True
