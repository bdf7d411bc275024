"""Record meta repository: JSON-encoded key/value rows per record."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.record import ReferenceMetaRow
from app.domain.enums import RecordStatus
from app.infrastructure.persistence.models.record import Record
from app.infrastructure.persistence.models.record_meta import RecordMeta

logger = logging.getLogger(__name__)


class RecordMetaRepository:
    """Per-record meta values. Values are stored as JSON text."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_value(self, record_id: int, meta_key: str) -> Any | None:
        """Decoded value, or None when absent or not valid JSON."""
        result = await self.db.execute(
            select(RecordMeta.meta_value).where(
                RecordMeta.record_id == record_id,
                RecordMeta.meta_key == meta_key,
            )
        )
        raw = result.scalar_one_or_none()
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning(
                "Undecodable meta value on record %s (%s)", record_id, meta_key
            )
            return None

    async def set_value(self, record_id: int, meta_key: str, value: Any) -> None:
        """Create or overwrite one meta row (single upsert statement)."""
        encoded = json.dumps(value)
        stmt = insert(RecordMeta).values(
            record_id=record_id, meta_key=meta_key, meta_value=encoded
        )
        stmt = stmt.on_conflict_do_update(
            constraint="uq_record_meta_record_key",
            set_={"meta_value": stmt.excluded.meta_value},
        )
        await self.db.execute(stmt)

    async def scan_prefix(
        self,
        prefix: str,
        *,
        source_types: Iterable[str] | None = None,
        only_published: bool = False,
    ) -> list[ReferenceMetaRow]:
        """Every meta row whose key literally starts with prefix, joined with its record."""
        stmt = (
            select(
                RecordMeta.record_id,
                Record.content_type,
                RecordMeta.meta_key,
                RecordMeta.meta_value,
            )
            .join(Record, Record.id == RecordMeta.record_id)
            .where(RecordMeta.meta_key.startswith(prefix, autoescape=True))
            .order_by(RecordMeta.record_id.asc(), RecordMeta.meta_key.asc())
        )
        types = [t for t in (source_types or []) if t]
        if types:
            stmt = stmt.where(Record.content_type.in_(types))
        if only_published:
            stmt = stmt.where(Record.status == RecordStatus.PUBLISH.value)
        result = await self.db.execute(stmt)
        return [
            ReferenceMetaRow(
                record_id=row.record_id,
                record_type=row.content_type,
                meta_key=row.meta_key,
                meta_value=row.meta_value,
            )
            for row in result.all()
        ]
