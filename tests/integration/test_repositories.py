"""Repository and reference services against Postgres (requires DATABASE_URL and migrations)."""

import uuid

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services import AttachmentStore, ConfigStore, RelationRegistry, ReverseIndex
from app.domain.enums import RecordStatus, UpsertOutcome
from app.infrastructure.persistence.repositories import (
    ContentTypeRepository,
    OptionRepository,
    RecordMetaRepository,
    RecordRepository,
)

pytestmark = pytest.mark.requires_db


def _name(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:8]}"


async def test_option_add_is_idempotent(db_session: AsyncSession) -> None:
    repo = OptionRepository(db_session)
    name = _name("opt")
    assert await repo.add(name, {"a": 1}) is True
    assert await repo.add(name, {"a": 2}) is False
    assert await repo.get(name) == {"a": 1}
    await repo.set(name, {"a": 3})
    assert await repo.get(name) == {"a": 3}


async def test_record_meta_round_trip_and_scan(db_session: AsyncSession) -> None:
    types = ContentTypeRepository(db_session)
    source_type = _name("src")
    await types.create(source_type, "Source")
    records = RecordRepository(db_session)
    meta = RecordMetaRepository(db_session)

    published = await records.create(source_type, "A", status=RecordStatus.PUBLISH)
    draft = await records.create(source_type, "B")
    await meta.set_value(published.id, "_ref_related", [draft.id])
    await meta.set_value(published.id, "_ref_related", [draft.id, 7])
    await meta.set_value(draft.id, "_refuse", "x")
    await meta.set_value(draft.id, "other", [draft.id])

    assert await meta.get_value(published.id, "_ref_related") == [draft.id, 7]
    rows = await meta.scan_prefix("_ref_", source_types=[source_type])
    assert [(r.record_id, r.meta_key) for r in rows] == [(published.id, "_ref_related")]
    assert await meta.scan_prefix("_ref_", source_types=[source_type], only_published=True) == rows[:1]


async def test_registry_and_store_on_postgres(db_session: AsyncSession) -> None:
    types = ContentTypeRepository(db_session)
    source_type = _name("post")
    await types.create(source_type, "Posts")
    records = RecordRepository(db_session)
    meta = RecordMetaRepository(db_session)
    registry = RelationRegistry(ConfigStore(OptionRepository(db_session)), types)
    store = AttachmentStore(registry, records, meta)

    key = _name("k")
    result = await registry.upsert(source_type, key, source_type, "Related")
    assert result.outcome is UpsertOutcome.CREATED

    source = await records.create(source_type, "Source", status=RecordStatus.PUBLISH)
    target = await records.create(source_type, "Target", status=RecordStatus.PUBLISH)
    assert await store.set(source.id, key, [str(target.id)])
    assert await store.get(source.id, key) == [target.id]

    hits = await ReverseIndex(meta).find(target.id, source_types=[source_type])
    assert [h.record_id for h in hits] == [source.id]

    assert await registry.remove(source_type, key) == 1
