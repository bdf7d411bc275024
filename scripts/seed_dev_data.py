"""Seed dev data from scripts/seed-data.json into Postgres.

Loads content types (skipped when present), records, relation definitions
(via RelationRegistry.upsert) and attachments (via AttachmentStore.set).
Attachments name records by their "ref" handle from the same file.

Usage:
    python -m scripts.seed_dev_data [path/to/seed-data.json]

Requires: DATABASE_URL (Postgres), migrated DB (alembic upgrade head).
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

from app.application.services import (
    AttachmentStore,
    ConfigStore,
    RelationRegistry,
)
from app.core.config import get_settings
from app.domain.enums import RecordStatus
from app.infrastructure.persistence.database import get_session_factory
from app.infrastructure.persistence.repositories import (
    ContentTypeRepository,
    OptionRepository,
    RecordMetaRepository,
    RecordRepository,
)


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def run(path: Path) -> None:
    _load_env()
    get_settings.cache_clear()
    settings = get_settings()
    data = json.loads(path.read_text(encoding="utf-8"))

    factory = get_session_factory()
    async with factory() as session:
        async with session.begin():
            content_type_repo = ContentTypeRepository(session)
            record_repo = RecordRepository(session)
            config_store = ConfigStore(
                OptionRepository(session),
                option_name=settings.settings_option_name,
            )
            await config_store.install()
            registry = RelationRegistry(config_store, content_type_repo)
            store = AttachmentStore(registry, record_repo, RecordMetaRepository(session))

            for ct in data.get("content_types", []):
                if await content_type_repo.exists(ct["name"]):
                    print(f"  Content type {ct['name']} already exists, skip")
                    continue
                await content_type_repo.create(
                    ct["name"], ct.get("label", ct["name"]), show_ui=ct.get("show_ui", True)
                )
                print(f"  Content type {ct['name']}")

            record_ids: dict[str, int] = {}
            for r in data.get("records", []):
                created = await record_repo.create(
                    r["content_type"],
                    r["title"],
                    slug=r.get("slug"),
                    status=RecordStatus(r.get("status", "publish")),
                    body=r.get("body", ""),
                )
                record_ids[r["ref"]] = created.id
                print(f"  Record {r['ref']} ({created.content_type}) -> {created.id}")

            for d in data.get("definitions", []):
                result = await registry.upsert(
                    d["source_type"], d["key"], d.get("target_types"), d.get("title", "")
                )
                if result.ok:
                    print(f"  Definition {d['key']} on {d['source_type']}: {result.outcome.value}")
                else:
                    print(
                        f"  Skip definition {d['key']}: {result.reason.value} {result.detail or ''}",
                        file=sys.stderr,
                    )

            for a in data.get("attachments", []):
                source = record_ids.get(a["record"])
                if source is None:
                    print(f"  Skip attachment: record {a['record']} not found", file=sys.stderr)
                    continue
                targets = [record_ids[t] for t in a.get("targets", []) if t in record_ids]
                if await store.set(source, a["key"], targets):
                    print(f"  Attached {a['key']} on {a['record']}: {targets}")
                else:
                    print(
                        f"  Skip attachment {a['key']} on {a['record']}: key not defined",
                        file=sys.stderr,
                    )

    print("Seed completed.")


def main() -> None:
    root = _project_root()
    path_arg = sys.argv[1] if len(sys.argv) > 1 else None
    path = Path(path_arg) if path_arg else root / "scripts" / "seed-data.json"
    if not path.is_absolute():
        path = (root / path).resolve()
    asyncio.run(run(path))


if __name__ == "__main__":
    main()
