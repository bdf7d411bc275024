"""Option repository: named JSON blobs (the reference settings live here)."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.models.option import Option
from app.infrastructure.persistence.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class OptionRepository(BaseRepository[Option]):
    """Get, overwrite or add-if-missing a named option."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Option)

    async def get(self, name: str) -> Any | None:
        """Return the stored value, or None when the option does not exist."""
        row = await self.get_model(name)
        return row.value if row else None

    async def set(self, name: str, value: Any) -> None:
        """Create or overwrite the option (full replace)."""
        row = await self.get_model(name)
        if row is None:
            await self.create(Option(name=name, value=value))
            return
        row.value = value
        await self.update(row)

    async def add(self, name: str, value: Any) -> bool:
        """Insert the option unless it exists. Returns True if it was created."""
        stmt = (
            insert(Option)
            .values(name=name, value=value)
            .on_conflict_do_nothing(index_elements=[Option.name])
        )
        result = await self.db.execute(stmt)
        created = bool(result.rowcount)
        if created:
            logger.info("Option %s created", name)
        return created
