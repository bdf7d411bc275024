"""Content type repository. Returns application DTOs."""

from __future__ import annotations

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.content_type import ContentTypeResult
from app.domain.exceptions import ValidationException
from app.infrastructure.persistence.models.content_type import ContentType
from app.infrastructure.persistence.repositories.base import BaseRepository


def _to_result(c: ContentType) -> ContentTypeResult:
    """Map ORM to ContentTypeResult."""
    return ContentTypeResult(name=c.name, label=c.label, show_ui=c.show_ui)


class ContentTypeRepository(BaseRepository[ContentType]):
    """Registered content types."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, ContentType)

    async def exists(self, name: str) -> bool:
        if not name:
            return False
        result = await self.db.execute(
            select(exists().where(ContentType.name == name))
        )
        return bool(result.scalar())

    async def get(self, name: str) -> ContentTypeResult | None:
        row = await self.get_model(name)
        return _to_result(row) if row else None

    async def list_all(self, *, show_ui_only: bool = False) -> list[ContentTypeResult]:
        """Return content types ordered by name."""
        stmt = select(ContentType).order_by(ContentType.name.asc())
        if show_ui_only:
            stmt = stmt.where(ContentType.show_ui.is_(True))
        result = await self.db.execute(stmt)
        return [_to_result(c) for c in result.scalars().all()]

    async def create(  # type: ignore[override]
        self, name: str, label: str, show_ui: bool = True
    ) -> ContentTypeResult:
        """Register a content type; raise if the name is taken."""
        if await self.exists(name):
            raise ValidationException(
                f"Content type '{name}' already exists", field="name"
            )
        created = await super().create(
            ContentType(name=name, label=label, show_ui=show_ui)
        )
        return _to_result(created)
