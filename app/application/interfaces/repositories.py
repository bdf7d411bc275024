"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Protocol

from app.domain.enums import RecordStatus

if TYPE_CHECKING:
    from app.application.dtos.content_type import ContentTypeResult
    from app.application.dtos.record import RecordResult, ReferenceMetaRow


# Option (named blob) repository interface
class IOptionRepository(Protocol):
    """Protocol for the named-option key-value store (DIP)."""

    async def get(self, name: str) -> Any | None:
        """Return the decoded option value, or None when the option does not exist."""

    async def set(self, name: str, value: Any) -> None:
        """Create or overwrite the option (full replace)."""

    async def add(self, name: str, value: Any) -> bool:
        """Create the option only if missing. Returns True if it was created."""


# Content type repository interface
class IContentTypeRepository(Protocol):
    """Protocol for content type lookups (DIP)."""

    async def exists(self, name: str) -> bool:
        """Return True if a content type with this name is registered."""

    async def list_all(self, *, show_ui_only: bool = False) -> list[ContentTypeResult]:
        """Return content types ordered by name."""

    async def create(self, name: str, label: str, show_ui: bool = True) -> ContentTypeResult:
        """Register a content type; raise ValidationException if it exists."""


# Record repository interface
class IRecordRepository(Protocol):
    """Protocol for content record storage (DIP)."""

    async def get_by_id(self, record_id: int) -> RecordResult | None:
        """Return record by ID."""

    async def get_published_by_ids(self, record_ids: Iterable[int]) -> list[RecordResult]:
        """Return published records among record_ids, in the order of record_ids."""

    async def list_published(
        self, content_types: Iterable[str] | None = None
    ) -> list[RecordResult]:
        """Return published records (of content_types when given) ordered by title."""

    async def create(
        self,
        content_type: str,
        title: str,
        *,
        slug: str | None = None,
        status: RecordStatus = RecordStatus.DRAFT,
        body: str = "",
    ) -> RecordResult:
        """Create a record."""

    async def update(
        self,
        record_id: int,
        *,
        title: str | None = None,
        slug: str | None = None,
        status: RecordStatus | None = None,
        body: str | None = None,
    ) -> RecordResult | None:
        """Partially update a record; None if not found."""

    async def delete(self, record_id: int) -> bool:
        """Delete a record and (by cascade) all its meta rows."""


# Record meta repository interface
class IRecordMetaRepository(Protocol):
    """Protocol for per-record key-value meta storage (DIP)."""

    async def get_value(self, record_id: int, meta_key: str) -> Any | None:
        """Return the decoded value, or None when absent or not decodable."""

    async def set_value(self, record_id: int, meta_key: str, value: Any) -> None:
        """Create or overwrite one meta row with the JSON-encoded value."""

    async def scan_prefix(
        self,
        prefix: str,
        *,
        source_types: Iterable[str] | None = None,
        only_published: bool = False,
    ) -> list[ReferenceMetaRow]:
        """Return every meta row whose key starts with prefix, joined with its record."""
