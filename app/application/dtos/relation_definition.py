"""DTOs for relation definitions (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass

from app.domain.enums import RejectionReason, UpsertOutcome


@dataclass(frozen=True)
class UpsertResult:
    """Result of RelationRegistry.upsert: created, updated, or rejected with a reason."""

    outcome: UpsertOutcome
    internal_id: int | None = None
    reason: RejectionReason | None = None
    detail: str | None = None

    @classmethod
    def created(cls, internal_id: int) -> UpsertResult:
        return cls(UpsertOutcome.CREATED, internal_id=internal_id)

    @classmethod
    def updated(cls, internal_id: int) -> UpsertResult:
        return cls(UpsertOutcome.UPDATED, internal_id=internal_id)

    @classmethod
    def rejected(cls, reason: RejectionReason, detail: str | None = None) -> UpsertResult:
        return cls(UpsertOutcome.REJECTED, reason=reason, detail=detail)

    @property
    def ok(self) -> bool:
        return self.outcome is not UpsertOutcome.REJECTED
