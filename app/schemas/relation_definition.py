"""Relation definition API schemas."""

from pydantic import BaseModel, ConfigDict, Field

from app.domain.enums import RejectionReason, UpsertOutcome


class RelationDefinitionUpsertRequest(BaseModel):
    """Request body for PUT /references/definitions.

    target_types accepts a single content type name or a list.
    """

    source_type: str = Field(..., min_length=1, max_length=64)
    key: str = Field(..., min_length=1, max_length=191)
    target_types: list[str] | str | None = None
    title: str = Field(default="", max_length=255)


class RelationDefinitionResponse(BaseModel):
    """One relation definition."""

    model_config = ConfigDict(from_attributes=True)

    internal_id: int
    key: str
    title: str
    source_type: str
    target_types: list[str]
    meta_key: str


class UpsertResponse(BaseModel):
    """Outcome of an upsert: created or updated definition id, or rejection reason."""

    model_config = ConfigDict(from_attributes=True)

    outcome: UpsertOutcome
    internal_id: int | None = None
    reason: RejectionReason | None = None
    detail: str | None = None


class RemoveResponse(BaseModel):
    """Number of definitions removed."""

    removed: int
