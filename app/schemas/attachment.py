"""Attachment (per-record target ids) API schemas."""

from pydantic import BaseModel, Field


class AttachmentSetRequest(BaseModel):
    """Request body for PUT /records/{id}/references/{key}. Replaces the whole list."""

    target_ids: list[int | str] = Field(default_factory=list)


class AttachmentResponse(BaseModel):
    """Ids attached to a record under one key."""

    record_id: int
    key: str
    target_ids: list[int]


class ReferencingRecordResponse(BaseModel):
    """Reverse lookup hit."""

    model_config = {"from_attributes": True}

    record_id: int
    record_type: str
    meta_key: str
    raw_value: str
