"""Record API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.enums import RecordStatus


class RecordCreateRequest(BaseModel):
    """Request body for creating a record."""

    content_type: str = Field(..., min_length=1, max_length=64)
    title: str = Field(..., max_length=500)
    slug: str | None = Field(default=None, max_length=255)
    status: RecordStatus = RecordStatus.DRAFT
    body: str = ""


class RecordUpdateRequest(BaseModel):
    """Request body for PATCH (partial update)."""

    title: str | None = Field(default=None, max_length=500)
    slug: str | None = Field(default=None, max_length=255)
    status: RecordStatus | None = None
    body: str | None = None


class RecordResponse(BaseModel):
    """Record response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    content_type: str
    title: str
    slug: str | None
    status: RecordStatus
    body: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class RenderedContentResponse(BaseModel):
    """Record body (or submitted body) with [ref] tags expanded."""

    record_id: int | None = None
    html: str
