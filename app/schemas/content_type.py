"""Content type API schemas."""

from pydantic import BaseModel, ConfigDict, Field


class ContentTypeCreateRequest(BaseModel):
    """Request body for registering a content type."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=64,
        pattern=r"^[a-zA-Z0-9_-]+$",
        description="e.g. article, news, page",
    )
    label: str = Field(..., min_length=1, max_length=255)
    show_ui: bool = True


class ContentTypeResponse(BaseModel):
    """Content type response."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    label: str
    show_ui: bool
