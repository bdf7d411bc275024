"""Pydantic request/response schemas for the API."""

from app.schemas.attachment import (
    AttachmentResponse,
    AttachmentSetRequest,
    ReferencingRecordResponse,
)
from app.schemas.content_type import ContentTypeCreateRequest, ContentTypeResponse
from app.schemas.health import HealthResponse
from app.schemas.record import (
    RecordCreateRequest,
    RecordResponse,
    RecordUpdateRequest,
    RenderedContentResponse,
)
from app.schemas.relation_definition import (
    RelationDefinitionResponse,
    RelationDefinitionUpsertRequest,
    RemoveResponse,
    UpsertResponse,
)
from app.schemas.rendering import (
    EditorSaveResponse,
    HtmlResponse,
    RenderContentRequest,
    WidgetArgsSchema,
    WidgetInstanceSchema,
    WidgetRenderRequest,
    WidgetUpdateRequest,
)

__all__ = [
    "AttachmentResponse",
    "AttachmentSetRequest",
    "ContentTypeCreateRequest",
    "ContentTypeResponse",
    "EditorSaveResponse",
    "HealthResponse",
    "HtmlResponse",
    "RecordCreateRequest",
    "RecordResponse",
    "RecordUpdateRequest",
    "ReferencingRecordResponse",
    "RelationDefinitionResponse",
    "RelationDefinitionUpsertRequest",
    "RemoveResponse",
    "RenderContentRequest",
    "RenderedContentResponse",
    "UpsertResponse",
    "WidgetArgsSchema",
    "WidgetInstanceSchema",
    "WidgetRenderRequest",
    "WidgetUpdateRequest",
]
