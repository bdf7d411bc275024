"""Content type API: register and list the types records may have."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import (
    CurrentUser,
    get_content_type_repo,
    get_content_type_repo_for_write,
    require_capability,
)
from app.application.interfaces.repositories import IContentTypeRepository
from app.core.constants import CAPABILITY_MANAGE_OPTIONS
from app.core.limiter import limit_writes
from app.schemas.content_type import ContentTypeCreateRequest, ContentTypeResponse

router = APIRouter()


@router.post("", response_model=ContentTypeResponse, status_code=201)
@limit_writes
async def create_content_type(
    request: Request,
    body: ContentTypeCreateRequest,
    repo: Annotated[IContentTypeRepository, Depends(get_content_type_repo_for_write)],
    _: Annotated[CurrentUser, Depends(require_capability(CAPABILITY_MANAGE_OPTIONS))],
):
    """Register a content type. 400 if the name is taken."""
    created = await repo.create(body.name, body.label, show_ui=body.show_ui)
    return ContentTypeResponse.model_validate(created)


@router.get("", response_model=list[ContentTypeResponse])
async def list_content_types(
    repo: Annotated[IContentTypeRepository, Depends(get_content_type_repo)],
    show_ui_only: bool = Query(False),
):
    types = await repo.list_all(show_ui_only=show_ui_only)
    return [ContentTypeResponse.model_validate(t) for t in types]
