"""Record API: the host content records references point at."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from app.api.v1.dependencies import (
    CurrentUser,
    get_content_type_repo,
    get_record_repo,
    get_record_repo_for_write,
    get_shortcode_expander,
    require_capability,
)
from app.application.interfaces.repositories import (
    IContentTypeRepository,
    IRecordRepository,
)
from app.application.use_cases.rendering import ShortcodeExpander
from app.core.constants import CAPABILITY_EDIT_POSTS
from app.core.limiter import limit_writes
from app.domain.exceptions import ValidationException
from app.schemas.record import (
    RecordCreateRequest,
    RecordResponse,
    RecordUpdateRequest,
    RenderedContentResponse,
)

router = APIRouter()


@router.post("", response_model=RecordResponse, status_code=201)
@limit_writes
async def create_record(
    request: Request,
    body: RecordCreateRequest,
    record_repo: Annotated[IRecordRepository, Depends(get_record_repo_for_write)],
    content_type_repo: Annotated[IContentTypeRepository, Depends(get_content_type_repo)],
    _: Annotated[CurrentUser, Depends(require_capability(CAPABILITY_EDIT_POSTS))],
):
    """Create a record of a registered content type."""
    if not await content_type_repo.exists(body.content_type):
        raise ValidationException(
            f"Unknown content type '{body.content_type}'", field="content_type"
        )
    created = await record_repo.create(
        body.content_type,
        body.title,
        slug=body.slug,
        status=body.status,
        body=body.body,
    )
    return RecordResponse.model_validate(created)


@router.get("/{record_id}", response_model=RecordResponse)
async def get_record(
    record_id: int,
    record_repo: Annotated[IRecordRepository, Depends(get_record_repo)],
):
    record = await record_repo.get_by_id(record_id)
    if not record:
        raise HTTPException(status_code=404, detail="Record not found")
    return RecordResponse.model_validate(record)


@router.patch("/{record_id}", response_model=RecordResponse)
@limit_writes
async def update_record(
    request: Request,
    record_id: int,
    body: RecordUpdateRequest,
    record_repo: Annotated[IRecordRepository, Depends(get_record_repo_for_write)],
    _: Annotated[CurrentUser, Depends(require_capability(CAPABILITY_EDIT_POSTS))],
):
    """Partially update title, slug, status or body."""
    updated = await record_repo.update(
        record_id,
        title=body.title,
        slug=body.slug,
        status=body.status,
        body=body.body,
    )
    if not updated:
        raise HTTPException(status_code=404, detail="Record not found")
    return RecordResponse.model_validate(updated)


@router.delete("/{record_id}", status_code=204)
@limit_writes
async def delete_record(
    request: Request,
    record_id: int,
    record_repo: Annotated[IRecordRepository, Depends(get_record_repo_for_write)],
    _: Annotated[CurrentUser, Depends(require_capability(CAPABILITY_EDIT_POSTS))],
):
    """Delete a record and all of its meta (attachment lists included)."""
    if not await record_repo.delete(record_id):
        raise HTTPException(status_code=404, detail="Record not found")
    return Response(status_code=204)


@router.get("/{record_id}/content", response_model=RenderedContentResponse)
async def get_record_content(
    record_id: int,
    record_repo: Annotated[IRecordRepository, Depends(get_record_repo)],
    expander: Annotated[ShortcodeExpander, Depends(get_shortcode_expander)],
):
    """Record body with every [ref] tag expanded in the record's context."""
    record = await record_repo.get_by_id(record_id)
    if not record:
        raise HTTPException(status_code=404, detail="Record not found")
    html = await expander.expand(record.body, current_record_id=record.id)
    return RenderedContentResponse(record_id=record.id, html=html)
