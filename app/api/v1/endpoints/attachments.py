"""Attachment API: target ids stored on a record per relation key, and reverse lookup."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from app.api.v1.dependencies import (
    CurrentUser,
    get_attachment_store,
    get_attachment_store_for_write,
    get_reverse_index,
    require_capability,
)
from app.application.services import AttachmentStore, ReverseIndex
from app.core.constants import CAPABILITY_EDIT_POSTS
from app.core.limiter import limit_writes
from app.schemas.attachment import (
    AttachmentResponse,
    AttachmentSetRequest,
    ReferencingRecordResponse,
)

router = APIRouter()


@router.get("/{record_id}/references", response_model=dict[str, list[int]])
async def get_all_attachments(
    record_id: int,
    store: Annotated[AttachmentStore, Depends(get_attachment_store)],
):
    """Ids attached under every key defined for the record's type. 404 if no record."""
    links = await store.get_all(record_id)
    if links is None:
        raise HTTPException(status_code=404, detail="Record not found")
    return links


@router.get("/{record_id}/references/{key}", response_model=AttachmentResponse)
async def get_attachments(
    record_id: int,
    key: str,
    store: Annotated[AttachmentStore, Depends(get_attachment_store)],
):
    """Ids attached under key; [] when the record or definition is missing."""
    ids = await store.get(record_id, key)
    return AttachmentResponse(record_id=record_id, key=key, target_ids=ids)


@router.put("/{record_id}/references/{key}", response_model=AttachmentResponse)
@limit_writes
async def set_attachments(
    request: Request,
    record_id: int,
    key: str,
    body: AttachmentSetRequest,
    store: Annotated[AttachmentStore, Depends(get_attachment_store_for_write)],
    _: Annotated[CurrentUser, Depends(require_capability(CAPABILITY_EDIT_POSTS))],
):
    """Replace the ids attached under key. 404 if the key does not apply to the record."""
    if not await store.set(record_id, key, body.target_ids):
        raise HTTPException(
            status_code=404, detail="Record not found or key not defined for its type"
        )
    ids = await store.get(record_id, key)
    return AttachmentResponse(record_id=record_id, key=key, target_ids=ids)


@router.get("/{record_id}/referenced-by", response_model=list[ReferencingRecordResponse])
async def get_referencing_records(
    record_id: int,
    index: Annotated[ReverseIndex, Depends(get_reverse_index)],
    source_type: list[str] | None = Query(None),
    only_published: bool = Query(False),
):
    """Records whose attachment lists contain record_id (one hit per matching key)."""
    hits = await index.find(
        record_id, source_types=source_type, only_published=only_published
    )
    return [ReferencingRecordResponse.model_validate(h) for h in hits]
