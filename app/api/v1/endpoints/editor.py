"""Editor API: reference selection fields on a record's edit screen and their save."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import HTMLResponse

from app.api.v1.dependencies import (
    CurrentUser,
    get_editor_field_service,
    get_editor_field_service_for_write,
    get_form_data,
    require_capability,
)
from app.application.use_cases.editor import EditorFieldService
from app.core.constants import CAPABILITY_EDIT_POSTS
from app.core.limiter import limit_writes
from app.schemas.rendering import EditorSaveResponse

router = APIRouter()


@router.get("/{record_id}/editor/references", response_class=HTMLResponse)
async def editor_fields(
    record_id: int,
    service: Annotated[EditorFieldService, Depends(get_editor_field_service)],
    _: Annotated[CurrentUser, Depends(require_capability(CAPABILITY_EDIT_POSTS))],
):
    """Multi-select fields for every definition on the record's type. 404 if no record."""
    form = await service.fields(record_id)
    if form is None:
        raise HTTPException(status_code=404, detail="Record not found")
    return HTMLResponse(content=await service.render(record_id))


@router.post("/{record_id}/editor/references", response_model=EditorSaveResponse)
@limit_writes
async def save_editor_fields(
    request: Request,
    record_id: int,
    form: Annotated[dict[str, Any], Depends(get_form_data)],
    service: Annotated[EditorFieldService, Depends(get_editor_field_service_for_write)],
    _: Annotated[CurrentUser, Depends(require_capability(CAPABILITY_EDIT_POSTS))],
    autosave: bool = Query(False),
):
    """Replace every applicable attachment list from the submitted form.

    A bad nonce, an autosave or an empty form is not an error: nothing is
    written and the reason is returned with saved=false.
    """
    outcome = await service.save(record_id, form, autosave=autosave)
    return EditorSaveResponse(
        saved=outcome.saved,
        reason=outcome.reason,
        written_keys=list(outcome.written_keys),
    )
