"""Admin settings screen: list, add, update and delete relation definitions as HTML."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from app.api.v1.dependencies import (
    CurrentUser,
    get_form_data,
    get_settings_page_service,
    require_capability,
)
from app.application.use_cases.admin import SettingsPageService
from app.core.constants import CAPABILITY_MANAGE_OPTIONS
from app.core.limiter import limit_writes

router = APIRouter()


@router.get("/references", response_class=HTMLResponse)
async def settings_page(
    service: Annotated[SettingsPageService, Depends(get_settings_page_service)],
    _: Annotated[CurrentUser, Depends(require_capability(CAPABILITY_MANAGE_OPTIONS))],
):
    return HTMLResponse(content=await service.render())


@router.post("/references", response_class=HTMLResponse)
@limit_writes
async def submit_settings_page(
    request: Request,
    form: Annotated[dict[str, Any], Depends(get_form_data)],
    service: Annotated[SettingsPageService, Depends(get_settings_page_service)],
    _: Annotated[CurrentUser, Depends(require_capability(CAPABILITY_MANAGE_OPTIONS))],
):
    """Apply one add/update/delete form, then render the page with its notices."""
    notices = await service.handle(form)
    return HTMLResponse(content=await service.render(notices))
