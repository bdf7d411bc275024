"""References widget API: render, settings update, settings form."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_references_widget
from app.application.dtos.rendering import WidgetArgs, WidgetInstance
from app.application.use_cases.rendering import ReferencesWidget
from app.schemas.rendering import (
    HtmlResponse,
    WidgetInstanceSchema,
    WidgetRenderRequest,
    WidgetUpdateRequest,
)

router = APIRouter()


@router.post("/render", response_model=HtmlResponse)
async def render_widget(
    body: WidgetRenderRequest,
    widget: Annotated[ReferencesWidget, Depends(get_references_widget)],
):
    """Widget markup for current_record_id, or "" when there is nothing to list."""
    instance = WidgetInstance(**body.instance.model_dump())
    args = WidgetArgs(**body.args.model_dump()) if body.args else None
    html = await widget.render(instance, body.current_record_id, args)
    return HtmlResponse(html=html)


@router.post("/update", response_model=WidgetInstanceSchema)
async def update_widget(
    body: WidgetUpdateRequest,
    widget: Annotated[ReferencesWidget, Depends(get_references_widget)],
):
    """Merge new settings over old ones with markup stripped."""
    instance = widget.update(body.new_instance, body.old_instance)
    return WidgetInstanceSchema(**instance.as_dict())


@router.post("/form", response_model=HtmlResponse)
async def widget_form(
    body: WidgetInstanceSchema,
    widget: Annotated[ReferencesWidget, Depends(get_references_widget)],
):
    instance = WidgetInstance(**body.model_dump())
    return HtmlResponse(html=await widget.form(instance))
