"""Rendering API: reference list HTML and inline tag expansion."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.v1.dependencies import get_reference_list_renderer, get_shortcode_expander
from app.application.use_cases.rendering import ReferenceListRenderer, ShortcodeExpander
from app.schemas.rendering import HtmlResponse, RenderContentRequest
from app.schemas.record import RenderedContentResponse

records_router = APIRouter()
router = APIRouter()


@records_router.get("/{record_id}/references-html", response_model=HtmlResponse)
async def render_reference_list(
    record_id: int,
    renderer: Annotated[ReferenceListRenderer, Depends(get_reference_list_renderer)],
    key: str | None = Query(None),
):
    """Same output as a [ref id=<record_id> key=<key>] tag; "" when nothing to show."""
    return HtmlResponse(html=await renderer.render(record_id, key))


@router.post("/content", response_model=RenderedContentResponse)
async def render_content(
    body: RenderContentRequest,
    expander: Annotated[ShortcodeExpander, Depends(get_shortcode_expander)],
):
    """Expand every [ref] tag in body; tags without id use current_record_id."""
    html = await expander.expand(body.body, current_record_id=body.current_record_id)
    return RenderedContentResponse(record_id=body.current_record_id, html=html)
