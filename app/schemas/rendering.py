"""Rendering, widget and editor API schemas."""

from pydantic import BaseModel, Field


class RenderContentRequest(BaseModel):
    """Body whose [ref] tags should be expanded, in the context of current_record_id."""

    body: str
    current_record_id: int | None = None


class WidgetInstanceSchema(BaseModel):
    """Saved widget settings."""

    title: str = ""
    message: str = ""
    ref: str = Field(default="", description="'_ref_<key>' meta key to list")


class WidgetArgsSchema(BaseModel):
    """Theme-provided wrappers around widget output (raw HTML)."""

    before_widget: str = '<section class="widget references-list-widget">'
    after_widget: str = "</section>"
    before_title: str = '<h2 class="widget-title">'
    after_title: str = "</h2>"


class WidgetRenderRequest(BaseModel):
    instance: WidgetInstanceSchema
    current_record_id: int | None = None
    args: WidgetArgsSchema | None = None


class WidgetUpdateRequest(BaseModel):
    """New and previously saved settings; new values win."""

    new_instance: dict[str, str | None] = Field(default_factory=dict)
    old_instance: dict[str, str | None] = Field(default_factory=dict)


class HtmlResponse(BaseModel):
    html: str


class EditorSaveResponse(BaseModel):
    """Result of an editor form save. saved=False means nothing was written."""

    saved: bool
    reason: str | None = None
    written_keys: list[str] = Field(default_factory=list)
