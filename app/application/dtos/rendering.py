"""DTOs for the rendering layer: list blocks, widget instances, editor fields."""

from dataclasses import dataclass, field
from typing import Any

from app.domain.entities import RelationDefinition


@dataclass(frozen=True)
class ReferenceItem:
    """One rendered target record: id, display title, permalink."""

    record_id: int
    title: str
    url: str
    content_type: str


@dataclass(frozen=True)
class ReferenceBlock:
    """Published targets attached to a record under one relation key."""

    key: str
    ids: tuple[int, ...]
    items: tuple[ReferenceItem, ...]


@dataclass(frozen=True)
class WidgetInstance:
    """Saved widget settings: heading, description text, selected '_ref_<key>'."""

    title: str = ""
    message: str = ""
    ref: str = ""

    @classmethod
    def from_mapping(cls, data: dict[str, Any] | None) -> "WidgetInstance":
        data = data or {}
        return cls(
            title=str(data.get("title") or ""),
            message=str(data.get("message") or ""),
            ref=str(data.get("ref") or ""),
        )

    def as_dict(self) -> dict[str, str]:
        return {"title": self.title, "message": self.message, "ref": self.ref}


@dataclass(frozen=True)
class WidgetArgs:
    """Theme-provided wrappers placed around widget output."""

    before_widget: str = '<section class="widget references-list-widget">'
    after_widget: str = "</section>"
    before_title: str = '<h2 class="widget-title">'
    after_title: str = "</h2>"


@dataclass(frozen=True)
class CandidateOption:
    """Selectable record in an editor field."""

    record_id: int
    title: str


@dataclass(frozen=True)
class EditorField:
    """Multi-select field for one relation definition on a record's edit screen."""

    definition: RelationDefinition
    field_name: str
    candidates: tuple[CandidateOption, ...]
    selected: tuple[int, ...]


@dataclass(frozen=True)
class EditorForm:
    """All reference fields for one record plus the form nonce."""

    record_id: int
    nonce: str
    fields: tuple[EditorField, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SaveOutcome:
    """Result of saving the editor form. saved=False means nothing was written."""

    saved: bool
    reason: str | None = None
    written_keys: tuple[str, ...] = ()
