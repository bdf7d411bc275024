"""Application DTOs (no ORM dependency)."""

from app.application.dtos.content_type import ContentTypeResult
from app.application.dtos.record import (
    RecordResult,
    ReferenceMetaRow,
    ReferencingRecord,
)
from app.application.dtos.relation_definition import UpsertResult
from app.application.dtos.rendering import (
    CandidateOption,
    EditorField,
    EditorForm,
    ReferenceBlock,
    ReferenceItem,
    SaveOutcome,
    WidgetArgs,
    WidgetInstance,
)
from app.application.dtos.settings_page import SettingsNotice

__all__ = [
    "CandidateOption",
    "ContentTypeResult",
    "EditorField",
    "EditorForm",
    "RecordResult",
    "ReferenceBlock",
    "ReferenceItem",
    "ReferenceMetaRow",
    "ReferencingRecord",
    "SaveOutcome",
    "SettingsNotice",
    "UpsertResult",
    "WidgetArgs",
    "WidgetInstance",
]
