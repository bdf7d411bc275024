"""Application use cases: one entry point per workflow."""

from app.application.use_cases.admin import SettingsPageService
from app.application.use_cases.editor import EditorFieldService
from app.application.use_cases.rendering import (
    ReferenceListRenderer,
    ReferencesWidget,
    ShortcodeExpander,
)

__all__ = [
    "EditorFieldService",
    "ReferenceListRenderer",
    "ReferencesWidget",
    "SettingsPageService",
    "ShortcodeExpander",
]
