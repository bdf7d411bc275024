"""Edit-screen reference fields."""

from app.application.use_cases.editor.editor_fields import EditorFieldService

__all__ = ["EditorFieldService"]
