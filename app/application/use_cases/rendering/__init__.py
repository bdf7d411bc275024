"""Front-end rendering: reference lists, [ref] shortcode, sidebar widget."""

from app.application.use_cases.rendering.reference_list import ReferenceListRenderer
from app.application.use_cases.rendering.shortcode import ShortcodeExpander
from app.application.use_cases.rendering.widget import ReferencesWidget

__all__ = ["ReferenceListRenderer", "ReferencesWidget", "ShortcodeExpander"]
