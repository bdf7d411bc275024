"""Infrastructure implementations of application service interfaces."""

from app.infrastructure.services.permalink_builder import PermalinkBuilder
from app.infrastructure.services.reference_template_renderer import (
    ReferenceTemplateRenderer,
)

__all__ = [
    "PermalinkBuilder",
    "ReferenceTemplateRenderer",
]
