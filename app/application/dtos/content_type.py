"""DTOs for content types (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContentTypeResult:
    """Content type read-model."""

    name: str
    label: str
    show_ui: bool
