"""Jinja renderer for the named reference templates."""

from __future__ import annotations

from typing import Any

from jinja2 import Environment, Template

from app.infrastructure.services.reference_templates import DEFAULT_TEMPLATES


class ReferenceTemplateRenderer:
    """Renders a named template with autoescape on.

    template_globals are available to every template (e.g. settings_url for the
    widget form hint).
    """

    def __init__(
        self,
        templates: dict[str, str] | None = None,
        template_globals: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with optional template dict; falls back to DEFAULT_TEMPLATES."""
        self._templates = templates or DEFAULT_TEMPLATES
        self._env = Environment(autoescape=True)
        self._env.globals.update(template_globals or {})
        self._compiled: dict[str, Template] = {
            name: self._env.from_string(source) for name, source in self._templates.items()
        }

    def render(self, template_name: str, **context: Any) -> str:
        """Render template_name with context. Raises KeyError if the name is unknown."""
        if template_name not in self._compiled:
            raise KeyError(f"Unknown template: {template_name}")
        return self._compiled[template_name].render(**context)
