"""Service interfaces (ports) for the application layer (DIP)."""

from __future__ import annotations

from typing import Any, Protocol


class ICacheService(Protocol):
    """Minimal cache protocol for the settings blob (DIP)."""

    def is_available(self) -> bool:
        """Return True if cache is connected."""

    async def get(self, key: str) -> Any:
        """Return cached value or None."""

    async def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        """Store value with TTL. Returns True on success."""

    async def delete(self, key: str) -> bool:
        """Delete key. Returns True on success."""


class INonceService(Protocol):
    """Creates and verifies short-lived form nonces bound to an action and record."""

    def create(self, action: str, record_id: int) -> str:
        """Return a nonce for action on record_id."""

    def verify(self, nonce: str | None, action: str, record_id: int) -> None:
        """Raise NonceVerificationException unless nonce is valid for action and record_id."""


class ITemplateRenderer(Protocol):
    """Renders named HTML templates (autoescaped)."""

    def render(self, template_name: str, **context: Any) -> str:
        """Render template_name with context. Raises KeyError for unknown templates."""


class IPermalinkBuilder(Protocol):
    """Builds public URLs for records."""

    def permalink(self, record_id: int, content_type: str, slug: str | None) -> str:
        """Return the public URL of a record."""
