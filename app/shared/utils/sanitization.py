"""Input sanitization helpers for text that ends up in rendered HTML."""

import html
import re
from typing import ClassVar

import nh3


class InputSanitizer:
    """
    Sanitize user-supplied text before it is stored or displayed.

    Templates autoescape on output; these helpers normalize input so stored
    values are plain text.
    """

    ALLOWED_TAGS: ClassVar[list[str]] = []
    ALLOWED_ATTRIBUTES: ClassVar[dict[str, list[str]]] = {}
    IDENTIFIER_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[a-zA-Z0-9_-]+$")

    @classmethod
    def sanitize_html(cls, value: str) -> str:
        """Remove all HTML tags with nh3 (strict by default).

        Args:
            value: Raw string that may contain HTML.

        Returns:
            Sanitized string safe for HTML display (entities escaped).
        """
        if not value:
            return value
        attrs = {k: set(v) for k, v in cls.ALLOWED_ATTRIBUTES.items()}
        return nh3.clean(
            value,
            tags=set(cls.ALLOWED_TAGS),
            attributes=attrs,
        )

    @classmethod
    def strip_tags(cls, value: str | None) -> str:
        """Remove tags and return plain text (entities decoded).

        Script and style contents are dropped with their tags.
        """
        if not value:
            return ""
        return html.unescape(cls.sanitize_html(value))

    @classmethod
    def sanitize_identifier(cls, value: str) -> str:
        """Validate identifiers (content type names). Allows alphanumeric, underscore, hyphen.

        Raises:
            ValueError: If format is invalid.
        """
        if not value:
            return value
        if not cls.IDENTIFIER_PATTERN.match(value):
            raise ValueError("Invalid identifier format")
        return value
