"""[ref] shortcode: replaced in record bodies by the rendered reference lists.

Supported forms::

    [ref]                      all keys of the current record
    [ref key="related"]        one key of the current record
    [ref id=42 key='related']  another record

Values may be double-quoted, single-quoted or bare. Unknown attributes are
ignored. ``[[ref]]`` is an escape and renders as the literal ``[ref]``.
"""

from __future__ import annotations

import re

from app.application.use_cases.rendering.reference_list import ReferenceListRenderer
from app.domain.value_objects import coerce_record_id

TAG_NAME = "ref"

_TAG_RE = re.compile(
    r"\[(?P<open>\[?)" + TAG_NAME + r"(?P<attrs>(?:\s+[^\]]*)?)\s*/?\](?P<close>\]?)"
)
_ATTR_RE = re.compile(
    r"""(?P<name>[A-Za-z_][\w-]*)\s*=\s*(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)'|(?P<bare>[^\s"'\]]+))"""
)


def parse_attributes(text: str) -> dict[str, str]:
    """Parse name=value pairs from a tag's attribute text (names lower-cased)."""
    attrs: dict[str, str] = {}
    for match in _ATTR_RE.finditer(text or ""):
        value = match.group("dq")
        if value is None:
            value = match.group("sq")
        if value is None:
            value = match.group("bare")
        attrs[match.group("name").lower()] = value
    return attrs


class ShortcodeExpander:
    """Expands [ref] tags in a body using a ReferenceListRenderer."""

    def __init__(self, renderer: ReferenceListRenderer) -> None:
        self.renderer = renderer

    async def render_tag(self, attrs: dict[str, str], current_record_id: int | None) -> str:
        """Output for one tag; '' when no record can be resolved."""
        record_id = coerce_record_id(attrs.get("id")) or current_record_id
        if record_id is None:
            return ""
        key = attrs.get("key") or None
        return await self.renderer.render(record_id, key=key)

    async def expand(self, body: str, current_record_id: int | None = None) -> str:
        """Return body with every [ref] tag replaced by its rendered output."""
        if not body or "[" + TAG_NAME not in body:
            return body
        parts: list[str] = []
        last = 0
        for match in _TAG_RE.finditer(body):
            parts.append(body[last:match.start()])
            if match.group("open") and match.group("close"):
                parts.append(match.group(0)[1:-1])
            else:
                attrs = parse_attributes(match.group("attrs"))
                parts.append(match.group("open"))
                parts.append(await self.render_tag(attrs, current_record_id))
                parts.append(match.group("close"))
            last = match.end()
        parts.append(body[last:])
        return "".join(parts)
