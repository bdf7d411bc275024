"""Relation definition entity and the settings aggregate that owns all definitions.

The whole set of definitions is persisted as one blob:
``{"refs": {"<internal_id>": {...}}, "next_id": <int>}``. Internal ids come
from a monotonic counter and are never reused after deletion.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from app.core.constants import REFERENCE_META_PREFIX
from app.domain.value_objects.core import TypeList


@dataclass(frozen=True)
class RelationDefinition:
    """A named relationship kind offered on records of one source type.

    An empty target_types tuple means any content type may be attached.
    """

    internal_id: int
    key: str
    title: str
    source_type: str
    target_types: tuple[str, ...] = ()

    @property
    def meta_key(self) -> str:
        """Record meta key holding this definition's attachment list."""
        return REFERENCE_META_PREFIX + self.key

    def applies_to(self, content_type: str) -> bool:
        """Return True if records of content_type get this definition's field."""
        return self.source_type == content_type

    def allows_target_type(self, content_type: str) -> bool:
        """Return True if records of content_type may be attached."""
        return not self.target_types or content_type in self.target_types

    def matches(self, source_type: str | None = None, key: str | None = None) -> bool:
        """Exact-match filter on source type and/or key (None = no filter)."""
        if source_type is not None and self.source_type != source_type:
            return False
        if key is not None and self.key != key:
            return False
        return True

    def to_blob(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "title": self.title,
            "source_type": self.source_type,
            "target_types": list(self.target_types),
        }

    @classmethod
    def from_blob(cls, internal_id: int, data: dict[str, Any]) -> RelationDefinition:
        """Build from one stored entry. Raises ValueError/TypeError/KeyError if malformed."""
        key = data["key"]
        source_type = data["source_type"]
        if not isinstance(key, str) or not isinstance(source_type, str):
            raise TypeError("key and source_type must be strings")
        return cls(
            internal_id=internal_id,
            key=key,
            title=str(data.get("title") or ""),
            source_type=source_type,
            target_types=TypeList.from_raw(data.get("target_types")).values,
        )


@dataclass
class ReferenceSettings:
    """Aggregate over every relation definition plus the id counter.

    Iteration order of ``refs`` is insertion order and is the order
    definitions are listed in.
    """

    refs: dict[int, RelationDefinition] = field(default_factory=dict)
    next_id: int = 1
    skipped_entries: list[str] = field(default_factory=list, repr=False, compare=False)

    @classmethod
    def default(cls) -> ReferenceSettings:
        return cls(refs={}, next_id=1)

    @classmethod
    def from_blob(cls, blob: Any) -> ReferenceSettings:
        """Parse the stored blob. Malformed entries are skipped and recorded.

        A missing or non-dict blob yields the defaults. next_id is raised
        above the largest stored id so ids are never handed out twice.
        """
        if not isinstance(blob, dict):
            return cls.default()
        settings = cls.default()
        raw_refs = blob.get("refs") or {}
        if isinstance(raw_refs, list):
            raw_refs = dict(enumerate(raw_refs, start=1))
        if not isinstance(raw_refs, dict):
            settings.skipped_entries.append("refs")
            raw_refs = {}
        for raw_id, entry in raw_refs.items():
            try:
                internal_id = int(raw_id)
                if not isinstance(entry, dict):
                    raise TypeError("entry must be an object")
                settings.refs[internal_id] = RelationDefinition.from_blob(internal_id, entry)
            except (KeyError, TypeError, ValueError):
                settings.skipped_entries.append(str(raw_id))
        try:
            next_id = int(blob.get("next_id", 1))
        except (TypeError, ValueError):
            next_id = 1
        highest = max(settings.refs, default=0)
        settings.next_id = max(next_id, highest + 1, 1)
        return settings

    def to_blob(self) -> dict[str, Any]:
        return {
            "refs": {str(i): d.to_blob() for i, d in self.refs.items()},
            "next_id": self.next_id,
        }

    def filter(
        self, source_type: str | None = None, key: str | None = None
    ) -> list[RelationDefinition]:
        """Definitions matching both filters, in storage order."""
        return [d for d in self.refs.values() if d.matches(source_type, key)]

    def find_first(self, source_type: str, key: str) -> RelationDefinition | None:
        for definition in self.refs.values():
            if definition.matches(source_type, key):
                return definition
        return None

    def append(
        self, key: str, title: str, source_type: str, target_types: TypeList
    ) -> RelationDefinition:
        """Add a definition under a freshly allocated internal id."""
        definition = RelationDefinition(
            internal_id=self.next_id,
            key=key,
            title=title,
            source_type=source_type,
            target_types=target_types.values,
        )
        self.refs[definition.internal_id] = definition
        self.next_id += 1
        return definition

    def replace(
        self,
        internal_id: int,
        *,
        key: str | None = None,
        title: str | None = None,
        source_type: str | None = None,
        target_types: TypeList | None = None,
    ) -> RelationDefinition | None:
        """Update a definition in place (position kept). None if the id is unknown."""
        current = self.refs.get(internal_id)
        if current is None:
            return None
        changes: dict[str, Any] = {}
        if key is not None:
            changes["key"] = key
        if title is not None:
            changes["title"] = title
        if source_type is not None:
            changes["source_type"] = source_type
        if target_types is not None:
            changes["target_types"] = target_types.values
        updated = replace(current, **changes)
        self.refs[internal_id] = updated
        return updated

    def discard(self, internal_id: int) -> bool:
        """Remove one definition. Remaining ids are not renumbered."""
        return self.refs.pop(internal_id, None) is not None
