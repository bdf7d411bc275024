"""Domain value objects for the references service.

Value objects are immutable types that represent domain concepts with
self-validation. Scalar-or-list inputs (target types, target record ids)
are normalized once, here, so nothing downstream branches on input shape.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from app.core.constants import REFERENCE_META_PREFIX, RELATION_KEY_PATTERN

_RELATION_KEY_RE = re.compile(RELATION_KEY_PATTERN)


def is_valid_relation_key(value: Any) -> bool:
    """Return True if value is a non-empty string of word characters (whole string)."""
    return isinstance(value, str) and _RELATION_KEY_RE.fullmatch(value) is not None


@dataclass(frozen=True)
class RelationKey:
    """Value object for a relation key (e.g. 'related', 'linked_story').

    Keys namespace attachment storage: the meta key is '_ref_' + key.
    """

    value: str

    def __post_init__(self) -> None:
        if not is_valid_relation_key(self.value):
            raise ValueError(
                "Relation key must match [A-Za-z0-9_]+ (e.g. 'related', 'linked_story')"
            )

    @property
    def meta_key(self) -> str:
        """Record meta key holding the attachment list."""
        return REFERENCE_META_PREFIX + self.value

    @classmethod
    def from_meta_key(cls, meta_key: str) -> "RelationKey":
        """Inverse of meta_key. Raises ValueError if the prefix is missing."""
        if not meta_key.startswith(REFERENCE_META_PREFIX):
            raise ValueError(f"Not a reference meta key: {meta_key!r}")
        return cls(meta_key[len(REFERENCE_META_PREFIX):])

    @classmethod
    def parse(cls, value: Any) -> "RelationKey | None":
        """RelationKey for value, or None when value is not a valid key."""
        try:
            return cls(value)
        except ValueError:
            return None


def _as_iterable(raw: Any) -> Iterable[Any]:
    if raw is None or raw == "":
        return ()
    if isinstance(raw, (list, tuple, set, frozenset)):
        return raw
    return (raw,)


@dataclass(frozen=True)
class TypeList:
    """Ordered, de-duplicated list of content type names."""

    values: tuple[str, ...] = ()

    @classmethod
    def from_raw(cls, raw: Any) -> "TypeList":
        """Build from None, a single name, or a sequence of names (blanks dropped)."""
        seen: list[str] = []
        for item in _as_iterable(raw):
            name = str(item).strip()
            if name and name not in seen:
                seen.append(name)
        return cls(tuple(seen))

    def __bool__(self) -> bool:
        return bool(self.values)

    def __iter__(self):
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)


def coerce_record_id(value: Any) -> int | None:
    """Return value as a positive record id, or None if it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str) and value.strip().isdigit():
        as_int = int(value.strip())
        return as_int if as_int > 0 else None
    return None


@dataclass(frozen=True)
class RecordIdList:
    """Ordered list of target record ids as stored in one attachment.

    Order is preserved and duplicates are kept out; values that are not
    record ids (non-numeric strings, zero, negatives) are dropped.
    """

    values: tuple[int, ...] = ()

    @classmethod
    def from_raw(cls, raw: Any) -> "RecordIdList":
        """Build from None, a single id, or a sequence of ids / digit strings."""
        ids: list[int] = []
        for item in _as_iterable(raw):
            record_id = coerce_record_id(item)
            if record_id is not None and record_id not in ids:
                ids.append(record_id)
        return cls(tuple(ids))

    def as_list(self) -> list[int]:
        return list(self.values)

    def __bool__(self) -> bool:
        return bool(self.values)

    def __iter__(self):
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)
