"""Customization hooks for rendered reference lists.

Two filter chains, each keyed by relation key (or registered for every key
with key=None):

- item filters: ``(items, attrs, key, ids) -> items`` run on the fetched
  published targets before rendering;
- output filters: ``(html, attrs, key, ids) -> html`` run on each key's
  rendered block.

Filters run in registration order; catch-all filters run before keyed ones.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from app.application.dtos.rendering import ReferenceItem

ItemsFilter = Callable[
    [list[ReferenceItem], Mapping[str, Any], str, Sequence[int]], list[ReferenceItem]
]
OutputFilter = Callable[[str, Mapping[str, Any], str, Sequence[int]], str]


class ReferenceFilters:
    """Registry of item and output filters."""

    def __init__(self) -> None:
        self._items: defaultdict[str | None, list[ItemsFilter]] = defaultdict(list)
        self._output: defaultdict[str | None, list[OutputFilter]] = defaultdict(list)

    def add_items_filter(self, fn: ItemsFilter, key: str | None = None) -> None:
        self._items[key].append(fn)

    def add_output_filter(self, fn: OutputFilter, key: str | None = None) -> None:
        self._output[key].append(fn)

    def clear(self) -> None:
        self._items.clear()
        self._output.clear()

    def apply_items(
        self,
        items: list[ReferenceItem],
        attrs: Mapping[str, Any],
        key: str,
        ids: Sequence[int],
    ) -> list[ReferenceItem]:
        for fn in (*self._items.get(None, ()), *self._items.get(key, ())):
            items = list(fn(items, attrs, key, ids))
        return items

    def apply_output(
        self,
        html: str,
        attrs: Mapping[str, Any],
        key: str,
        ids: Sequence[int],
    ) -> str:
        for fn in (*self._output.get(None, ()), *self._output.get(key, ())):
            html = fn(html, attrs, key, ids)
        return html
