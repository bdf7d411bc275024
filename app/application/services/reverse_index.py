"""Reverse index: which records reference a given record.

No reverse index is persisted. find() scans every '_ref_*' meta row
(prefix, type and status filters run in the database), decodes each value
in-process and tests membership. Rows that do not decode to a list are
skipped, logged and counted on the current span.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable

from app.application.dtos.record import ReferenceMetaRow, ReferencingRecord
from app.application.interfaces.repositories import IRecordMetaRepository
from app.core.constants import REFERENCE_META_PREFIX
from app.domain.value_objects import coerce_record_id
from app.shared.telemetry.telemetry import get_tracer

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)

MALFORMED_ROWS_ATTRIBUTE = "references.reverse_scan.malformed_rows"


def _decode_ids(row: ReferenceMetaRow) -> list | None:
    """Decoded list of ids, or None if the stored value is not a JSON list."""
    if row.meta_value is None:
        return None
    try:
        value = json.loads(row.meta_value)
    except (TypeError, ValueError):
        return None
    return value if isinstance(value, list) else None


class ReverseIndex:
    """Full scan over attachment rows to find records referencing a target."""

    def __init__(self, meta_repo: IRecordMetaRepository) -> None:
        self.meta_repo = meta_repo

    async def find(
        self,
        target_id: int,
        source_types: Iterable[str] | None = None,
        only_published: bool = False,
    ) -> list[ReferencingRecord]:
        """Return one hit per attachment row whose id list contains target_id."""
        types = [t for t in (source_types or []) if t]
        with tracer.start_as_current_span("references.reverse_scan") as span:
            rows = await self.meta_repo.scan_prefix(
                REFERENCE_META_PREFIX,
                source_types=types or None,
                only_published=only_published,
            )
            hits: list[ReferencingRecord] = []
            malformed = 0
            for row in rows:
                ids = _decode_ids(row)
                if ids is None:
                    if row.meta_value not in (None, ""):
                        malformed += 1
                        logger.warning(
                            "Skipping malformed attachment value on record %s (%s)",
                            row.record_id,
                            row.meta_key,
                        )
                    continue
                if any(coerce_record_id(item) == target_id for item in ids):
                    hits.append(
                        ReferencingRecord(
                            record_id=row.record_id,
                            record_type=row.record_type,
                            meta_key=row.meta_key,
                            raw_value=row.meta_value or "",
                        )
                    )
            span.set_attribute("references.reverse_scan.rows", len(rows))
            span.set_attribute("references.reverse_scan.hits", len(hits))
            span.set_attribute(MALFORMED_ROWS_ATTRIBUTE, malformed)
        return hits
