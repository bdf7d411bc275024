"""Domain value objects and shared value types."""

from app.domain.value_objects.core import (
    RecordIdList,
    RelationKey,
    TypeList,
    coerce_record_id,
    is_valid_relation_key,
)

__all__ = [
    "RecordIdList",
    "RelationKey",
    "TypeList",
    "coerce_record_id",
    "is_valid_relation_key",
]
