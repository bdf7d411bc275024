"""Domain entities and aggregates.

Pure domain models; no ORM or persistence concerns.
"""

from app.domain.entities.relation_definition import (
    ReferenceSettings,
    RelationDefinition,
)

__all__ = [
    "ReferenceSettings",
    "RelationDefinition",
]
