"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.entities import ReferenceSettings, RelationDefinition
from app.domain.enums import RecordStatus, RejectionReason, UpsertOutcome
from app.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    NonceVerificationException,
    ReferencesException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)
from app.domain.value_objects import RecordIdList, RelationKey, TypeList

__all__ = [
    # Entities
    "ReferenceSettings",
    "RelationDefinition",
    # Enums
    "RecordStatus",
    "RejectionReason",
    "UpsertOutcome",
    # Exceptions
    "AuthenticationException",
    "AuthorizationException",
    "NonceVerificationException",
    "ReferencesException",
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
    "ValidationException",
    # Value objects
    "RecordIdList",
    "RelationKey",
    "TypeList",
]
