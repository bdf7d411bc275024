"""Domain enumerations for the references service."""

from enum import Enum


class RecordStatus(str, Enum):
    """Publication status of a content record.

    Only PUBLISH records are offered as editor candidates and rendered
    in reference lists.
    """

    PUBLISH = "publish"
    DRAFT = "draft"
    PENDING = "pending"
    PRIVATE = "private"
    TRASH = "trash"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [status.value for status in cls]


class UpsertOutcome(str, Enum):
    """Discriminator of RelationRegistry.upsert results."""

    CREATED = "created"
    UPDATED = "updated"
    REJECTED = "rejected"


class RejectionReason(str, Enum):
    """Why an upsert was rejected."""

    INVALID_KEY = "invalid_key"
    UNKNOWN_SOURCE_TYPE = "unknown_source_type"
    EMPTY_TARGET_TYPES = "empty_target_types"
    UNKNOWN_TARGET_TYPE = "unknown_target_type"


class SettingsAction(str, Enum):
    """Form actions accepted by the admin settings screen."""

    ADD_NEW_REFERENCE = "add_new_reference"
    MANAGE_REFERENCE = "manage_reference"


class ManageButton(str, Enum):
    """Submit button pressed on an existing definition's form."""

    UPDATE = "Update"
    DELETE = "Delete"
