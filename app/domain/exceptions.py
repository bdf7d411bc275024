"""Domain exceptions for the references service.

Registry and store operations favour availability: validation failures and
missing data come back as result objects or empty values. Exceptions below
cover the cases where a caller has to stop (HTTP layer, auth, config) and
are mapped to responses in app.core.exception_handlers.
"""

from typing import Any


class ReferencesException(Exception):
    """Base exception for all references service errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON error responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(ReferencesException):
    """Raised when input validation fails (e.g. invalid key or unknown content type)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(ReferencesException):
    """Raised when the bearer token is missing, invalid or expired."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(ReferencesException):
    """Raised when the caller lacks the capability required for the operation."""

    def __init__(self, capability: str | None = None, message: str = "Permission denied") -> None:
        """Initialize with optional capability name.

        Args:
            capability: Capability that was required (e.g. 'manage_options').
            message: Human-readable message; replaced when capability is given.
        """
        details: dict[str, Any] = {}
        if capability:
            message = f"Permission denied: requires {capability}"
            details["capability"] = capability
        super().__init__(message, "PERMISSION_DENIED", details)


class ResourceNotFoundException(ReferencesException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str | int) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'record', 'relation_definition').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class NonceVerificationException(ReferencesException):
    """Raised when an editor form nonce is missing, expired or bound to another action."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            "Nonce verification failed",
            "NONCE_INVALID",
            {"reason": reason},
        )


class SqlNotConfiguredException(ReferencesException):
    """Raised when an operation requires the SQL database but DATABASE_URL is empty."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
