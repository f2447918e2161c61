"""Domain exceptions for the tenant management service.

Defines the classified error taxonomy used by the provisioning and
decommissioning sagas. These exceptions are independent of infrastructure
concerns. Presentation layer maps them to HTTP responses in exception
handlers (see core.exception_handlers).
"""

from typing import Any

from tenant_management.domain.enums import ErrorCode


class TenantManagementException(Exception):
    """Base exception for all tenant management errors.

    All custom exceptions inherit from this class to allow consistent
    error handling and logging. Presentation layer maps these to HTTP
    responses using message, error_code, and details.

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
        """Return a JSON-serializable representation (error_code, message, details)."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class InvalidArgumentException(TenantManagementException):
    """Raised when a request is malformed (missing field, bad email)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, ErrorCode.INVALID_ARGUMENT.value, details)


class DuplicateResourceException(TenantManagementException):
    """Raised when a resource with the same unique key already exists."""

    def __init__(self, resource_type: str, key: str) -> None:
        """Initialize with resource type and the conflicting key.

        Args:
            resource_type: Type of resource (e.g. 'tenant').
            key: The duplicated unique key (e.g. the tenant code).
        """
        super().__init__(
            f"{resource_type} '{key}' already exists.",
            ErrorCode.DUPLICATE_RESOURCE.value,
            {"resource_type": resource_type, "key": key},
        )


class ResourceNotFoundException(TenantManagementException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'tenant').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} '{resource_id}' was not found.",
            ErrorCode.RESOURCE_NOT_FOUND.value,
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ConcurrencyConflictException(TenantManagementException):
    """Raised when an update carries a stale version token."""

    def __init__(
        self, resource_type: str, resource_id: str, expected_version: int
    ) -> None:
        super().__init__(
            f"{resource_type} '{resource_id}' was modified concurrently "
            f"(expected version {expected_version}).",
            ErrorCode.CONCURRENCY_CONFLICT.value,
            {
                "resource_type": resource_type,
                "resource_id": resource_id,
                "expected_version": expected_version,
            },
        )


class InvalidOperationException(TenantManagementException):
    """Raised when an external call reports non-success. Always fatal, never retried."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        details = {"status_code": status_code} if status_code is not None else {}
        super().__init__(message, ErrorCode.INVALID_OPERATION.value, details)


class IdentityProviderException(InvalidOperationException):
    """Raised by the identity-provider gateway when a call fails."""

    def __init__(
        self, operation: str, status_code: int | None = None, message: str | None = None
    ) -> None:
        """Initialize with the failed operation and the provider status.

        Args:
            operation: Gateway operation name (e.g. 'create_pool').
            status_code: HTTP status reported by the provider, if any.
            message: Optional provider message; a default is built otherwise.
        """
        self.operation = operation
        super().__init__(
            message
            or f"Identity provider call '{operation}' failed. Status Code: {status_code}",
            status_code,
        )
        self.details["operation"] = operation


class OperationCancelledException(TenantManagementException):
    """Raised when a cooperative cancellation request is observed between saga steps."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"Operation '{operation}' was cancelled.",
            ErrorCode.OPERATION_CANCELLED.value,
            {"operation": operation},
        )


class DuplicateKeyError(TenantManagementException):
    """Storage-level unique constraint violation (e.g. tenant code).

    Raised by repositories; the provisioning orchestrator translates it to
    DuplicateResourceException.
    """

    def __init__(self, constraint: str, key: str) -> None:
        super().__init__(
            f"Duplicate key '{key}' violates unique constraint '{constraint}'.",
            ErrorCode.DUPLICATE_KEY.value,
            {"constraint": constraint, "key": key},
        )


class SqlNotConfiguredException(TenantManagementException):
    """Raised when an operation requires the SQL database but it is not configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code=ErrorCode.SERVICE_UNAVAILABLE.value,
        )
