"""Domain enumerations for the tenant management service.

Enums represent fixed sets of domain values (error codes, provisioning phase,
deployment setting types).
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Machine-readable error codes surfaced to API callers."""

    UNKNOWN = "UNKNOWN"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    DUPLICATE_RESOURCE = "DUPLICATE_RESOURCE"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    CONCURRENCY_CONFLICT = "CONCURRENCY_CONFLICT"
    INVALID_OPERATION = "INVALID_OPERATION"
    OPERATION_CANCELLED = "OPERATION_CANCELLED"
    DUPLICATE_KEY = "DUPLICATE_KEY"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"


class ProvisioningPhase(str, Enum):
    """How far provisioning got, derived from which identity fields are set.

    Phases follow the saga order: pool, domain, client app, administrator.
    """

    PENDING = "pending"
    POOL_CREATED = "pool_created"
    DOMAIN_CREATED = "domain_created"
    CLIENT_APP_CREATED = "client_app_created"
    ACTIVE = "active"

    @classmethod
    def values(cls) -> list[str]:
        """Return all phase values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [phase.value for phase in cls]


class DeploymentSettingType(str, Enum):
    """Keys of the append-only deployment settings list."""

    SAAS_OPERATIONS_URL = "SaasOperationsUrl"
    CLIENT_APP_URL = "ClientAppUrl"
