"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from tenant_management.domain.entities import PENDING, TenantRecord
from tenant_management.domain.enums import (
    DeploymentSettingType,
    ErrorCode,
    ProvisioningPhase,
)
from tenant_management.domain.exceptions import (
    ConcurrencyConflictException,
    DuplicateKeyError,
    DuplicateResourceException,
    IdentityProviderException,
    InvalidArgumentException,
    InvalidOperationException,
    OperationCancelledException,
    ResourceNotFoundException,
    TenantManagementException,
)
from tenant_management.domain.value_objects import EmailAddress, TenantCode

__all__ = [
    # Entities
    "PENDING",
    "TenantRecord",
    # Enums
    "DeploymentSettingType",
    "ErrorCode",
    "ProvisioningPhase",
    # Exceptions
    "ConcurrencyConflictException",
    "DuplicateKeyError",
    "DuplicateResourceException",
    "IdentityProviderException",
    "InvalidArgumentException",
    "InvalidOperationException",
    "OperationCancelledException",
    "ResourceNotFoundException",
    "TenantManagementException",
    # Value objects
    "EmailAddress",
    "TenantCode",
]
