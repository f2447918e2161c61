"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from tenant_management.infrastructure or tenant_management.api.
"""

from tenant_management.application.interfaces.repositories import (
    IDeploymentSettingRepository,
    ITenantRecordStore,
)
from tenant_management.application.interfaces.services import IIdentityProviderGateway

__all__ = [
    "IDeploymentSettingRepository",
    "IIdentityProviderGateway",
    "ITenantRecordStore",
]
