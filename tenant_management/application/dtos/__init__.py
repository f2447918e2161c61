"""Application DTOs: plain dataclasses passed between layers."""

from tenant_management.application.dtos.deployment import DeploymentSetting
from tenant_management.application.dtos.identity import (
    AdminUserSpec,
    ClientAppSpec,
    InviteMessageTemplate,
    PoolSpec,
    SchemaAttribute,
)
from tenant_management.application.dtos.tenant import (
    DeploymentSettingsUpdate,
    ProvisionTenantRequest,
    ProvisionTenantResult,
    TenantClientConfig,
    TenantDetails,
)

__all__ = [
    "AdminUserSpec",
    "ClientAppSpec",
    "DeploymentSetting",
    "DeploymentSettingsUpdate",
    "InviteMessageTemplate",
    "PoolSpec",
    "ProvisionTenantRequest",
    "ProvisionTenantResult",
    "SchemaAttribute",
    "TenantClientConfig",
    "TenantDetails",
]
