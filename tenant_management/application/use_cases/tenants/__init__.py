"""Tenant use cases: provisioning, decommissioning and queries."""

from tenant_management.application.use_cases.tenants.decommissioning import (
    DecommissioningOrchestrator,
)
from tenant_management.application.use_cases.tenants.provisioning import (
    ProvisioningOrchestrator,
)
from tenant_management.application.use_cases.tenants.queries import TenantQueryService

__all__ = [
    "DecommissioningOrchestrator",
    "ProvisioningOrchestrator",
    "TenantQueryService",
]
