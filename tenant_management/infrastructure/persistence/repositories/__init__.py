"""Repositories: SQL implementations of the application ports."""

from tenant_management.infrastructure.persistence.repositories.deployment_setting_repo import (
    DeploymentSettingRepository,
)
from tenant_management.infrastructure.persistence.repositories.tenant_repo import (
    TenantRecordRepository,
)

__all__ = ["DeploymentSettingRepository", "TenantRecordRepository"]
