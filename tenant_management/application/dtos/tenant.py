"""DTOs for tenant use cases (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime

from tenant_management.domain.entities.tenant import TenantRecord
from tenant_management.domain.enums import ProvisioningPhase


@dataclass(frozen=True)
class ProvisionTenantRequest:
    """Input to ProvisioningOrchestrator.provision."""

    tenant_name: str
    tenant_code: str
    administrator_email: str


@dataclass(frozen=True)
class ProvisionTenantResult:
    """Result of a successful provisioning saga."""

    tenant_id: str


@dataclass(frozen=True)
class TenantDetails:
    """Tenant read-model (result of get_tenant, get_tenants)."""

    tenant_id: str
    tenant_code: str
    tenant_name: str
    administrator_email: str
    administrator_subject: str | None
    identity_pool_id: str | None
    identity_domain: str | None
    client_app_id: str | None
    phase: ProvisioningPhase
    version: int
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_record(cls, record: TenantRecord) -> "TenantDetails":
        return cls(
            tenant_id=record.tenant_id,
            tenant_code=record.tenant_code,
            tenant_name=record.tenant_name,
            administrator_email=record.administrator_email,
            administrator_subject=record.administrator_subject,
            identity_pool_id=record.identity_pool_id,
            identity_domain=record.identity_domain,
            client_app_id=record.client_app_id,
            phase=record.phase,
            version=record.version,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )


@dataclass(frozen=True)
class TenantClientConfig:
    """What a tenant's client application needs to sign users in."""

    tenant_id: str
    tenant_code: str
    tenant_name: str
    identity_pool_id: str | None
    client_app_id: str | None

    @classmethod
    def from_record(cls, record: TenantRecord) -> "TenantClientConfig":
        return cls(
            tenant_id=record.tenant_id,
            tenant_code=record.tenant_code,
            tenant_name=record.tenant_name,
            identity_pool_id=record.identity_pool_id,
            client_app_id=record.client_app_id,
        )


@dataclass(frozen=True)
class DeploymentSettingsUpdate:
    """Deployed application URLs reported by the deployment pipeline."""

    saas_operations_url: str
    client_app_urls: list[str] = field(default_factory=list)
