"""Tenant API schemas.

Identity fields that are not assigned yet are rendered as "PENDING".
"""

from datetime import datetime

from pydantic import BaseModel, Field

from tenant_management.application.dtos.tenant import TenantClientConfig, TenantDetails
from tenant_management.domain.entities.tenant import PENDING


def _or_pending(value: str | None) -> str:
    return value if value is not None else PENDING


class ProvisionTenantBody(BaseModel):
    """Request body for provisioning a tenant.

    Blank and malformed values are rejected by the provisioning use case
    with 400, not by schema validation.
    """

    tenant_name: str = Field(..., max_length=255, description="Display name")
    tenant_code: str = Field(
        ..., description="Unique tenant code (stored upper-cased, max 50 chars)"
    )
    administrator_email: str = Field(
        ..., description="Email of the tenant's first administrator"
    )


class ProvisionTenantResponse(BaseModel):
    """Response after provisioning was accepted."""

    tenant_id: str


class TenantResponse(BaseModel):
    """Tenant read model."""

    tenant_id: str
    tenant_code: str
    tenant_name: str
    administrator_email: str
    administrator_subject: str
    identity_pool_id: str
    identity_domain: str
    client_app_id: str
    phase: str
    version: int
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_details(cls, details: TenantDetails) -> "TenantResponse":
        return cls(
            tenant_id=details.tenant_id,
            tenant_code=details.tenant_code,
            tenant_name=details.tenant_name,
            administrator_email=details.administrator_email,
            administrator_subject=_or_pending(details.administrator_subject),
            identity_pool_id=_or_pending(details.identity_pool_id),
            identity_domain=_or_pending(details.identity_domain),
            client_app_id=_or_pending(details.client_app_id),
            phase=details.phase.value,
            version=details.version,
            created_at=details.created_at,
            updated_at=details.updated_at,
        )


class TenantClientConfigResponse(BaseModel):
    """What a tenant's client application needs to sign users in."""

    tenant_id: str
    tenant_code: str
    tenant_name: str
    identity_pool_id: str
    client_app_id: str

    @classmethod
    def from_config(cls, config: TenantClientConfig) -> "TenantClientConfigResponse":
        return cls(
            tenant_id=config.tenant_id,
            tenant_code=config.tenant_code,
            tenant_name=config.tenant_name,
            identity_pool_id=_or_pending(config.identity_pool_id),
            client_app_id=_or_pending(config.client_app_id),
        )
