"""Tenant record domain entity.

Represents the durable state of one tenant's identity realm, independent of
persistence. Unset identity fields are None; which fields are set tells how
far provisioning got.
"""

from dataclasses import dataclass, replace
from datetime import datetime

from tenant_management.domain.enums import ProvisioningPhase
from tenant_management.domain.value_objects.core import EmailAddress, TenantCode

# Rendered at the API boundary for identity fields that are not yet assigned.
PENDING = "PENDING"


@dataclass(frozen=True)
class TenantRecord:
    """Domain entity for a tenant and its identity-provider resources.

    A record may be persisted before it is fully provisioned: each saga step
    commits its own progress so a crash between steps leaves discoverable,
    cleanable state. Updates go through with_* methods, which return a new
    record; the store bumps version on every successful write.
    """

    tenant_id: str
    tenant_code: str
    tenant_name: str
    administrator_email: str
    administrator_subject: str | None = None
    identity_pool_id: str | None = None
    identity_domain: str | None = None
    client_app_id: str | None = None
    version: int = 1
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def new(
        cls,
        tenant_id: str,
        tenant_code: str,
        tenant_name: str,
        administrator_email: str,
    ) -> "TenantRecord":
        """Build a record at phase PENDING. Code is upper-cased, email validated.

        Raises:
            InvalidArgumentException: If code or email is invalid.
        """
        return cls(
            tenant_id=tenant_id,
            tenant_code=TenantCode(tenant_code).value,
            tenant_name=tenant_name,
            administrator_email=EmailAddress(administrator_email).value,
        )

    @property
    def phase(self) -> ProvisioningPhase:
        """Current provisioning phase, derived from the identity fields."""
        if self.is_fully_provisioned:
            return ProvisioningPhase.ACTIVE
        if self.client_app_id is not None:
            return ProvisioningPhase.CLIENT_APP_CREATED
        if self.identity_domain is not None:
            return ProvisioningPhase.DOMAIN_CREATED
        if self.identity_pool_id is not None:
            return ProvisioningPhase.POOL_CREATED
        return ProvisioningPhase.PENDING

    @property
    def is_fully_provisioned(self) -> bool:
        return None not in (
            self.identity_pool_id,
            self.identity_domain,
            self.client_app_id,
            self.administrator_subject,
        )

    def with_identity_pool(self, pool_id: str) -> "TenantRecord":
        return replace(self, identity_pool_id=pool_id)

    def with_identity_domain(self, domain: str) -> "TenantRecord":
        return replace(self, identity_domain=domain)

    def with_client_app(self, client_app_id: str) -> "TenantRecord":
        return replace(self, client_app_id=client_app_id)

    def with_administrator(self, subject: str) -> "TenantRecord":
        return replace(self, administrator_subject=subject)

    def without_identity_domain(self) -> "TenantRecord":
        """Forget the login domain once the provider has deleted it."""
        return replace(self, identity_domain=None)
