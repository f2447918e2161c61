"""Tenant decommissioning: tear down the identity realm, then the record."""

from __future__ import annotations

from tenant_management.application.interfaces.repositories import ITenantRecordStore
from tenant_management.application.interfaces.services import IIdentityProviderGateway
from tenant_management.domain.exceptions import ResourceNotFoundException
from tenant_management.shared.cancellation import CancellationToken
from tenant_management.shared.logging import get_logger

logger = get_logger(__name__)


class DecommissioningOrchestrator:
    """Deletes a tenant's domain, pool and record, skipping resources never created.

    Provider failures are fatal and leave the record in place so the call
    can be repeated once the provider recovers.
    """

    def __init__(
        self,
        tenant_store: ITenantRecordStore,
        identity_gateway: IIdentityProviderGateway,
    ) -> None:
        self.tenant_store = tenant_store
        self.identity_gateway = identity_gateway

    async def decommission(
        self, tenant_id: str, cancellation: CancellationToken | None = None
    ) -> None:
        """Decommission a tenant.

        Raises:
            ResourceNotFoundException: No record with tenant_id (nothing is mutated).
            IdentityProviderException: Domain or pool deletion failed.
            ConcurrencyConflictException: The record changed while decommissioning.
            OperationCancelledException: Cancellation observed between steps.
        """
        record = await self.tenant_store.get_by_id(tenant_id)
        if record is None:
            raise ResourceNotFoundException("Tenant", tenant_id)

        logger.info("Decommissioning tenant '%s'", tenant_id)

        self._checkpoint(cancellation, "delete_identity_domain")
        if record.identity_domain is not None and record.identity_pool_id is not None:
            logger.info(
                "Deleting login domain '%s' of Tenant '%s'",
                record.identity_domain,
                tenant_id,
            )
            await self.identity_gateway.delete_domain(
                record.identity_pool_id, record.identity_domain
            )
            # A retry after a later failure must not delete the domain again.
            record = await self.tenant_store.update(
                record.without_identity_domain(), expected_version=record.version
            )
        else:
            logger.warning(
                "Tenant '%s' has no login domain, skipping domain delete", tenant_id
            )

        self._checkpoint(cancellation, "delete_identity_pool")
        if record.identity_pool_id is not None:
            logger.info(
                "Deleting identity pool '%s' of Tenant '%s'",
                record.identity_pool_id,
                tenant_id,
            )
            await self.identity_gateway.delete_pool(record.identity_pool_id)
        else:
            logger.warning(
                "Tenant '%s' has no identity pool, skipping pool delete", tenant_id
            )

        self._checkpoint(cancellation, "delete_tenant_record")
        await self.tenant_store.delete(record)
        logger.info("Tenant '%s' decommissioned", tenant_id)

    @staticmethod
    def _checkpoint(cancellation: CancellationToken | None, step: str) -> None:
        if cancellation is not None:
            cancellation.raise_if_cancelled(f"decommission_tenant.{step}")
