"""Read-side use cases for tenant records."""

from __future__ import annotations

from tenant_management.application.dtos.tenant import TenantClientConfig, TenantDetails
from tenant_management.application.interfaces.repositories import ITenantRecordStore


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


class TenantQueryService:
    """Lookup and listing of tenant records."""

    def __init__(self, tenant_store: ITenantRecordStore) -> None:
        self.tenant_store = tenant_store

    async def get_tenant(self, tenant_id: str) -> TenantDetails | None:
        record = await self.tenant_store.get_by_id(tenant_id)
        return TenantDetails.from_record(record) if record else None

    async def get_tenants(self) -> list[TenantDetails]:
        """All tenants ordered by name."""
        records = await self.tenant_store.list_all()
        return [TenantDetails.from_record(r) for r in records]

    async def find_client_config(
        self,
        tenant_id: str | None = None,
        tenant_code: str | None = None,
        tenant_name: str | None = None,
    ) -> TenantClientConfig | None:
        """Resolve the sign-in config of the tenant matching every given filter.

        Code and name match case-insensitively. Blank filters are ignored;
        with no filter at all the result is None rather than an arbitrary tenant.
        """
        tenant_id = _clean(tenant_id)
        tenant_code = _clean(tenant_code)
        tenant_name = _clean(tenant_name)
        if tenant_id is None and tenant_code is None and tenant_name is None:
            return None

        record = await self.tenant_store.find(
            tenant_id=tenant_id, tenant_code=tenant_code, tenant_name=tenant_name
        )
        return TenantClientConfig.from_record(record) if record else None
