"""Unit tests for TenantQueryService."""

import pytest

from tenant_management.application.use_cases.tenants import TenantQueryService
from tenant_management.domain import ProvisioningPhase, TenantRecord


@pytest.fixture
def queries(tenant_store) -> TenantQueryService:
    tenant_store.seed(
        TenantRecord.new("t2", "zeta", "Zeta Ltd", "admin@zeta.com")
        .with_identity_pool("pool-z")
        .with_identity_domain("tenant-t2")
        .with_client_app("client-z")
    )
    tenant_store.seed(TenantRecord.new("t1", "acme", "Acme Corp", "admin@acme.com"))
    return TenantQueryService(tenant_store)


async def test_get_tenant(queries) -> None:
    details = await queries.get_tenant("t2")
    assert details is not None
    assert details.tenant_code == "ZETA"
    assert details.identity_pool_id == "pool-z"
    assert details.phase is ProvisioningPhase.CLIENT_APP_CREATED


async def test_get_tenant_unknown_returns_none(queries) -> None:
    assert await queries.get_tenant("nope") is None


async def test_get_tenants_ordered_by_name(queries) -> None:
    tenants = await queries.get_tenants()
    assert [t.tenant_name for t in tenants] == ["Acme Corp", "Zeta Ltd"]


async def test_find_client_config_by_code_case_insensitive(queries) -> None:
    config = await queries.find_client_config(tenant_code="  zeta ")
    assert config is not None
    assert config.tenant_id == "t2"
    assert config.identity_pool_id == "pool-z"
    assert config.client_app_id == "client-z"


async def test_find_client_config_by_name_case_insensitive(queries) -> None:
    config = await queries.find_client_config(tenant_name="ACME corp")
    assert config is not None
    assert config.tenant_id == "t1"
    assert config.client_app_id is None


async def test_find_client_config_filters_are_combined(queries) -> None:
    assert await queries.find_client_config(tenant_id="t1", tenant_code="ZETA") is None
    config = await queries.find_client_config(tenant_id="t2", tenant_code="zeta")
    assert config is not None


@pytest.mark.parametrize("kwargs", [{}, {"tenant_code": "   "}, {"tenant_id": ""}])
async def test_find_client_config_without_filters_returns_none(
    queries, tenant_store, kwargs
) -> None:
    assert await queries.find_client_config(**kwargs) is None
    assert "find" not in tenant_store.calls
