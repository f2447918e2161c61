"""Tenant API: thin routes delegating to the provisioning, decommissioning and query use cases."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response, status

from tenant_management.api.v1.dependencies import (
    get_decommissioning_orchestrator,
    get_provisioning_orchestrator,
    get_tenant_query_service,
)
from tenant_management.application.dtos.tenant import ProvisionTenantRequest
from tenant_management.application.use_cases.tenants import (
    DecommissioningOrchestrator,
    ProvisioningOrchestrator,
    TenantQueryService,
)
from tenant_management.core.limiter import limit_provision_tenant
from tenant_management.domain.exceptions import ResourceNotFoundException
from tenant_management.schemas.tenant import (
    ProvisionTenantBody,
    ProvisionTenantResponse,
    TenantClientConfigResponse,
    TenantResponse,
)

router = APIRouter()


@router.post(
    "",
    response_model=ProvisionTenantResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
@limit_provision_tenant
async def provision_tenant(
    request: Request,
    body: ProvisionTenantBody,
    orchestrator: Annotated[
        ProvisioningOrchestrator, Depends(get_provisioning_orchestrator)
    ],
):
    """Provision a tenant: record, identity pool, login domain, client app and administrator.

    400 on a missing field or invalid email, 409 if the tenant code exists.
    """
    result = await orchestrator.provision(
        ProvisionTenantRequest(
            tenant_name=body.tenant_name,
            tenant_code=body.tenant_code,
            administrator_email=body.administrator_email,
        )
    )
    return ProvisionTenantResponse(tenant_id=result.tenant_id)


@router.delete("/{tenant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def decommission_tenant(
    tenant_id: str,
    orchestrator: Annotated[
        DecommissioningOrchestrator, Depends(get_decommissioning_orchestrator)
    ],
) -> Response:
    """Delete the tenant's login domain, identity pool and record. 404 if unknown."""
    await orchestrator.decommission(tenant_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("", response_model=list[TenantResponse])
async def list_tenants(
    queries: Annotated[TenantQueryService, Depends(get_tenant_query_service)],
):
    """All tenants ordered by name."""
    return [TenantResponse.from_details(t) for t in await queries.get_tenants()]


@router.get("/client-config", response_model=TenantClientConfigResponse)
async def get_client_config(
    queries: Annotated[TenantQueryService, Depends(get_tenant_query_service)],
    tenant_id: Annotated[str | None, Query()] = None,
    tenant_code: Annotated[str | None, Query()] = None,
    tenant_name: Annotated[str | None, Query()] = None,
):
    """Sign-in config of the tenant matching all given filters (code and name case-insensitive)."""
    config = await queries.find_client_config(
        tenant_id=tenant_id, tenant_code=tenant_code, tenant_name=tenant_name
    )
    if config is None:
        raise ResourceNotFoundException(
            "Tenant",
            tenant_id or tenant_code or tenant_name or "",
        )
    return TenantClientConfigResponse.from_config(config)


@router.get("/{tenant_id}", response_model=TenantResponse)
async def get_tenant(
    tenant_id: str,
    queries: Annotated[TenantQueryService, Depends(get_tenant_query_service)],
):
    """Get tenant by id."""
    details = await queries.get_tenant(tenant_id)
    if details is None:
        raise ResourceNotFoundException("Tenant", tenant_id)
    return TenantResponse.from_details(details)
