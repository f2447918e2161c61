"""Tenant and deployment dependencies (composition root).

Routes depend only on these factories, never on infrastructure directly.
Tests replace them through app.dependency_overrides.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_management.application.interfaces.services import IIdentityProviderGateway
from tenant_management.application.use_cases.deployment import (
    UpdateDeploymentSettingsUseCase,
)
from tenant_management.application.use_cases.tenants import (
    DecommissioningOrchestrator,
    ProvisioningOrchestrator,
    TenantQueryService,
)
from tenant_management.core.config import ProvisioningConfig
from tenant_management.infrastructure.persistence.database import (
    get_db,
    get_db_transactional,
)
from tenant_management.infrastructure.persistence.repositories import (
    DeploymentSettingRepository,
    TenantRecordRepository,
)


def get_identity_gateway(request: Request) -> IIdentityProviderGateway:
    """Identity-provider gateway built at startup (see core.lifespan)."""
    return request.app.state.identity_gateway


def get_provisioning_config(request: Request) -> ProvisioningConfig:
    """Provisioning options built at startup (see core.lifespan)."""
    return request.app.state.provisioning_config


async def get_tenant_store(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TenantRecordRepository:
    """Tenant record store; commits each write itself."""
    return TenantRecordRepository(db)


async def get_provisioning_orchestrator(
    db: Annotated[AsyncSession, Depends(get_db)],
    gateway: Annotated[IIdentityProviderGateway, Depends(get_identity_gateway)],
    config: Annotated[ProvisioningConfig, Depends(get_provisioning_config)],
) -> ProvisioningOrchestrator:
    return ProvisioningOrchestrator(
        tenant_store=TenantRecordRepository(db),
        settings_repo=DeploymentSettingRepository(db),
        identity_gateway=gateway,
        config=config,
    )


async def get_decommissioning_orchestrator(
    store: Annotated[TenantRecordRepository, Depends(get_tenant_store)],
    gateway: Annotated[IIdentityProviderGateway, Depends(get_identity_gateway)],
) -> DecommissioningOrchestrator:
    return DecommissioningOrchestrator(tenant_store=store, identity_gateway=gateway)


async def get_tenant_query_service(
    store: Annotated[TenantRecordRepository, Depends(get_tenant_store)],
) -> TenantQueryService:
    return TenantQueryService(store)


async def get_update_deployment_settings_use_case(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> UpdateDeploymentSettingsUseCase:
    """Deployment settings use case (one transaction for the whole reconciliation)."""
    return UpdateDeploymentSettingsUseCase(DeploymentSettingRepository(db))
