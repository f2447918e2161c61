"""Deployment settings API, called by the deployment pipeline after each rollout."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status

from tenant_management.api.v1.dependencies import (
    get_update_deployment_settings_use_case,
)
from tenant_management.application.dtos.tenant import DeploymentSettingsUpdate
from tenant_management.application.use_cases.deployment import (
    UpdateDeploymentSettingsUseCase,
)
from tenant_management.core.limiter import limit_writes
from tenant_management.schemas.deployment import DeploymentSettingsBody

router = APIRouter()


@router.put("/settings", status_code=status.HTTP_204_NO_CONTENT)
@limit_writes
async def update_deployment_settings(
    request: Request,
    body: DeploymentSettingsBody,
    use_case: Annotated[
        UpdateDeploymentSettingsUseCase,
        Depends(get_update_deployment_settings_use_case),
    ],
) -> Response:
    """Store the operations URL and the ordered client app URLs."""
    await use_case.execute(
        DeploymentSettingsUpdate(
            saas_operations_url=body.saas_operations_url,
            client_app_urls=list(body.client_app_urls),
        )
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
