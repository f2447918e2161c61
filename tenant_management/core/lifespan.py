"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring: logging, the identity-provider
gateway and provisioning options on app.state, DB engine dispose.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from tenant_management.core.config import ProvisioningConfig, get_settings
from tenant_management.infrastructure.external.identity import (
    CognitoIdentityProviderGateway,
)
from tenant_management.infrastructure.persistence.database import dispose_engine
from tenant_management.shared.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown."""
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    secret_key = settings.aws_secret_access_key
    app.state.identity_gateway = CognitoIdentityProviderGateway(
        region=settings.aws_region,
        endpoint_url=settings.cognito_endpoint_url,
        access_key=settings.aws_access_key_id,
        secret_key=secret_key.get_secret_value() if secret_key else None,
    )
    app.state.provisioning_config = ProvisioningConfig.from_settings(settings)
    logger.info(
        "%s %s started (environment=%s, region=%s)",
        settings.app_name,
        settings.app_version,
        settings.environment,
        settings.aws_region,
    )

    yield

    # ---- Shutdown ----
    app.state.identity_gateway = None
    await dispose_engine()
