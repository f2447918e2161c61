"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from tenant_management.api.v1.dependencies.
"""

from fastapi import APIRouter

from tenant_management.api.v1.endpoints import config, deployment, health, tenants

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(tenants.router, prefix="/tenants", tags=["tenants"])
api_router.include_router(
    deployment.router, prefix="/deployment", tags=["deployment"]
)
api_router.include_router(config.router, prefix="/config", tags=["config"])
