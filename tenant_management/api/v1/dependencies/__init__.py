"""Presentation-layer dependency injection (composition root)."""

from tenant_management.api.v1.dependencies.tenant import (
    get_decommissioning_orchestrator,
    get_identity_gateway,
    get_provisioning_config,
    get_provisioning_orchestrator,
    get_tenant_query_service,
    get_tenant_store,
    get_update_deployment_settings_use_case,
)

__all__ = [
    "get_decommissioning_orchestrator",
    "get_identity_gateway",
    "get_provisioning_config",
    "get_provisioning_orchestrator",
    "get_tenant_query_service",
    "get_tenant_store",
    "get_update_deployment_settings_use_case",
]
