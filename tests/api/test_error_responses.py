"""Tests for error response bodies in production and development."""

import pytest
from httpx import ASGITransport, AsyncClient

from tenant_management.api.v1.dependencies import (
    get_decommissioning_orchestrator,
    get_provisioning_orchestrator,
    get_tenant_query_service,
)
from tenant_management.application.use_cases.tenants import (
    DecommissioningOrchestrator,
    ProvisioningOrchestrator,
)
from tenant_management.core import exception_handlers
from tenant_management.core.config import Settings
from tenant_management.core.limiter import limiter
from tenant_management.domain import IdentityProviderException, TenantRecord
from tenant_management.main import app

POOL_ID = "us-east-1_AbCdEf"
PROVIDER_MESSAGE = f"User pool {POOL_ID} does not exist."


def _use_environment(monkeypatch, environment: str) -> None:
    settings = Settings(
        environment=environment,
        debug=False,
        database_url="sqlite+aiosqlite:///:memory:",
        _env_file=None,
    )
    monkeypatch.setattr(exception_handlers, "get_settings", lambda: settings)


@pytest.fixture
def production(monkeypatch) -> None:
    _use_environment(monkeypatch, "production")


@pytest.fixture
def development(monkeypatch) -> None:
    _use_environment(monkeypatch, "development")


@pytest.fixture
def failing_pool_delete(client, tenant_store, gateway) -> AsyncClient:
    """Tenant t1 whose pool delete fails with a provider message naming the pool."""
    tenant_store.seed(
        TenantRecord.new("t1", "acme", "Acme", "admin@acme.com").with_identity_pool(
            POOL_ID
        )
    )
    gateway.failures["delete_pool"] = IdentityProviderException(
        "delete_pool", 400, f"Identity provider call 'delete_pool' failed ({PROVIDER_MESSAGE})"
    )
    app.dependency_overrides[get_decommissioning_orchestrator] = lambda: (
        DecommissioningOrchestrator(tenant_store, gateway)
    )
    return client


@pytest.fixture
async def unguarded_client() -> AsyncClient:
    """Client that returns the 500 response instead of re-raising the app error."""
    limiter.enabled = False
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
    limiter.enabled = True


def _broken_query_service():
    raise RuntimeError(f"connection to {POOL_ID} refused")


async def test_provider_failure_in_production_hides_message_and_details(
    failing_pool_delete: AsyncClient, production
) -> None:
    response = await failing_pool_delete.delete("/api/v1/tenants/t1")

    assert response.status_code == 500
    assert POOL_ID.encode() not in response.content
    assert response.json() == {
        "type": "about:blank",
        "title": "InternalServerError",
        "status": 500,
        "detail": "An unexpected error occurred.",
        "error_code": "INVALID_OPERATION",
    }


async def test_provider_failure_in_development_includes_message_and_details(
    failing_pool_delete: AsyncClient, development
) -> None:
    response = await failing_pool_delete.delete("/api/v1/tenants/t1")

    assert response.status_code == 500
    body = response.json()
    assert body["title"] == "IdentityProviderException"
    assert PROVIDER_MESSAGE in body["detail"]
    assert body["details"] == {"status_code": 400, "operation": "delete_pool"}


async def test_client_errors_keep_details_in_production(
    client: AsyncClient, tenant_store, settings_repo, gateway, provisioning_config, production
) -> None:
    app.dependency_overrides[get_provisioning_orchestrator] = lambda: (
        ProvisioningOrchestrator(tenant_store, settings_repo, gateway, provisioning_config)
    )

    response = await client.post(
        "/api/v1/tenants",
        json={
            "tenant_name": "Acme",
            "tenant_code": "acme",
            "administrator_email": "nope",
        },
    )

    assert response.status_code == 400
    body = response.json()
    assert body["error_code"] == "INVALID_ARGUMENT"
    assert body["details"] == {"field": "administrator_email"}


async def test_unhandled_error_in_production_has_no_debug_fields(
    unguarded_client: AsyncClient, production
) -> None:
    app.dependency_overrides[get_tenant_query_service] = _broken_query_service

    response = await unguarded_client.get("/api/v1/tenants")

    assert response.status_code == 500
    body = response.json()
    assert body["error_code"] == "UNKNOWN"
    assert body["detail"] == "An unexpected error occurred."
    for key in ("exception_type", "exception_message", "traceback"):
        assert key not in body
    assert POOL_ID.encode() not in response.content


async def test_unhandled_error_in_development_has_debug_fields(
    unguarded_client: AsyncClient, development
) -> None:
    app.dependency_overrides[get_tenant_query_service] = _broken_query_service

    response = await unguarded_client.get("/api/v1/tenants")

    assert response.status_code == 500
    body = response.json()
    assert body["exception_type"] == "RuntimeError"
    assert POOL_ID in body["exception_message"]
    assert body["traceback"]
