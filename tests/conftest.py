"""Pytest configuration and fixtures for tenant_management.

Environment is set before the app is imported so Settings validation
passes without a .env file. API tests replace the use-case dependencies
with ones built on the in-memory fakes from tests.fakes; repository tests
run against an in-memory SQLite database through aiosqlite.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "development")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from tenant_management.core.config import ProvisioningConfig
from tenant_management.core.limiter import limiter
from tenant_management.infrastructure.persistence import models  # noqa: F401
from tenant_management.infrastructure.persistence.database import (
    Base,
    create_session_factory,
)
from tenant_management.main import app
from tests.fakes import (
    FakeIdentityGateway,
    InMemoryDeploymentSettingRepository,
    InMemoryTenantRecordStore,
)


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI). Rate limiting is off."""
    limiter.enabled = False
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
    limiter.enabled = True


@pytest.fixture
def tenant_store() -> InMemoryTenantRecordStore:
    return InMemoryTenantRecordStore()


@pytest.fixture
def settings_repo() -> InMemoryDeploymentSettingRepository:
    return InMemoryDeploymentSettingRepository()


@pytest.fixture
def gateway() -> FakeIdentityGateway:
    return FakeIdentityGateway()


@pytest.fixture
def provisioning_config() -> ProvisioningConfig:
    return ProvisioningConfig()


@pytest.fixture
async def db_session() -> AsyncSession:
    """Session on a fresh in-memory SQLite schema (one per test)."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = create_session_factory(engine)
    async with session_factory() as session:
        yield session
    await engine.dispose()
