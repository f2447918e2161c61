"""Repository tests against a real SQLAlchemy engine (in-memory SQLite via aiosqlite)."""

import pytest
from sqlalchemy.exc import IntegrityError

from tenant_management.domain import (
    ConcurrencyConflictException,
    DuplicateKeyError,
    ResourceNotFoundException,
    TenantRecord,
)
from tenant_management.domain.enums import DeploymentSettingType
from tenant_management.infrastructure.persistence.repositories import (
    DeploymentSettingRepository,
    TenantRecordRepository,
)


def _record(tenant_id: str = "t1", code: str = "acme", name: str = "Acme Corp") -> TenantRecord:
    return TenantRecord.new(tenant_id, code, name, f"admin@{code}.com")


async def test_create_and_get_by_id(db_session) -> None:
    repo = TenantRecordRepository(db_session)
    created = await repo.create(_record())

    assert created.tenant_code == "ACME"
    assert created.version == 1
    assert created.identity_pool_id is None
    assert created.created_at is not None

    found = await repo.get_by_id("t1")
    assert found is not None
    assert found.tenant_name == "Acme Corp"


async def test_duplicate_code_is_case_insensitive(db_session) -> None:
    repo = TenantRecordRepository(db_session)
    await repo.create(_record(code="ACME"))

    with pytest.raises(DuplicateKeyError):
        await repo.create(_record(tenant_id="t2", code="acme"))

    # The session is usable after the failed insert.
    assert len(await repo.list_all()) == 1


async def test_reused_id_is_not_reported_as_duplicate_code(db_session) -> None:
    repo = TenantRecordRepository(db_session)
    await repo.create(_record(tenant_id="t1", code="ACME"))
    db_session.expunge_all()

    with pytest.raises(IntegrityError) as exc_info:
        await repo.create(_record(tenant_id="t1", code="OTHER"))

    assert not isinstance(exc_info.value, DuplicateKeyError)
    assert [r.tenant_code for r in await repo.list_all()] == ["ACME"]


async def test_update_bumps_version(db_session) -> None:
    repo = TenantRecordRepository(db_session)
    created = await repo.create(_record())

    updated = await repo.update(created.with_identity_pool("pool-1"), expected_version=1)

    assert updated.version == 2
    assert updated.identity_pool_id == "pool-1"
    assert (await repo.get_by_id("t1")).identity_pool_id == "pool-1"


async def test_stale_update_raises_conflict(db_session) -> None:
    repo = TenantRecordRepository(db_session)
    created = await repo.create(_record())
    await repo.update(created.with_identity_pool("pool-1"), expected_version=1)

    with pytest.raises(ConcurrencyConflictException):
        await repo.update(created.with_identity_pool("pool-2"), expected_version=1)

    assert (await repo.get_by_id("t1")).identity_pool_id == "pool-1"


async def test_update_missing_record_raises_not_found(db_session) -> None:
    repo = TenantRecordRepository(db_session)
    with pytest.raises(ResourceNotFoundException):
        await repo.update(_record(), expected_version=1)


async def test_delete_is_idempotent(db_session) -> None:
    repo = TenantRecordRepository(db_session)
    created = await repo.create(_record())

    await repo.delete(created)
    await repo.delete(created)

    assert await repo.get_by_id("t1") is None


async def test_find_and_list_all(db_session) -> None:
    repo = TenantRecordRepository(db_session)
    await repo.create(_record("t1", "zeta", "Zeta Ltd"))
    await repo.create(_record("t2", "acme", "Acme Corp"))

    assert [r.tenant_name for r in await repo.list_all()] == ["Acme Corp", "Zeta Ltd"]
    assert (await repo.find(tenant_code="ZeTa")).tenant_id == "t1"
    assert (await repo.find(tenant_name="acme CORP")).tenant_id == "t2"
    assert await repo.find(tenant_id="t1", tenant_code="acme") is None


async def test_deployment_settings_round_trip(db_session) -> None:
    repo = DeploymentSettingRepository(db_session)
    client = DeploymentSettingType.CLIENT_APP_URL.value

    first = await repo.add(client, "https://a")
    await repo.add(client, "https://b")
    await repo.add(DeploymentSettingType.SAAS_OPERATIONS_URL.value, "https://ops")

    assert await repo.list_values(client) == ["https://a", "https://b"]

    await repo.update_value(first.id, "https://a2")
    await repo.delete((await repo.list_by_type(client))[1].id)
    await db_session.commit()

    assert await repo.list_values(client) == ["https://a2"]


async def test_deployment_setting_update_missing_raises(db_session) -> None:
    repo = DeploymentSettingRepository(db_session)
    with pytest.raises(ResourceNotFoundException):
        await repo.update_value(999, "https://x")
