"""Unit tests for UpdateDeploymentSettingsUseCase (upsert and positional reconciliation)."""

import pytest

from tenant_management.application.dtos.tenant import DeploymentSettingsUpdate
from tenant_management.application.use_cases.deployment import (
    UpdateDeploymentSettingsUseCase,
)
from tenant_management.domain import DeploymentSettingType, InvalidArgumentException

OPS = DeploymentSettingType.SAAS_OPERATIONS_URL.value
CLIENT = DeploymentSettingType.CLIENT_APP_URL.value


@pytest.fixture
def use_case(settings_repo) -> UpdateDeploymentSettingsUseCase:
    return UpdateDeploymentSettingsUseCase(settings_repo)


async def test_first_update_inserts_everything(use_case, settings_repo) -> None:
    await use_case.execute(
        DeploymentSettingsUpdate("https://ops.example.com", ["https://a", "https://b"])
    )

    assert await settings_repo.list_values(OPS) == ["https://ops.example.com"]
    assert await settings_repo.list_values(CLIENT) == ["https://a", "https://b"]


async def test_operations_url_is_upserted(use_case, settings_repo) -> None:
    await use_case.execute(DeploymentSettingsUpdate("https://ops-1"))
    await use_case.execute(DeploymentSettingsUpdate("https://ops-2"))

    assert await settings_repo.list_values(OPS) == ["https://ops-2"]


async def test_client_urls_updated_by_position_and_extended(
    use_case, settings_repo
) -> None:
    await use_case.execute(DeploymentSettingsUpdate("https://ops", ["https://a"]))
    first_id = (await settings_repo.list_by_type(CLIENT))[0].id

    await use_case.execute(
        DeploymentSettingsUpdate("https://ops", ["https://a2", "https://b"])
    )

    settings = await settings_repo.list_by_type(CLIENT)
    assert [s.setting_value for s in settings] == ["https://a2", "https://b"]
    assert settings[0].id == first_id


async def test_shrinking_list_deletes_surplus(use_case, settings_repo) -> None:
    await use_case.execute(
        DeploymentSettingsUpdate("https://ops", ["https://a", "https://b", "https://c"])
    )
    await use_case.execute(DeploymentSettingsUpdate("https://ops", ["https://x"]))

    assert await settings_repo.list_values(CLIENT) == ["https://x"]


async def test_blank_operations_url_rejected(use_case, settings_repo) -> None:
    with pytest.raises(InvalidArgumentException):
        await use_case.execute(DeploymentSettingsUpdate("  ", ["https://a"]))
    assert settings_repo.settings == []
