"""Deployment settings use case: record URLs reported by the deployment pipeline."""

from __future__ import annotations

from tenant_management.application.dtos.tenant import DeploymentSettingsUpdate
from tenant_management.application.interfaces.repositories import (
    IDeploymentSettingRepository,
)
from tenant_management.domain.enums import DeploymentSettingType
from tenant_management.domain.exceptions import InvalidArgumentException
from tenant_management.shared.logging import get_logger

logger = get_logger(__name__)


class UpdateDeploymentSettingsUseCase:
    """Upserts the operations URL and reconciles the client app URL list.

    Client app URLs are matched by position: existing entries are
    overwritten, extra new URLs are appended and existing entries beyond
    the new list's length are deleted. Order is significant because the
    first client URL goes into new tenants' invitation message.
    """

    def __init__(self, settings_repo: IDeploymentSettingRepository) -> None:
        self.settings_repo = settings_repo

    async def execute(self, update: DeploymentSettingsUpdate) -> None:
        if not update.saas_operations_url or not update.saas_operations_url.strip():
            raise InvalidArgumentException(
                "saas_operations_url is required", field="saas_operations_url"
            )
        await self._upsert_operations_url(update.saas_operations_url.strip())
        await self._reconcile_client_app_urls(
            [url.strip() for url in update.client_app_urls if url and url.strip()]
        )

    async def _upsert_operations_url(self, url: str) -> None:
        setting_type = DeploymentSettingType.SAAS_OPERATIONS_URL.value
        existing = await self.settings_repo.list_by_type(setting_type)
        if existing:
            await self.settings_repo.update_value(existing[0].id, url)
        else:
            await self.settings_repo.add(setting_type, url)

    async def _reconcile_client_app_urls(self, urls: list[str]) -> None:
        setting_type = DeploymentSettingType.CLIENT_APP_URL.value
        existing = await self.settings_repo.list_by_type(setting_type)

        for setting, url in zip(existing, urls):
            if setting.setting_value != url:
                await self.settings_repo.update_value(setting.id, url)
        for url in urls[len(existing):]:
            await self.settings_repo.add(setting_type, url)
        for setting in existing[len(urls):]:
            await self.settings_repo.delete(setting.id)

        logger.info(
            "Client app URLs reconciled: %d configured, %d previously",
            len(urls),
            len(existing),
        )
