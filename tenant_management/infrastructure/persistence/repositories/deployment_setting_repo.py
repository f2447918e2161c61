"""Deployment settings repository. Returns application DTOs.

Writes are flushed, not committed: callers run the whole reconciliation
in one transaction (get_db_transactional).
"""

from __future__ import annotations

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_management.application.dtos.deployment import DeploymentSetting
from tenant_management.domain.exceptions import ResourceNotFoundException
from tenant_management.infrastructure.persistence.models.deployment_setting import (
    DeploymentSetting as DeploymentSettingModel,
)
from tenant_management.infrastructure.persistence.repositories.base import (
    BaseRepository,
)


def _setting_to_dto(s: DeploymentSettingModel) -> DeploymentSetting:
    return DeploymentSetting(
        id=s.id, setting_type=s.setting_type, setting_value=s.setting_value
    )


class DeploymentSettingRepository(BaseRepository[DeploymentSettingModel]):
    """SQL implementation of IDeploymentSettingRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, DeploymentSettingModel)

    async def list_by_type(self, setting_type: str) -> list[DeploymentSetting]:
        result = await self.db.execute(
            select(DeploymentSettingModel)
            .where(DeploymentSettingModel.setting_type == setting_type)
            .order_by(DeploymentSettingModel.id)
        )
        return [_setting_to_dto(s) for s in result.scalars().all()]

    async def list_values(self, setting_type: str) -> list[str]:
        result = await self.db.execute(
            select(DeploymentSettingModel.setting_value)
            .where(DeploymentSettingModel.setting_type == setting_type)
            .order_by(DeploymentSettingModel.id)
        )
        return list(result.scalars().all())

    async def add(self, setting_type: str, value: str) -> DeploymentSetting:
        setting = DeploymentSettingModel(setting_type=setting_type, setting_value=value)
        self.db.add(setting)
        await self.db.flush()
        await self.db.refresh(setting)
        return _setting_to_dto(setting)

    async def update_value(self, setting_id: int, value: str) -> None:
        result = await self.db.execute(
            update(DeploymentSettingModel)
            .where(DeploymentSettingModel.id == setting_id)
            .values(setting_value=value)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise ResourceNotFoundException("DeploymentSetting", str(setting_id))
        await self.db.flush()

    async def delete(self, setting_id: int) -> None:
        await self.db.execute(
            delete(DeploymentSettingModel)
            .where(DeploymentSettingModel.id == setting_id)
            .execution_options(synchronize_session=False)
        )
        await self.db.flush()
