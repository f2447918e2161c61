"""Persistence models: ORM entities and mixins."""

from tenant_management.infrastructure.persistence.models.deployment_setting import (
    DeploymentSetting,
)
from tenant_management.infrastructure.persistence.models.mixins import (
    TimestampMixin,
    VersionedMixin,
)
from tenant_management.infrastructure.persistence.models.tenant import Tenant

__all__ = [
    "DeploymentSetting",
    "Tenant",
    "TimestampMixin",
    "VersionedMixin",
]
