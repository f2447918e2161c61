"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference domain entities or application DTOs only; no
infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tenant_management.application.dtos.deployment import DeploymentSetting
    from tenant_management.domain.entities.tenant import TenantRecord


# Tenant record store interface
class ITenantRecordStore(Protocol):
    """Protocol for durable tenant records (DIP).

    Every write is committed before the call returns, so saga progress
    survives a process failure between steps.
    """

    async def create(self, record: TenantRecord) -> TenantRecord:
        """Insert a new record (code upper-cased). Raises DuplicateKeyError on duplicate code."""

    async def update(self, record: TenantRecord, expected_version: int) -> TenantRecord:
        """Write record if the stored version equals expected_version; return it with version + 1.

        Raises ConcurrencyConflictException on a stale version and
        ResourceNotFoundException if the record no longer exists.
        """

    async def delete(self, record: TenantRecord) -> None:
        """Delete the record. No-op if it is already gone."""

    async def get_by_id(self, tenant_id: str) -> TenantRecord | None:
        """Return record by tenant ID."""

    async def find(
        self,
        tenant_id: str | None = None,
        tenant_code: str | None = None,
        tenant_name: str | None = None,
    ) -> TenantRecord | None:
        """Return the first record matching all given filters (code and name case-insensitive)."""

    async def list_all(self) -> list[TenantRecord]:
        """Return all records ordered by tenant name."""


# Deployment settings repository interface
class IDeploymentSettingRepository(Protocol):
    """Protocol for the deployment settings key/value list (DIP)."""

    async def list_by_type(self, setting_type: str) -> list[DeploymentSetting]:
        """Return settings of a type in insertion order."""

    async def list_values(self, setting_type: str) -> list[str]:
        """Return setting values of a type in insertion order."""

    async def add(self, setting_type: str, value: str) -> DeploymentSetting:
        """Append a new setting."""

    async def update_value(self, setting_id: int, value: str) -> None:
        """Overwrite the value of an existing setting."""

    async def delete(self, setting_id: int) -> None:
        """Remove a setting."""
