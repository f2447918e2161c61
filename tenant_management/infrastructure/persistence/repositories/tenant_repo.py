"""Tenant record repository. Returns domain TenantRecord entities.

Every write is committed before returning so each provisioning step is
durable on its own.
"""

from __future__ import annotations

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_management.domain.entities.tenant import TenantRecord
from tenant_management.domain.exceptions import (
    ConcurrencyConflictException,
    DuplicateKeyError,
    ResourceNotFoundException,
)
from tenant_management.infrastructure.persistence.models.tenant import Tenant
from tenant_management.infrastructure.persistence.repositories.base import (
    BaseRepository,
)
from tenant_management.shared.logging import get_logger

logger = get_logger(__name__)

TENANT_CODE_CONSTRAINT = "tenant_code_key"
# How the code index shows up in driver errors: Postgres names the index,
# SQLite names the column of the failed UNIQUE check.
_CODE_VIOLATION_MARKERS = ("ix_tenant_code", "UNIQUE constraint failed: tenant.code")


def _is_code_violation(exc: IntegrityError) -> bool:
    message = str(exc.orig)
    return any(marker in message for marker in _CODE_VIOLATION_MARKERS)


def _tenant_to_record(t: Tenant) -> TenantRecord:
    """Map ORM Tenant to domain TenantRecord."""
    return TenantRecord(
        tenant_id=t.id,
        tenant_code=t.code,
        tenant_name=t.name,
        administrator_email=t.administrator_email,
        administrator_subject=t.administrator_subject,
        identity_pool_id=t.identity_pool_id,
        identity_domain=t.identity_domain,
        client_app_id=t.client_app_id,
        version=t.version,
        created_at=t.created_at,
        updated_at=t.updated_at,
    )


class TenantRecordRepository(BaseRepository[Tenant]):
    """SQL implementation of ITenantRecordStore."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Tenant)

    async def create(self, record: TenantRecord) -> TenantRecord:
        """Insert record (code upper-cased) at version 1.

        Raises DuplicateKeyError when the code index rejects the insert; any
        other IntegrityError (e.g. a reused ID) propagates unchanged.
        """
        code = record.tenant_code.upper()
        tenant = Tenant(
            id=record.tenant_id,
            code=code,
            name=record.tenant_name,
            administrator_email=record.administrator_email,
            administrator_subject=record.administrator_subject,
            identity_pool_id=record.identity_pool_id,
            identity_domain=record.identity_domain,
            client_app_id=record.client_app_id,
            version=1,
        )
        self.db.add(tenant)
        try:
            await self.db.flush()
            await self.db.commit()
        except IntegrityError as exc:
            await self.db.rollback()
            if not _is_code_violation(exc):
                raise
            raise DuplicateKeyError(TENANT_CODE_CONSTRAINT, code) from exc
        await self.db.refresh(tenant)
        return _tenant_to_record(tenant)

    async def update(self, record: TenantRecord, expected_version: int) -> TenantRecord:
        """Conditional update on (id, version); bumps version by one.

        Raises ConcurrencyConflictException when the stored version differs
        and ResourceNotFoundException when the row is gone.
        """
        stmt = (
            update(Tenant)
            .where(Tenant.id == record.tenant_id, Tenant.version == expected_version)
            .values(
                name=record.tenant_name,
                administrator_email=record.administrator_email,
                administrator_subject=record.administrator_subject,
                identity_pool_id=record.identity_pool_id,
                identity_domain=record.identity_domain,
                client_app_id=record.client_app_id,
                version=Tenant.version + 1,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        if result.rowcount == 0:
            await self.db.rollback()
            if await self._get_row(record.tenant_id) is None:
                raise ResourceNotFoundException("Tenant", record.tenant_id)
            logger.warning(
                "Stale write on tenant '%s' (expected version %d)",
                record.tenant_id,
                expected_version,
            )
            raise ConcurrencyConflictException(
                "Tenant", record.tenant_id, expected_version
            )
        await self.db.commit()
        tenant = await self._get_row(record.tenant_id)
        if tenant is None:
            raise ResourceNotFoundException("Tenant", record.tenant_id)
        return _tenant_to_record(tenant)

    async def delete(self, record: TenantRecord) -> None:
        """Delete by ID. No-op if the row is already gone."""
        await self.db.execute(
            delete(Tenant)
            .where(Tenant.id == record.tenant_id)
            .execution_options(synchronize_session=False)
        )
        await self.db.commit()

    async def get_by_id(self, tenant_id: str) -> TenantRecord | None:
        tenant = await self._get_row(tenant_id)
        return _tenant_to_record(tenant) if tenant else None

    async def find(
        self,
        tenant_id: str | None = None,
        tenant_code: str | None = None,
        tenant_name: str | None = None,
    ) -> TenantRecord | None:
        """First record matching all given filters; code and name case-insensitive."""
        stmt = select(Tenant)
        if tenant_id is not None:
            stmt = stmt.where(Tenant.id == tenant_id)
        if tenant_code is not None:
            stmt = stmt.where(func.upper(Tenant.code) == tenant_code.upper())
        if tenant_name is not None:
            stmt = stmt.where(func.upper(Tenant.name) == tenant_name.upper())
        result = await self.db.execute(
            stmt.order_by(Tenant.name, Tenant.id)
            .limit(1)
            .execution_options(populate_existing=True)
        )
        tenant = result.scalar_one_or_none()
        return _tenant_to_record(tenant) if tenant else None

    async def list_all(self) -> list[TenantRecord]:
        """All records ordered by tenant name."""
        result = await self.db.execute(
            select(Tenant)
            .order_by(Tenant.name, Tenant.id)
            .execution_options(populate_existing=True)
        )
        return [_tenant_to_record(t) for t in result.scalars().all()]
