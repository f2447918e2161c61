"""Tenant ORM model. One row per tenant identity realm."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from tenant_management.infrastructure.persistence.database import Base
from tenant_management.infrastructure.persistence.models.mixins import (
    TimestampMixin,
    VersionedMixin,
)


class Tenant(TimestampMixin, VersionedMixin, Base):
    """Tenant record. Table: tenant.

    code is stored upper-cased, so the unique index makes it unique
    case-insensitively. Identity columns stay NULL until the matching
    provisioning step has run.
    """

    __tablename__ = "tenant"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    code: Mapped[str] = mapped_column(
        String(50), unique=True, nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String, nullable=False, index=True)
    administrator_email: Mapped[str] = mapped_column(String, nullable=False)
    administrator_subject: Mapped[str | None] = mapped_column(String, nullable=True)
    identity_pool_id: Mapped[str | None] = mapped_column(String, nullable=True)
    identity_domain: Mapped[str | None] = mapped_column(String, nullable=True)
    client_app_id: Mapped[str | None] = mapped_column(String, nullable=True)
