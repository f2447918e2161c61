"""Deployment setting ORM model. Ordered key/value list of deployed URLs."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from tenant_management.infrastructure.persistence.database import Base
from tenant_management.infrastructure.persistence.models.mixins import TimestampMixin


class DeploymentSetting(TimestampMixin, Base):
    """Table: deployment_setting. Insertion order (id) is the list order."""

    __tablename__ = "deployment_setting"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    setting_type: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    setting_value: Mapped[str] = mapped_column(String, nullable=False)
