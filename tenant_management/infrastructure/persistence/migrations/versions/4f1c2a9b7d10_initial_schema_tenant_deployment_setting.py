"""initial_schema_tenant_deployment_setting

Revision ID: 4f1c2a9b7d10
Revises:
Create Date: 2026-10-19 09:12:44.118203

"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4f1c2a9b7d10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "tenant",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("code", sa.String(length=50), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("administrator_email", sa.String(), nullable=False),
        sa.Column("administrator_subject", sa.String(), nullable=True),
        sa.Column("identity_pool_id", sa.String(), nullable=True),
        sa.Column("identity_domain", sa.String(), nullable=True),
        sa.Column("client_app_id", sa.String(), nullable=True),
        sa.Column("version", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_tenant_code"), "tenant", ["code"], unique=True)
    op.create_index(op.f("ix_tenant_name"), "tenant", ["name"], unique=False)

    op.create_table(
        "deployment_setting",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("setting_type", sa.String(length=64), nullable=False),
        sa.Column("setting_value", sa.String(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_deployment_setting_setting_type"),
        "deployment_setting",
        ["setting_type"],
        unique=False,
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(
        op.f("ix_deployment_setting_setting_type"), table_name="deployment_setting"
    )
    op.drop_table("deployment_setting")
    op.drop_index(op.f("ix_tenant_name"), table_name="tenant")
    op.drop_index(op.f("ix_tenant_code"), table_name="tenant")
    op.drop_table("tenant")
