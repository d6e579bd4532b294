"""Object permissions - polymorphic grants on owned entities.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    # object_id spans several entity tables, so it has no foreign key.
    op.create_table(
        "object_permissions",
        sa.Column("id", sa.BigInteger(), sa.Identity(), primary_key=True),
        sa.Column("object_type", sa.String(50), nullable=False),
        sa.Column("object_id", sa.BigInteger(), nullable=False),
        sa.Column("user_id", sa.BigInteger(), nullable=False),
        sa.Column("permission_level", sa.String(20), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint(
            "permission_level IN ('read', 'write', 'admin')",
            name="ck_object_permissions_level",
        ),
    )
    op.create_index(
        "ux_object_permissions_object_user",
        "object_permissions",
        ["object_type", "object_id", "user_id"],
        unique=True,
    )
    op.create_index("ix_object_permissions_object", "object_permissions", ["object_type", "object_id"])
    op.create_index("ix_object_permissions_user", "object_permissions", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_object_permissions_user", table_name="object_permissions")
    op.drop_index("ix_object_permissions_object", table_name="object_permissions")
    op.drop_index("ux_object_permissions_object_user", table_name="object_permissions")
    op.drop_table("object_permissions")
