"""Record which user last granted each permission.

Revision ID: 003
Revises: 002
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

revision: str = "003"
down_revision: str | None = "002"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.add_column(
        "object_permissions",
        sa.Column("granted_by_user_id", sa.BigInteger(), nullable=True),
    )


def downgrade() -> None:
    op.drop_column("object_permissions", "granted_by_user_id")
