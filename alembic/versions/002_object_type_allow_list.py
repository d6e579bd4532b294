"""Restrict object_permissions.object_type to the known entity kinds.

Revision ID: 002
Revises: 001
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op

revision: str = "002"
down_revision: str | None = "001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

OBJECT_TYPES = ("note", "task", "database", "database_row", "folder", "data_template")


def upgrade() -> None:
    allowed = ", ".join(f"'{t}'" for t in OBJECT_TYPES)
    op.create_check_constraint(
        "ck_object_permissions_type",
        "object_permissions",
        f"object_type IN ({allowed})",
    )


def downgrade() -> None:
    op.drop_constraint("ck_object_permissions_type", "object_permissions", type_="check")
