"""Ownership resolvers reading owner columns from the owning services' tables."""

from psycopg import sql
from psycopg_pool import AsyncConnectionPool

from grantkeeper.application.ownership_registry import (
    DependentRegistration,
    OwnershipRegistry,
    PublicAccess,
)
from grantkeeper.domain.exceptions import ObjectNotFound
from grantkeeper.domain.value_objects import ObjectType


class TableOwnershipResolver:
    """Owner is a nullable column on the entity's own row."""

    def __init__(
        self,
        pool: AsyncConnectionPool,
        table: str,
        owner_column: str = "user_id",
    ) -> None:
        self._pool = pool
        self._table = table
        self._query = sql.SQL("SELECT {owner} FROM {table} WHERE id = %s").format(
            owner=sql.Identifier(owner_column),
            table=sql.Identifier(table),
        )

    async def resolve_owner(self, object_id: int) -> int | None:
        async with self._pool.connection() as conn:
            cur = await conn.execute(self._query, (object_id,))
            r = await cur.fetchone()
        if not r:
            raise ObjectNotFound(f"{self._table} {object_id} not found")
        return r[0]


class ParentOwnershipResolver:
    """Owner is the owner of the parent row, e.g. a database row's database."""

    def __init__(
        self,
        pool: AsyncConnectionPool,
        table: str,
        parent_table: str,
        parent_column: str,
        owner_column: str = "user_id",
    ) -> None:
        self._pool = pool
        self._table = table
        self._query = sql.SQL(
            "SELECT p.{owner} FROM {table} c "
            "JOIN {parent} p ON p.id = c.{parent_column} WHERE c.id = %s"
        ).format(
            owner=sql.Identifier(owner_column),
            table=sql.Identifier(table),
            parent=sql.Identifier(parent_table),
            parent_column=sql.Identifier(parent_column),
        )

    async def resolve_owner(self, object_id: int) -> int | None:
        async with self._pool.connection() as conn:
            cur = await conn.execute(self._query, (object_id,))
            r = await cur.fetchone()
        if not r:
            raise ObjectNotFound(f"{self._table} {object_id} not found")
        return r[0]


class PostgresDependentEnumerator:
    """Lists child row ids by their parent foreign key column."""

    def __init__(self, pool: AsyncConnectionPool, table: str, parent_column: str) -> None:
        self._pool = pool
        self._query = sql.SQL("SELECT id FROM {table} WHERE {parent_column} = %s ORDER BY id").format(
            table=sql.Identifier(table),
            parent_column=sql.Identifier(parent_column),
        )

    async def list_dependents(self, parent_id: int) -> list[int]:
        async with self._pool.connection() as conn:
            cur = await conn.execute(self._query, (parent_id,))
            rows = await cur.fetchall()
        return [r[0] for r in rows]


def build_default_registry(pool: AsyncConnectionPool) -> OwnershipRegistry:
    """Registry for the application's standard entity tables."""
    registry = OwnershipRegistry()
    registry.register(
        ObjectType.NOTE,
        TableOwnershipResolver(pool, "notes"),
        public_access=PublicAccess.READ,
    )
    registry.register(
        ObjectType.TASK,
        TableOwnershipResolver(pool, "tasks"),
        public_access=PublicAccess.READ_WRITE,
    )
    registry.register(
        ObjectType.DATABASE,
        TableOwnershipResolver(pool, "note_databases"),
        public_access=PublicAccess.READ,
        dependents=[
            DependentRegistration(
                object_type=ObjectType.DATABASE_ROW,
                enumerator=PostgresDependentEnumerator(pool, "database_rows", "database_id"),
            ),
        ],
    )
    registry.register(
        ObjectType.DATABASE_ROW,
        ParentOwnershipResolver(pool, "database_rows", "note_databases", "database_id"),
        public_access=PublicAccess.READ_WRITE,
    )
    registry.register(
        ObjectType.FOLDER,
        TableOwnershipResolver(pool, "folders"),
        public_access=PublicAccess.READ,
    )
    registry.register(
        ObjectType.DATA_TEMPLATE,
        TableOwnershipResolver(pool, "data_templates"),
        public_access=PublicAccess.READ,
    )
    return registry
