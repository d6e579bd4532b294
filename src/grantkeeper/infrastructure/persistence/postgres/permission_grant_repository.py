"""PostgreSQL permission grant repository implementation."""

from psycopg import AsyncConnection

from grantkeeper.domain.entities import PermissionGrant
from grantkeeper.domain.value_objects import ObjectType, PermissionLevel

_COLUMNS = (
    "p.id, p.object_type, p.object_id, p.user_id, p.permission_level, "
    "p.created_at, p.updated_at, p.granted_by_user_id"
)


def _to_grant(
    r: tuple, username: str | None = None, granted_by_username: str | None = None
) -> PermissionGrant:
    return PermissionGrant(
        id=r[0],
        object_type=ObjectType(r[1]),
        object_id=r[2],
        user_id=r[3],
        permission_level=PermissionLevel(r[4]),
        created_at=r[5],
        updated_at=r[6],
        granted_by=r[7],
        username=username,
        granted_by_username=granted_by_username,
    )


class PostgresPermissionGrantRepository:
    """Grant repository over the object_permissions table."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get(
        self, object_type: ObjectType, object_id: int, user_id: int
    ) -> PermissionGrant | None:
        """Get the grant for (object_type, object_id, user_id)."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM object_permissions p "
            "WHERE p.object_type = %s AND p.object_id = %s AND p.user_id = %s",
            (object_type.value, object_id, user_id),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _to_grant(r)

    async def upsert(
        self,
        object_type: ObjectType,
        object_id: int,
        user_id: int,
        permission_level: PermissionLevel,
        granted_by: int | None = None,
    ) -> PermissionGrant:
        """Insert or replace the grant level and granter in one statement."""
        cur = await self._conn.execute(
            "INSERT INTO object_permissions AS p "
            "(object_type, object_id, user_id, permission_level, granted_by_user_id) "
            "VALUES (%s, %s, %s, %s, %s) "
            "ON CONFLICT (object_type, object_id, user_id) DO UPDATE "
            "SET permission_level = EXCLUDED.permission_level, "
            "granted_by_user_id = EXCLUDED.granted_by_user_id, updated_at = now() "
            f"RETURNING {_COLUMNS}",
            (object_type.value, object_id, user_id, permission_level.value, granted_by),
        )
        r = await cur.fetchone()
        return _to_grant(r)

    async def delete(self, object_type: ObjectType, object_id: int, user_id: int) -> bool:
        """Delete one grant; True if a row was removed."""
        cur = await self._conn.execute(
            "DELETE FROM object_permissions "
            "WHERE object_type = %s AND object_id = %s AND user_id = %s",
            (object_type.value, object_id, user_id),
        )
        return cur.rowcount > 0

    async def list_for_object(
        self, object_type: ObjectType, object_id: int
    ) -> list[PermissionGrant]:
        """List grants on an object with grantee and granter usernames."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS}, u.username, g.username FROM object_permissions p "
            "LEFT JOIN users u ON u.id = p.user_id "
            "LEFT JOIN users g ON g.id = p.granted_by_user_id "
            "WHERE p.object_type = %s AND p.object_id = %s "
            "ORDER BY u.username NULLS LAST, p.user_id",
            (object_type.value, object_id),
        )
        rows = await cur.fetchall()
        return [_to_grant(r, username=r[8], granted_by_username=r[9]) for r in rows]

    async def list_for_user(
        self, user_id: int, object_type: ObjectType | None = None
    ) -> list[PermissionGrant]:
        """List grants held by user."""
        q = f"SELECT {_COLUMNS} FROM object_permissions p WHERE p.user_id = %s"
        params: tuple = (user_id,)
        if object_type is not None:
            q += " AND p.object_type = %s"
            params += (object_type.value,)
        q += " ORDER BY p.object_type, p.object_id"
        cur = await self._conn.execute(q, params)
        rows = await cur.fetchall()
        return [_to_grant(r) for r in rows]

    async def delete_for_object(self, object_type: ObjectType, object_id: int) -> int:
        """Delete all grants on an object; returns the count removed."""
        cur = await self._conn.execute(
            "DELETE FROM object_permissions WHERE object_type = %s AND object_id = %s",
            (object_type.value, object_id),
        )
        return cur.rowcount

    async def list_object_keys(
        self, object_type: ObjectType | None = None
    ) -> list[tuple[ObjectType, int]]:
        """Distinct objects that currently hold grants."""
        q = "SELECT DISTINCT object_type, object_id FROM object_permissions"
        params: tuple = ()
        if object_type is not None:
            q += " WHERE object_type = %s"
            params = (object_type.value,)
        q += " ORDER BY object_type, object_id"
        cur = await self._conn.execute(q, params)
        rows = await cur.fetchall()
        return [(ObjectType(r[0]), r[1]) for r in rows]
