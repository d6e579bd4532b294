"""One pooled connection and one transaction per grant-store operation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg import AsyncConnection
from psycopg_pool import AsyncConnectionPool

from grantkeeper.infrastructure.persistence.postgres.permission_grant_repository import (
    PostgresPermissionGrantRepository,
)


class PostgresUnitOfWork:
    """Grant repository bound to a borrowed connection."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn
        self.grants = PostgresPermissionGrantRepository(conn)

    async def commit(self) -> None:
        await self._conn.commit()

    async def rollback(self) -> None:
        await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool):
    """Factory of ``async with factory() as uow`` blocks.

    Commits when the block exits cleanly, rolls back otherwise; the
    connection goes back to the pool either way.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        async with pool.connection() as conn:
            uow = PostgresUnitOfWork(conn)
            try:
                yield uow
            except BaseException:
                await uow.rollback()
                raise
            await uow.commit()

    return factory
