"""Connection pool for the grant store."""

from psycopg_pool import AsyncConnectionPool

from grantkeeper.config import Settings


def create_pool(settings: Settings) -> AsyncConnectionPool:
    """Unopened pool sized from settings; callers await open() and close()."""
    return AsyncConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        name="grantkeeper",
        open=False,
    )
