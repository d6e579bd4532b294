"""Translation of unexpected persistence errors into StorageFailure."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from grantkeeper.domain.exceptions import GrantKeeperError, StorageFailure

logger = logging.getLogger(__name__)


@asynccontextmanager
async def storage_errors(action: str) -> AsyncIterator[None]:
    """Re-raise anything that is not a domain error as StorageFailure.

    The original error is logged with its traceback and chained, but the
    StorageFailure message stays generic.
    """
    try:
        yield
    except GrantKeeperError:
        raise
    except Exception as e:
        logger.exception("Storage error during %s", action)
        raise StorageFailure(f"Failed to {action}") from e
