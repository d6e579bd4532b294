"""Revoke all permissions on an object."""

import logging

from grantkeeper.application.storage_errors import storage_errors
from grantkeeper.application.validation import require
from grantkeeper.domain.value_objects import ObjectType

logger = logging.getLogger(__name__)


class RevokeAllPermissionsUseCase:
    """Delete every grant on an object, used by owning services' delete paths."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, object_type: ObjectType | str, object_id: int) -> int:
        """Returns the number of grants removed; 0 is a success."""
        object_type = ObjectType.parse(object_type)
        require(object_id=object_id)

        async with storage_errors("revoke all permissions"):
            async with self._uow_factory() as uow:
                count = await uow.grants.delete_for_object(object_type, object_id)

        logger.info("Revoked %d permission(s) on %s/%s", count, object_type, object_id)
        return count
