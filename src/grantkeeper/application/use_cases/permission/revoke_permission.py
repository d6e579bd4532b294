"""Revoke permission use case."""

import logging

from grantkeeper.application.storage_errors import storage_errors
from grantkeeper.application.use_cases.permission.grant_guard import GrantAuthorizationGuard
from grantkeeper.application.validation import require
from grantkeeper.domain.value_objects import ObjectType

logger = logging.getLogger(__name__)


class RevokePermissionUseCase:
    """Remove a user's grant on an object."""

    def __init__(
        self,
        unit_of_work_factory: type,
        guard: GrantAuthorizationGuard,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._guard = guard

    async def execute(
        self,
        actor_id: int,
        target_user_id: int,
        object_type: ObjectType | str,
        object_id: int,
    ) -> bool:
        """Revoke the grant; returns whether a row was removed.

        Revoking a grant that does not exist is not an error.
        """
        object_type = ObjectType.parse(object_type)
        require(actor_id=actor_id, target_user_id=target_user_id, object_id=object_id)

        await self._guard.authorize(actor_id, object_type, object_id)

        async with storage_errors("revoke permission"):
            async with self._uow_factory() as uow:
                removed = await uow.grants.delete(object_type, object_id, target_user_id)

        if removed:
            logger.info(
                "User %s revoked permission on %s/%s from user %s",
                actor_id,
                object_type,
                object_id,
                target_user_id,
            )
        return removed
