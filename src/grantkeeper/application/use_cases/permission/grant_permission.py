"""Grant permission use case."""

import logging

from grantkeeper.application.storage_errors import storage_errors
from grantkeeper.application.use_cases.permission.grant_guard import GrantAuthorizationGuard
from grantkeeper.application.validation import require
from grantkeeper.domain.entities import PermissionGrant
from grantkeeper.domain.value_objects import ObjectType, PermissionLevel

logger = logging.getLogger(__name__)


class GrantPermissionUseCase:
    """Grant (or change) a user's permission level on an object."""

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
        permission_level: PermissionLevel | str,
    ) -> PermissionGrant:
        """Upsert the grant for (object_type, object_id, target_user_id).

        Validation and authorization happen before any write. A second
        grant for the same triple replaces the level of the first.
        """
        object_type = ObjectType.parse(object_type)
        level = PermissionLevel.parse(permission_level)
        require(actor_id=actor_id, target_user_id=target_user_id, object_id=object_id)

        await self._guard.authorize(actor_id, object_type, object_id)

        async with storage_errors("grant permission"):
            async with self._uow_factory() as uow:
                grant = await uow.grants.upsert(
                    object_type, object_id, target_user_id, level, granted_by=actor_id
                )

        logger.info(
            "User %s granted %s on %s/%s to user %s",
            actor_id,
            level,
            object_type,
            object_id,
            target_user_id,
        )
        return grant
