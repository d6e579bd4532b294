"""Object access check - ownership, public policy and grants combined."""

import logging

from grantkeeper.application.ownership_registry import OwnershipRegistry
from grantkeeper.application.ports import PermissionChecker
from grantkeeper.domain.exceptions import GrantKeeperError, InvalidObjectType
from grantkeeper.domain.value_objects import ObjectType, PermissionLevel, is_system_actor

logger = logging.getLogger(__name__)


class ObjectAccessUseCase:
    """Decides whether a user may read/write/administer an owned object.

    Allow if the user is the system actor, the owner, the object is public
    and its type's public policy covers the level, or an explicit grant does.
    """

    def __init__(
        self,
        ownership_registry: OwnershipRegistry,
        permission_checker: PermissionChecker,
    ) -> None:
        self._registry = ownership_registry
        self._permission_checker = permission_checker

    async def can_access(
        self,
        user_id: int | None,
        object_type: ObjectType | str,
        object_id: int,
        required_level: PermissionLevel | str,
    ) -> bool:
        required = PermissionLevel.try_parse(required_level)
        if required is None or object_id is None:
            return False
        try:
            object_type = ObjectType.parse(object_type)
        except InvalidObjectType:
            return False
        if is_system_actor(user_id):
            return True

        try:
            owner_id = await self._registry.resolve_owner(object_type, object_id)
        except GrantKeeperError:
            return False
        except Exception:
            logger.exception("Owner lookup failed for %s/%s", object_type, object_id)
            return False

        if owner_id is None:
            if self._registry.public_access(object_type).allows(required):
                return True
        elif user_id is not None and owner_id == user_id:
            return True

        if user_id is None:
            return False
        return await self._permission_checker.check(user_id, object_type, object_id, required)
