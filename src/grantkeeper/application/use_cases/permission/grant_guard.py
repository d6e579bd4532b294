"""Grant authorization guard - who may grant or revoke on an object."""

import logging

from grantkeeper.application.ownership_registry import OwnershipRegistry
from grantkeeper.application.ports import PermissionChecker
from grantkeeper.application.storage_errors import storage_errors
from grantkeeper.domain.exceptions import AuthorizationDenied
from grantkeeper.domain.value_objects import ObjectType, PermissionLevel, is_system_actor

logger = logging.getLogger(__name__)


class GrantAuthorizationGuard:
    """Allows the system actor, the resolved owner, or an admin grantee."""

    def __init__(
        self,
        ownership_registry: OwnershipRegistry,
        permission_checker: PermissionChecker,
    ) -> None:
        self._registry = ownership_registry
        self._permission_checker = permission_checker

    async def authorize(self, actor_id: int, object_type: ObjectType, object_id: int) -> None:
        """Return if actor may manage grants on the object, raise otherwise.

        Raises ObjectNotFound when ownership cannot be resolved, for the
        system actor too, and AuthorizationDenied when the actor has no
        owner/admin/system rights.
        """
        async with storage_errors("resolve object owner"):
            owner_id = await self._registry.resolve_owner(object_type, object_id)

        if is_system_actor(actor_id):
            return
        if owner_id is not None and owner_id == actor_id:
            return

        has_admin = await self._permission_checker.check(
            actor_id, object_type, object_id, PermissionLevel.ADMIN
        )
        if has_admin:
            return

        logger.warning(
            "Denied grant management on %s/%s to user %s", object_type, object_id, actor_id
        )
        raise AuthorizationDenied("Actor must be owner or have admin rights")
