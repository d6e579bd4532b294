"""Object permission service - the boundary consuming services call."""

import logging

from grantkeeper.application.dto import GrantResult, RevokeAllResult, RevokeResult
from grantkeeper.application.ports import PermissionChecker
from grantkeeper.application.use_cases.permission.grant_permission import GrantPermissionUseCase
from grantkeeper.application.use_cases.permission.list_permissions import ListPermissionsUseCase
from grantkeeper.application.use_cases.permission.revoke_all_permissions import (
    RevokeAllPermissionsUseCase,
)
from grantkeeper.application.use_cases.permission.revoke_permission import (
    RevokePermissionUseCase,
)
from grantkeeper.domain.entities import PermissionGrant
from grantkeeper.domain.exceptions import GrantKeeperError, InvalidObjectType
from grantkeeper.domain.value_objects import ObjectType, PermissionLevel

logger = logging.getLogger(__name__)


class ObjectPermissionService:
    """Grant, revoke, check and list permissions on typed objects.

    Mutations return structured results instead of raising; call
    raise_for_error() or unwrap() on a result to opt into exceptions.
    Queries return False or an empty list for anything not found.
    """

    def __init__(
        self,
        grant_permission: GrantPermissionUseCase,
        revoke_permission: RevokePermissionUseCase,
        list_permissions: ListPermissionsUseCase,
        revoke_all_permissions: RevokeAllPermissionsUseCase,
        permission_checker: PermissionChecker,
    ) -> None:
        self._grant = grant_permission
        self._revoke = revoke_permission
        self._list = list_permissions
        self._revoke_all = revoke_all_permissions
        self._permission_checker = permission_checker

    async def grant_permission(
        self,
        actor_id: int,
        target_user_id: int,
        object_type: ObjectType | str,
        object_id: int,
        permission_level: PermissionLevel | str,
    ) -> GrantResult:
        try:
            grant = await self._grant.execute(
                actor_id, target_user_id, object_type, object_id, permission_level
            )
        except GrantKeeperError as e:
            return GrantResult.failed(e)
        return GrantResult.ok(grant)

    async def revoke_permission(
        self,
        actor_id: int,
        target_user_id: int,
        object_type: ObjectType | str,
        object_id: int,
    ) -> RevokeResult:
        try:
            removed = await self._revoke.execute(actor_id, target_user_id, object_type, object_id)
        except GrantKeeperError as e:
            return RevokeResult.failed(e)
        return RevokeResult.ok(removed)

    async def check_permission(
        self,
        user_id: int,
        object_type: ObjectType | str,
        object_id: int,
        required_level: PermissionLevel | str,
    ) -> bool:
        return await self._permission_checker.check(
            user_id, object_type, object_id, required_level
        )

    async def get_permissions_for_object(
        self, object_id: int, object_type: ObjectType | str
    ) -> list[PermissionGrant]:
        """Grants on the object with grantee usernames.

        Callers gate this to owners/admins. Raises StorageFailure only.
        """
        try:
            return await self._list.for_object(object_id, object_type)
        except InvalidObjectType:
            logger.warning("Listing permissions for unknown object type %r", object_type)
            return []

    async def get_objects_shared_with_user(
        self, user_id: int, object_type_filter: ObjectType | str | None = None
    ) -> list[PermissionGrant]:
        """Grants held by user. Raises StorageFailure only."""
        try:
            return await self._list.shared_with_user(user_id, object_type_filter)
        except InvalidObjectType:
            logger.warning("Listing shared objects for unknown object type %r", object_type_filter)
            return []

    async def revoke_all_permissions_for_object(
        self, object_type: ObjectType | str, object_id: int
    ) -> RevokeAllResult:
        try:
            count = await self._revoke_all.execute(object_type, object_id)
        except GrantKeeperError as e:
            return RevokeAllResult.failed(e)
        return RevokeAllResult.ok(count)
