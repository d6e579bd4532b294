"""Permission evaluator - checks against the object_permissions table."""

import logging

from grantkeeper.domain.exceptions import InvalidObjectType
from grantkeeper.domain.value_objects import ObjectType, PermissionLevel

logger = logging.getLogger(__name__)


class PermissionEvaluator:
    """Decides whether a user's explicit grant covers a required level.

    Ownership-agnostic: owners and public objects are resolved by the
    caller. Fails closed, never raises.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def check(
        self,
        user_id: int,
        object_type: ObjectType | str,
        object_id: int,
        required_level: PermissionLevel | str,
    ) -> bool:
        """Check if user holds a grant at or above required_level on the object."""
        required = PermissionLevel.try_parse(required_level)
        if required is None:
            return False
        try:
            object_type = ObjectType.parse(object_type)
        except InvalidObjectType:
            return False
        if user_id is None or object_id is None:
            return False

        try:
            async with self._uow_factory() as uow:
                grant = await uow.grants.get(object_type, object_id, user_id)
        except Exception:
            logger.exception(
                "Permission check failed for user %s on %s/%s",
                user_id,
                object_type,
                object_id,
            )
            return False

        if not grant:
            return False
        return grant.permission_level.satisfies(required)
