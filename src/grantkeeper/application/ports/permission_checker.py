"""Permission checker port - grant-level authorization predicate."""

from typing import Protocol

from grantkeeper.domain.value_objects import ObjectType, PermissionLevel


class PermissionChecker(Protocol):
    """Port for checking explicit grants on typed objects."""

    async def check(
        self,
        user_id: int,
        object_type: ObjectType | str,
        object_id: int,
        required_level: PermissionLevel | str,
    ) -> bool: ...
