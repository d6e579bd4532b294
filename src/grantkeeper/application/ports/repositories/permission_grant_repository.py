"""Permission grant repository port."""

from typing import Protocol

from grantkeeper.domain.entities import PermissionGrant
from grantkeeper.domain.value_objects import ObjectType, PermissionLevel


class PermissionGrantRepository(Protocol):
    """Port for permission grant persistence.

    Implementations must enforce uniqueness of (object_type, object_id,
    user_id) in storage and make upsert a single atomic statement.
    """

    async def get(
        self, object_type: ObjectType, object_id: int, user_id: int
    ) -> PermissionGrant | None: ...

    async def upsert(
        self,
        object_type: ObjectType,
        object_id: int,
        user_id: int,
        permission_level: PermissionLevel,
        granted_by: int | None = None,
    ) -> PermissionGrant: ...

    async def delete(self, object_type: ObjectType, object_id: int, user_id: int) -> bool: ...

    async def list_for_object(
        self, object_type: ObjectType, object_id: int
    ) -> list[PermissionGrant]: ...

    async def list_for_user(
        self, user_id: int, object_type: ObjectType | None = None
    ) -> list[PermissionGrant]: ...

    async def delete_for_object(self, object_type: ObjectType, object_id: int) -> int: ...

    async def list_object_keys(
        self, object_type: ObjectType | None = None
    ) -> list[tuple[ObjectType, int]]: ...
