"""Read-only permission queries."""

from grantkeeper.application.storage_errors import storage_errors
from grantkeeper.domain.entities import PermissionGrant
from grantkeeper.domain.value_objects import ObjectType


class ListPermissionsUseCase:
    """List grants by object or by grantee. No authorization gate here."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def for_object(
        self, object_id: int, object_type: ObjectType | str
    ) -> list[PermissionGrant]:
        """All grants on the object, with grantee usernames."""
        object_type = ObjectType.parse(object_type)
        if object_id is None:
            return []
        async with storage_errors("list permissions for object"):
            async with self._uow_factory() as uow:
                return await uow.grants.list_for_object(object_type, object_id)

    async def shared_with_user(
        self, user_id: int, object_type_filter: ObjectType | str | None = None
    ) -> list[PermissionGrant]:
        """All grants held by user, optionally of one object type."""
        object_type = (
            ObjectType.parse(object_type_filter) if object_type_filter is not None else None
        )
        if user_id is None:
            return []
        async with storage_errors("list objects shared with user"):
            async with self._uow_factory() as uow:
                return await uow.grants.list_for_user(user_id, object_type)
