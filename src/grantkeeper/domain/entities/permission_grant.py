"""PermissionGrant entity - user access level on a typed object."""

from dataclasses import dataclass
from datetime import datetime

from grantkeeper.domain.value_objects import ObjectType, PermissionLevel


@dataclass
class PermissionGrant:
    """Grant of permission_level on (object_type, object_id) to user_id.

    object_id is a polymorphic reference into the owning entity's table,
    so no foreign key backs it. granted_by is the actor of the latest grant
    (None for rows written before it was recorded). The username fields
    are filled only by listing queries.
    """

    object_type: ObjectType
    object_id: int
    user_id: int
    permission_level: PermissionLevel
    created_at: datetime
    updated_at: datetime
    id: int | None = None
    granted_by: int | None = None
    username: str | None = None
    granted_by_username: str | None = None

    @property
    def object_key(self) -> tuple[ObjectType, int]:
        return (self.object_type, self.object_id)
