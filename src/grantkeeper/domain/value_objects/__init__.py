"""Domain value objects."""

from grantkeeper.domain.error_codes import ErrorCode
from grantkeeper.domain.value_objects.actor import SYSTEM_ACTOR_ID, is_system_actor
from grantkeeper.domain.value_objects.object_type import ObjectType
from grantkeeper.domain.value_objects.permission_level import PermissionLevel

__all__ = [
    "SYSTEM_ACTOR_ID",
    "ErrorCode",
    "ObjectType",
    "PermissionLevel",
    "is_system_actor",
]
