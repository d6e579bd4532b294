"""Domain entities."""

from grantkeeper.domain.entities.permission_grant import PermissionGrant

__all__ = [
    "PermissionGrant",
]
