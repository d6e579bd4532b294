"""Repository ports."""

from grantkeeper.application.ports.repositories.permission_grant_repository import (
    PermissionGrantRepository,
)

__all__ = [
    "PermissionGrantRepository",
]
