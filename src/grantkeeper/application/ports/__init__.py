"""Application ports - interfaces for external adapters."""

from grantkeeper.application.ports.ownership import DependentEnumerator, OwnershipResolver
from grantkeeper.application.ports.permission_checker import PermissionChecker
from grantkeeper.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "DependentEnumerator",
    "OwnershipResolver",
    "PermissionChecker",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
