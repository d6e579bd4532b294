"""Ownership capability ports implemented by owning services."""

from collections.abc import Sequence
from typing import Protocol


class OwnershipResolver(Protocol):
    """Resolves the owner of one object type's entities.

    Returns the owning user id, None for a public object, and raises
    ObjectNotFound when the entity does not exist.
    """

    async def resolve_owner(self, object_id: int) -> int | None: ...


class DependentEnumerator(Protocol):
    """Lists ids of dependent objects that are deleted along with a parent."""

    async def list_dependents(self, parent_id: int) -> Sequence[int]: ...
