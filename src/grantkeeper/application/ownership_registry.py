"""Registry of ownership capabilities, one registration per object type."""

from dataclasses import dataclass
from enum import StrEnum

from grantkeeper.application.ports import DependentEnumerator, OwnershipResolver
from grantkeeper.domain.exceptions import ObjectNotFound
from grantkeeper.domain.value_objects import ObjectType, PermissionLevel


class PublicAccess(StrEnum):
    """What any user may do with an ownerless (public) object of a type."""

    NONE = "none"
    READ = "read"
    READ_WRITE = "read_write"

    def allows(self, required: PermissionLevel) -> bool:
        if self is PublicAccess.READ:
            return required is PermissionLevel.READ
        if self is PublicAccess.READ_WRITE:
            return required in (PermissionLevel.READ, PermissionLevel.WRITE)
        return False


@dataclass(frozen=True)
class DependentRegistration:
    """Objects of object_type owned by a parent and deleted with it."""

    object_type: ObjectType
    enumerator: DependentEnumerator


@dataclass(frozen=True)
class OwnershipRegistration:
    """Ownership capability and public-object policy for one object type."""

    object_type: ObjectType
    resolver: OwnershipResolver
    public_access: PublicAccess
    dependents: tuple[DependentRegistration, ...] = ()


class OwnershipRegistry:
    """Object type -> ownership registration.

    Built once by the composition root and passed to the components that
    need it.
    """

    def __init__(self) -> None:
        self._registrations: dict[ObjectType, OwnershipRegistration] = {}

    def register(
        self,
        object_type: ObjectType | str,
        resolver: OwnershipResolver,
        *,
        public_access: PublicAccess,
        dependents: list[DependentRegistration] | None = None,
    ) -> OwnershipRegistration:
        """Register the owning service's capability for object_type.

        public_access has no default: each type states its policy.
        """
        object_type = ObjectType.parse(object_type)
        registration = OwnershipRegistration(
            object_type=object_type,
            resolver=resolver,
            public_access=PublicAccess(public_access),
            dependents=tuple(dependents or ()),
        )
        self._registrations[object_type] = registration
        return registration

    def get(self, object_type: ObjectType) -> OwnershipRegistration | None:
        return self._registrations.get(object_type)

    def __contains__(self, object_type: object) -> bool:
        return object_type in self._registrations

    @property
    def object_types(self) -> list[ObjectType]:
        return list(self._registrations)

    async def resolve_owner(self, object_type: ObjectType, object_id: int) -> int | None:
        """Owner user id, or None for a public object.

        Raises ObjectNotFound when the object is missing or no owning
        service registered the type.
        """
        registration = self._registrations.get(object_type)
        if registration is None:
            raise ObjectNotFound(f"No ownership resolver registered for {object_type}")
        return await registration.resolver.resolve_owner(object_id)

    def public_access(self, object_type: ObjectType) -> PublicAccess:
        registration = self._registrations.get(object_type)
        return registration.public_access if registration else PublicAccess.NONE

    async def list_dependents(
        self, object_type: ObjectType, object_id: int
    ) -> list[tuple[ObjectType, int]]:
        """Dependent (type, id) pairs registered for a parent object."""
        registration = self._registrations.get(object_type)
        if registration is None:
            return []
        keys: list[tuple[ObjectType, int]] = []
        for dependent in registration.dependents:
            for child_id in await dependent.enumerator.list_dependents(object_id):
                keys.append((dependent.object_type, child_id))
        return keys
