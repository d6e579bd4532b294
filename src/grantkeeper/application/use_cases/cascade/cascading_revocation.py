"""Cascading revocation - purge grants of deleted objects and their dependents."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from grantkeeper.application.ownership_registry import OwnershipRegistry
from grantkeeper.application.storage_errors import storage_errors
from grantkeeper.application.use_cases.permission.revoke_all_permissions import (
    RevokeAllPermissionsUseCase,
)
from grantkeeper.application.validation import require
from grantkeeper.domain.exceptions import StorageFailure
from grantkeeper.domain.value_objects import ObjectType

logger = logging.getLogger(__name__)


@dataclass
class CascadeReport:
    """Grants removed per object, in the order the objects were purged."""

    counts: dict[tuple[ObjectType, int], int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @property
    def objects(self) -> list[tuple[ObjectType, int]]:
        return list(self.counts)


class CascadingRevocationCoordinator:
    """Called by owning services after they delete entity rows.

    There is no cascade inside the grant store itself: every deleted object,
    parent and dependents alike, needs its own revoke-all call here.
    """

    def __init__(
        self,
        revoke_all: RevokeAllPermissionsUseCase,
        ownership_registry: OwnershipRegistry,
    ) -> None:
        self._revoke_all = revoke_all
        self._registry = ownership_registry

    async def revoke_object(self, object_type: ObjectType | str, object_id: int) -> int:
        """Purge grants for a single deleted object."""
        return await self._revoke_all.execute(object_type, object_id)

    async def revoke_hierarchy(
        self,
        parent_type: ObjectType | str,
        parent_id: int,
        dependents: Iterable[tuple[ObjectType | str, int]],
    ) -> CascadeReport:
        """Purge grants for each dependent, then for the parent.

        All object types and ids are validated before anything is deleted.
        An object listed more than once is purged once.
        """
        parent_key = (ObjectType.parse(parent_type), parent_id)
        require(parent_id=parent_id)
        keys: dict[tuple[ObjectType, int], None] = {}
        for dependent_type, dependent_id in dependents:
            require(object_id=dependent_id)
            keys[(ObjectType.parse(dependent_type), dependent_id)] = None
        keys.pop(parent_key, None)
        keys[parent_key] = None

        report = CascadeReport()
        for object_type, object_id in keys:
            try:
                report.counts[(object_type, object_id)] = await self._revoke_all.execute(
                    object_type, object_id
                )
            except StorageFailure:
                logger.error(
                    "Cascade for %s/%s stopped at %s/%s after purging %d object(s)",
                    parent_key[0],
                    parent_id,
                    object_type,
                    object_id,
                    len(report.counts),
                )
                raise

        logger.info(
            "Cascade for %s/%s removed %d grant(s) across %d object(s)",
            parent_key[0],
            parent_id,
            report.total,
            len(report.counts),
        )
        return report

    async def revoke_with_dependents(
        self, object_type: ObjectType | str, object_id: int
    ) -> CascadeReport:
        """Like revoke_hierarchy, with dependents from the registered enumerators.

        Must be called before the dependent rows are deleted, since the
        enumerators read them from the owning tables.
        """
        object_type = ObjectType.parse(object_type)
        require(object_id=object_id)
        async with storage_errors("enumerate dependents"):
            dependents = await self._registry.list_dependents(object_type, object_id)
        return await self.revoke_hierarchy(object_type, object_id, dependents)
