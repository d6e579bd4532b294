"""Sweep grants left behind by objects that no longer exist."""

import logging
from dataclasses import dataclass, field

from grantkeeper.application.ownership_registry import OwnershipRegistry
from grantkeeper.application.storage_errors import storage_errors
from grantkeeper.application.use_cases.permission.revoke_all_permissions import (
    RevokeAllPermissionsUseCase,
)
from grantkeeper.domain.exceptions import ObjectNotFound
from grantkeeper.domain.value_objects import ObjectType

logger = logging.getLogger(__name__)


@dataclass
class SweepReport:
    """Outcome of one sweep run."""

    checked: int = 0
    orphans: list[tuple[ObjectType, int]] = field(default_factory=list)
    removed: int = 0
    skipped_types: set[ObjectType] = field(default_factory=set)
    dry_run: bool = False


class SweepOrphanGrantsUseCase:
    """Reconciles the grant store against the owning services.

    An object whose owner lookup raises ObjectNotFound is orphaned; its
    grants are revoked unless dry_run is set. Types with no registered
    resolver are skipped, not treated as orphaned.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        ownership_registry: OwnershipRegistry,
        revoke_all: RevokeAllPermissionsUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._registry = ownership_registry
        self._revoke_all = revoke_all

    async def execute(
        self,
        object_type: ObjectType | str | None = None,
        dry_run: bool = False,
    ) -> SweepReport:
        type_filter = ObjectType.parse(object_type) if object_type is not None else None
        async with storage_errors("list granted objects"):
            async with self._uow_factory() as uow:
                keys = await uow.grants.list_object_keys(type_filter)

        report = SweepReport(dry_run=dry_run)
        for key_type, key_id in keys:
            if key_type not in self._registry:
                report.skipped_types.add(key_type)
                continue
            report.checked += 1
            try:
                async with storage_errors("resolve object owner"):
                    await self._registry.resolve_owner(key_type, key_id)
            except ObjectNotFound:
                report.orphans.append((key_type, key_id))

        if not dry_run:
            for key_type, key_id in report.orphans:
                report.removed += await self._revoke_all.execute(key_type, key_id)

        logger.info(
            "Orphan sweep checked %d object(s), found %d orphan(s), removed %d grant(s)%s",
            report.checked,
            len(report.orphans),
            report.removed,
            " (dry run)" if dry_run else "",
        )
        if report.skipped_types:
            logger.warning(
                "Orphan sweep skipped unregistered types: %s",
                ", ".join(sorted(report.skipped_types)),
            )
        return report
