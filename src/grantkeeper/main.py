"""Application entry point and composition root."""

import argparse
import asyncio
import logging
import sys
from dataclasses import dataclass

from psycopg_pool import AsyncConnectionPool

from grantkeeper import __version__
from grantkeeper.application.ownership_registry import OwnershipRegistry
from grantkeeper.application.permission_service import ObjectPermissionService
from grantkeeper.application.use_cases.access.check_access import ObjectAccessUseCase
from grantkeeper.application.use_cases.cascade.cascading_revocation import (
    CascadingRevocationCoordinator,
)
from grantkeeper.application.use_cases.maintenance.sweep_orphans import SweepOrphanGrantsUseCase
from grantkeeper.application.use_cases.permission.grant_guard import GrantAuthorizationGuard
from grantkeeper.application.use_cases.permission.grant_permission import GrantPermissionUseCase
from grantkeeper.application.use_cases.permission.list_permissions import ListPermissionsUseCase
from grantkeeper.application.use_cases.permission.revoke_all_permissions import (
    RevokeAllPermissionsUseCase,
)
from grantkeeper.application.use_cases.permission.revoke_permission import (
    RevokePermissionUseCase,
)
from grantkeeper.config import Settings, get_settings
from grantkeeper.domain.exceptions import GrantKeeperError
from grantkeeper.domain.value_objects import ObjectType
from grantkeeper.infrastructure.permission.permission_evaluator import PermissionEvaluator
from grantkeeper.infrastructure.persistence.postgres.connection import create_pool
from grantkeeper.infrastructure.persistence.postgres.ownership import build_default_registry
from grantkeeper.infrastructure.persistence.postgres.unit_of_work import create_uow_factory

logger = logging.getLogger(__name__)


@dataclass
class GrantKeeper:
    """Wired permission components for one process."""

    permissions: ObjectPermissionService
    access: ObjectAccessUseCase
    cascade: CascadingRevocationCoordinator
    sweep: SweepOrphanGrantsUseCase
    ownership: OwnershipRegistry


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_grantkeeper(uow_factory, ownership_registry: OwnershipRegistry) -> GrantKeeper:
    """Wire use cases around a unit-of-work factory and ownership registry."""
    evaluator = PermissionEvaluator(uow_factory)
    guard = GrantAuthorizationGuard(ownership_registry, evaluator)
    revoke_all = RevokeAllPermissionsUseCase(uow_factory)

    permissions = ObjectPermissionService(
        grant_permission=GrantPermissionUseCase(uow_factory, guard),
        revoke_permission=RevokePermissionUseCase(uow_factory, guard),
        list_permissions=ListPermissionsUseCase(uow_factory),
        revoke_all_permissions=revoke_all,
        permission_checker=evaluator,
    )
    return GrantKeeper(
        permissions=permissions,
        access=ObjectAccessUseCase(ownership_registry, evaluator),
        cascade=CascadingRevocationCoordinator(revoke_all, ownership_registry),
        sweep=SweepOrphanGrantsUseCase(uow_factory, ownership_registry, revoke_all),
        ownership=ownership_registry,
    )


def create_grantkeeper(
    settings: Settings | None = None,
) -> tuple[GrantKeeper, AsyncConnectionPool]:
    """Composition root - PostgreSQL-backed components and their (unopened) pool."""
    settings = settings or get_settings()
    pool = create_pool(settings)
    uow_factory = create_uow_factory(pool)
    return build_grantkeeper(uow_factory, build_default_registry(pool)), pool


async def sweep_orphans(object_type: str | None, dry_run: bool) -> int:
    grantkeeper, pool = create_grantkeeper()
    await pool.open()
    try:
        report = await grantkeeper.sweep.execute(object_type, dry_run=dry_run)
    finally:
        await pool.close()

    for orphan_type, orphan_id in report.orphans:
        print(f"orphan {orphan_type}/{orphan_id}")
    verb = "would remove grants for" if dry_run else "removed"
    count = len(report.orphans) if dry_run else report.removed
    print(f"checked {report.checked} object(s), {verb} {count}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(prog="grantkeeper", description="Object permission kernel")
    parser.add_argument("--version", action="version", version=f"grantkeeper {__version__}")
    sub = parser.add_subparsers(dest="command")
    sweep = sub.add_parser("sweep-orphans", help="Revoke grants on objects that no longer exist")
    sweep.add_argument(
        "--type",
        dest="object_type",
        choices=[t.value for t in ObjectType],
        help="Only sweep one object type",
    )
    sweep.add_argument("--dry-run", action="store_true", help="Report orphans without deleting")
    args = parser.parse_args(argv)

    configure_logging(get_settings().log_level)

    if args.command == "sweep-orphans":
        try:
            return asyncio.run(sweep_orphans(args.object_type, args.dry_run))
        except GrantKeeperError as e:
            logger.error("Orphan sweep failed: %s", e)
            return 1

    print(f"grantkeeper v{__version__}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
