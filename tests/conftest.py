"""Pytest fixtures for grantkeeper tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime

import pytest

from grantkeeper.application.ownership_registry import (
    DependentRegistration,
    OwnershipRegistry,
    PublicAccess,
)
from grantkeeper.domain.entities import PermissionGrant
from grantkeeper.domain.exceptions import ObjectNotFound
from grantkeeper.domain.value_objects import ObjectType, PermissionLevel
from grantkeeper.main import GrantKeeper, build_grantkeeper

# Users seeded in the fake users table.
USER1 = 1
USER2 = 2
ADMIN_USER = 3
OWNER = 4
UNRELATED_USER = 5

USERNAMES = {
    USER1: "user1_test",
    USER2: "user2_test",
    ADMIN_USER: "actor_test",
    OWNER: "owner_test",
    UNRELATED_USER: "unrelated_test",
}


# --- Fake repositories ---


class FakePermissionGrantRepository:
    """In-memory grant repository keyed by (object_type, object_id, user_id)."""

    def __init__(self, usernames: dict[int, str] | None = None) -> None:
        self._rows: dict[tuple[ObjectType, int, int], PermissionGrant] = {}
        self._usernames = usernames or {}
        self._next_id = 1
        self.fail_with: Exception | None = None

    def _maybe_fail(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    @property
    def rows(self) -> list[PermissionGrant]:
        return list(self._rows.values())

    async def get(
        self, object_type: ObjectType, object_id: int, user_id: int
    ) -> PermissionGrant | None:
        self._maybe_fail()
        return self._rows.get((object_type, object_id, user_id))

    async def upsert(
        self,
        object_type: ObjectType,
        object_id: int,
        user_id: int,
        permission_level: PermissionLevel,
        granted_by: int | None = None,
    ) -> PermissionGrant:
        self._maybe_fail()
        now = datetime.now(UTC)
        key = (object_type, object_id, user_id)
        existing = self._rows.get(key)
        if existing:
            existing.permission_level = permission_level
            existing.granted_by = granted_by
            existing.updated_at = now
            return existing
        grant = PermissionGrant(
            id=self._next_id,
            object_type=object_type,
            object_id=object_id,
            user_id=user_id,
            permission_level=permission_level,
            created_at=now,
            updated_at=now,
            granted_by=granted_by,
        )
        self._next_id += 1
        self._rows[key] = grant
        return grant

    async def delete(self, object_type: ObjectType, object_id: int, user_id: int) -> bool:
        self._maybe_fail()
        return self._rows.pop((object_type, object_id, user_id), None) is not None

    async def list_for_object(
        self, object_type: ObjectType, object_id: int
    ) -> list[PermissionGrant]:
        self._maybe_fail()
        grants = [
            replace(
                g,
                username=self._usernames.get(g.user_id),
                granted_by_username=self._usernames.get(g.granted_by),
            )
            for g in self._rows.values()
            if g.object_type == object_type and g.object_id == object_id
        ]
        return sorted(grants, key=lambda g: (g.username is None, g.username or "", g.user_id))

    async def list_for_user(
        self, user_id: int, object_type: ObjectType | None = None
    ) -> list[PermissionGrant]:
        self._maybe_fail()
        return [
            g
            for g in self._rows.values()
            if g.user_id == user_id and (object_type is None or g.object_type == object_type)
        ]

    async def delete_for_object(self, object_type: ObjectType, object_id: int) -> int:
        self._maybe_fail()
        keys = [k for k in self._rows if k[0] == object_type and k[1] == object_id]
        for k in keys:
            del self._rows[k]
        return len(keys)

    async def list_object_keys(
        self, object_type: ObjectType | None = None
    ) -> list[tuple[ObjectType, int]]:
        self._maybe_fail()
        keys = {
            (k[0], k[1])
            for k in self._rows
            if object_type is None or k[0] == object_type
        }
        return sorted(keys)


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work over a shared grant repository."""

    def __init__(self, grants: FakePermissionGrantRepository | None = None) -> None:
        self.grants = grants or FakePermissionGrantRepository(USERNAMES)
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        pass


# --- Fake ownership capabilities ---


class FakeOwnershipResolver:
    """Owners by object id; missing ids raise ObjectNotFound."""

    def __init__(self, owners: dict[int, int | None]) -> None:
        self.owners = dict(owners)
        self.fail_with: Exception | None = None

    async def resolve_owner(self, object_id: int) -> int | None:
        if self.fail_with is not None:
            raise self.fail_with
        if object_id not in self.owners:
            raise ObjectNotFound(f"object {object_id} not found")
        return self.owners[object_id]


class FakeDependentEnumerator:
    """Child ids by parent id."""

    def __init__(self, children: dict[int, list[int]]) -> None:
        self.children = children

    async def list_dependents(self, parent_id: int) -> list[int]:
        return list(self.children.get(parent_id, []))


# --- Fixtures ---


@pytest.fixture
def grant_store() -> FakePermissionGrantRepository:
    """Grant repository shared by every unit of work in a test."""
    return FakePermissionGrantRepository(USERNAMES)


@pytest.fixture
def uow_factory(grant_store):
    """Factory returning async context manager with FakeUnitOfWork."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield FakeUnitOfWork(grant_store)

    return _factory


@pytest.fixture
def resolvers() -> dict[ObjectType, FakeOwnershipResolver]:
    """Owning-service resolvers; None owner marks a public object."""
    return {
        ObjectType.NOTE: FakeOwnershipResolver({101: OWNER, 102: OWNER, 103: None}),
        ObjectType.TASK: FakeOwnershipResolver({201: OWNER, 202: None, 203: USER1}),
        ObjectType.DATABASE: FakeOwnershipResolver({401: OWNER, 402: None}),
        ObjectType.DATABASE_ROW: FakeOwnershipResolver({501: OWNER, 502: OWNER, 503: None}),
        ObjectType.FOLDER: FakeOwnershipResolver({301: OWNER}),
    }


@pytest.fixture
def ownership_registry(resolvers) -> OwnershipRegistry:
    """Registry without data_template, so that type has no resolver."""
    registry = OwnershipRegistry()
    registry.register(ObjectType.NOTE, resolvers[ObjectType.NOTE], public_access=PublicAccess.READ)
    registry.register(
        ObjectType.TASK, resolvers[ObjectType.TASK], public_access=PublicAccess.READ_WRITE
    )
    registry.register(
        ObjectType.DATABASE,
        resolvers[ObjectType.DATABASE],
        public_access=PublicAccess.NONE,
        dependents=[
            DependentRegistration(
                object_type=ObjectType.DATABASE_ROW,
                enumerator=FakeDependentEnumerator({401: [501, 502]}),
            ),
        ],
    )
    registry.register(
        ObjectType.DATABASE_ROW,
        resolvers[ObjectType.DATABASE_ROW],
        public_access=PublicAccess.READ_WRITE,
    )
    registry.register(
        ObjectType.FOLDER, resolvers[ObjectType.FOLDER], public_access=PublicAccess.READ
    )
    return registry


@pytest.fixture
def kernel(uow_factory, ownership_registry) -> GrantKeeper:
    """Fully wired components over in-memory fakes."""
    return build_grantkeeper(uow_factory, ownership_registry)


@pytest.fixture
def permissions(kernel):
    return kernel.permissions
