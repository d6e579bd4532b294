"""Unit tests for CascadingRevocationCoordinator."""

import pytest

from grantkeeper.domain.exceptions import InvalidObjectType, MissingArgument, StorageFailure
from grantkeeper.domain.value_objects import ObjectType, PermissionLevel

from tests.conftest import USER1, USER2


async def _seed(grant_store, object_type, object_id, *user_ids) -> None:
    for user_id in user_ids:
        await grant_store.upsert(object_type, object_id, user_id, PermissionLevel.READ)


@pytest.mark.asyncio
async def test_revoke_object_counts_removed(kernel, grant_store) -> None:
    await _seed(grant_store, ObjectType.DATA_TEMPLATE, 601, USER1, USER2)

    count = await kernel.cascade.revoke_object("data_template", 601)

    assert count == 2
    assert grant_store.rows == []


@pytest.mark.asyncio
async def test_revoke_hierarchy_purges_dependents_then_parent(kernel, grant_store) -> None:
    await _seed(grant_store, ObjectType.DATABASE, 401, USER1, USER2)
    await _seed(grant_store, ObjectType.DATABASE_ROW, 501, USER1)
    await _seed(grant_store, ObjectType.DATABASE_ROW, 502, USER2)
    await _seed(grant_store, ObjectType.DATABASE_ROW, 503, USER1)

    report = await kernel.cascade.revoke_hierarchy(
        "database", 401, [("database_row", 501), ("database_row", 502)]
    )

    assert report.objects == [
        (ObjectType.DATABASE_ROW, 501),
        (ObjectType.DATABASE_ROW, 502),
        (ObjectType.DATABASE, 401),
    ]
    assert report.total == 4
    assert [(g.object_type, g.object_id) for g in grant_store.rows] == [
        (ObjectType.DATABASE_ROW, 503)
    ]


@pytest.mark.asyncio
async def test_revoke_hierarchy_validates_before_deleting(kernel, grant_store) -> None:
    await _seed(grant_store, ObjectType.DATABASE_ROW, 501, USER1)
    await _seed(grant_store, ObjectType.DATABASE, 401, USER1)

    with pytest.raises(InvalidObjectType):
        await kernel.cascade.revoke_hierarchy(
            "database", 401, [("database_row", 501), ("spreadsheet", 7)]
        )

    assert len(grant_store.rows) == 2


@pytest.mark.asyncio
async def test_revoke_hierarchy_missing_dependent_id_deletes_nothing(kernel, grant_store) -> None:
    await _seed(grant_store, ObjectType.DATABASE_ROW, 501, USER1)
    await _seed(grant_store, ObjectType.DATABASE, 401, USER1)

    with pytest.raises(MissingArgument):
        await kernel.cascade.revoke_hierarchy(
            "database", 401, [("database_row", 501), ("database_row", None)]
        )

    assert len(grant_store.rows) == 2


@pytest.mark.asyncio
async def test_revoke_hierarchy_counts_repeated_objects_once(kernel, grant_store) -> None:
    await _seed(grant_store, ObjectType.DATABASE_ROW, 501, USER1, USER2)
    await _seed(grant_store, ObjectType.DATABASE, 401, USER1)

    report = await kernel.cascade.revoke_hierarchy(
        "database",
        401,
        [("database_row", 501), ("database_row", 501), ("database", 401)],
    )

    assert report.counts == {
        (ObjectType.DATABASE_ROW, 501): 2,
        (ObjectType.DATABASE, 401): 1,
    }
    assert report.objects[-1] == (ObjectType.DATABASE, 401)
    assert report.total == 3
    assert grant_store.rows == []


@pytest.mark.asyncio
async def test_revoke_hierarchy_without_dependents(kernel, grant_store) -> None:
    await _seed(grant_store, ObjectType.FOLDER, 301, USER1)

    report = await kernel.cascade.revoke_hierarchy("folder", 301, [])

    assert report.counts == {(ObjectType.FOLDER, 301): 1}


@pytest.mark.asyncio
async def test_revoke_with_registered_dependents(kernel, grant_store) -> None:
    """Registered enumerators supply the rows of database 401."""
    await _seed(grant_store, ObjectType.DATABASE, 401, USER1)
    await _seed(grant_store, ObjectType.DATABASE_ROW, 501, USER1, USER2)
    await _seed(grant_store, ObjectType.DATABASE_ROW, 502, USER2)

    report = await kernel.cascade.revoke_with_dependents("database", 401)

    assert report.total == 4
    assert report.counts[(ObjectType.DATABASE, 401)] == 1
    assert grant_store.rows == []


@pytest.mark.asyncio
async def test_revoke_with_dependents_for_leaf_type(kernel, grant_store) -> None:
    await _seed(grant_store, ObjectType.NOTE, 101, USER1)

    report = await kernel.cascade.revoke_with_dependents("note", 101)

    assert report.objects == [(ObjectType.NOTE, 101)]


@pytest.mark.asyncio
async def test_revoke_hierarchy_storage_failure_propagates(kernel, grant_store) -> None:
    await _seed(grant_store, ObjectType.DATABASE, 401, USER1)
    grant_store.fail_with = RuntimeError("disk full")

    with pytest.raises(StorageFailure):
        await kernel.cascade.revoke_hierarchy("database", 401, [("database_row", 501)])


@pytest.mark.asyncio
async def test_missed_cascade_leaves_orphans(kernel, grant_store) -> None:
    """Revoking only the parent leaves dependent grants behind."""
    await _seed(grant_store, ObjectType.DATABASE, 401, USER1)
    await _seed(grant_store, ObjectType.DATABASE_ROW, 501, USER1)

    await kernel.cascade.revoke_object("database", 401)

    assert [(g.object_type, g.object_id) for g in grant_store.rows] == [
        (ObjectType.DATABASE_ROW, 501)
    ]
