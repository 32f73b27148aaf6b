"""Unit tests for BlacklistWhitelistRepository."""

from uuid import uuid4

import pytest
from psycopg2 import errors

from db.statements import Delete, Insert, Select, Update
from models.blacklist_whitelist import BlacklistWhitelist, BlacklistWhitelistType, ListKind
from repositories.blacklist_whitelist_repo import BlacklistWhitelistRepository


@pytest.fixture
def repo():
    return BlacklistWhitelistRepository()


@pytest.fixture
def entry():
    return BlacklistWhitelist(
        user_id=uuid4(),
        list_kind=ListKind.WHITELIST,
        type=BlacklistWhitelistType.SUBSCRIBE,
        value="sensors/+/temperature",
    )


@pytest.mark.asyncio
async def test_insert_binds_enums_as_integers(repo, fake_db, entry):
    fake_db.add_result(rowcount=1)

    assert await repo.insert_item(entry) is True
    assert fake_db.last_sql == Insert.BLACKLIST_WHITELIST_ITEM
    params = fake_db.last_params
    assert params["list_kind"] == 1 and type(params["list_kind"]) is int
    assert params["type"] == 0 and type(params["type"]) is int
    assert params["value"] == "sensors/+/temperature"


@pytest.mark.asyncio
async def test_insert_for_unknown_user_propagates(repo, fake_db, entry):
    fake_db.add_result(error=errors.ForeignKeyViolation("violates foreign key"))

    with pytest.raises(errors.ForeignKeyViolation):
        await repo.insert_item(entry)
    assert fake_db.connections[0].rollbacks == 1


@pytest.mark.asyncio
async def test_get_item_by_id(repo, fake_db, item_row, entry):
    fake_db.add_result(rows=[item_row(entry)])

    item = await repo.get_item_by_id(entry.id)

    assert item == entry
    assert item.list_kind is ListKind.WHITELIST
    assert fake_db.last_sql == Select.BLACKLIST_WHITELIST_ITEM_BY_ID


@pytest.mark.asyncio
async def test_get_item_by_id_absent(repo, fake_db):
    assert await repo.get_item_by_id(uuid4()) is None


@pytest.mark.asyncio
async def test_update_item(repo, fake_db, entry):
    entry.list_kind = ListKind.BLACKLIST
    fake_db.add_result(rowcount=1)

    assert await repo.update_item(entry) is True
    assert fake_db.last_sql == Update.BLACKLIST_WHITELIST_ITEM
    assert fake_db.last_params["list_kind"] == 0


@pytest.mark.asyncio
async def test_delete_item_soft_then_hard(repo, fake_db, entry):
    fake_db.add_result(rowcount=1)
    fake_db.add_result(rowcount=1)

    assert await repo.delete_item(entry.id) is True
    assert await repo.delete_item_from_database(entry.id) is True
    assert fake_db.executed[0][0] == Update.MARK_BLACKLIST_WHITELIST_ITEM_AS_DELETED
    assert fake_db.executed[1][0] == Delete.BLACKLIST_WHITELIST_ITEM


@pytest.mark.asyncio
async def test_delete_missing_item(repo, fake_db):
    assert await repo.delete_item(uuid4()) is False
