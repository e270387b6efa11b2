"""User meta and options through SQLAlchemy on a throwaway SQLite file."""
from __future__ import annotations

import phpserialize
import pytest
from sqlalchemy import select

from marketplace_e2e import payloads
from marketplace_e2e.db_utils import DbUtils, maybe_serialize, maybe_unserialize
from marketplace_e2e.errors import FixtureSetupFailure
from marketplace_e2e.helpers import empty_object_values

PROFILE = "dokan_profile_settings"


@pytest.fixture
def sqlite_db(tmp_path):
    utils = DbUtils(f"sqlite:///{tmp_path / 'wp.db'}", "wp_")
    utils.create_schema()
    yield utils
    utils.dispose()


def test_unserialize_php_array():
    raw = phpserialize.dumps({"payment": {"paypal": {"email": "paypal@g.c"}}}).decode("utf-8")

    assert maybe_unserialize(raw) == {"payment": {"paypal": {"email": "paypal@g.c"}}}


def test_plain_strings_pass_through():
    assert maybe_unserialize("on") == "on"
    assert maybe_unserialize("a:broken") == "a:broken"
    assert maybe_unserialize(None) is None
    assert maybe_serialize("yes") == "yes"
    assert maybe_serialize(5) == "5"


def test_php_list_keys_stay_integers():
    assert maybe_unserialize(maybe_serialize(["bacs", "cod"])) == {0: "bacs", 1: "cod"}


@pytest.mark.asyncio
async def test_update_user_meta_inserts_then_merges(sqlite_db):
    await sqlite_db.update_user_meta(2, PROFILE, payloads.payment_settings)
    stored = await sqlite_db.update_user_meta(2, PROFILE, {"payment": {"paypal": {"email": "new@g.c"}}})

    assert stored["payment"]["paypal"]["email"] == "new@g.c"
    assert stored["payment"]["bank"]["ac_name"] == "accountName"
    assert await sqlite_db.get_user_meta(2, PROFILE) == stored


@pytest.mark.asyncio
async def test_update_without_merge_replaces(sqlite_db):
    await sqlite_db.update_user_meta(2, PROFILE, payloads.payment_settings)
    await sqlite_db.update_user_meta(2, PROFILE, {"store_name": "x"}, merge=False)

    assert await sqlite_db.get_user_meta(2, PROFILE) == {"store_name": "x"}


@pytest.mark.asyncio
async def test_blanking_a_payment_method(sqlite_db):
    await sqlite_db.update_user_meta(2, PROFILE, payloads.payment_settings)
    bank = payloads.payment_settings["payment"]["bank"]

    stored = await sqlite_db.update_user_meta(2, PROFILE, {"payment": {"bank": empty_object_values(bank)}})

    assert set(stored["payment"]["bank"].values()) == {""}
    assert stored["payment"]["paypal"]["email"] == "paypal@g.c"


@pytest.mark.asyncio
async def test_meta_is_stored_php_serialized(sqlite_db):
    await sqlite_db.update_user_meta(2, PROFILE, {"payment": {}})

    with sqlite_db.engine.connect() as conn:
        raw = conn.execute(select(sqlite_db.usermeta.c.meta_value)).scalar()

    assert raw.startswith("a:1:{")


@pytest.mark.asyncio
async def test_delete_user_meta(sqlite_db):
    await sqlite_db.update_user_meta(2, PROFILE, {"store_name": "x"})

    assert await sqlite_db.delete_user_meta(2, PROFILE) == 1
    assert await sqlite_db.get_user_meta(2, PROFILE) is None


@pytest.mark.asyncio
async def test_options_insert_and_update(sqlite_db):
    await sqlite_db.set_option("dokan_selling", {"commission_type": "flat"})
    await sqlite_db.set_option("dokan_selling", {"commission_type": "percentage"})
    await sqlite_db.set_option("blogname", "Marketplace")

    assert await sqlite_db.get_option("dokan_selling") == {"commission_type": "percentage"}
    assert await sqlite_db.get_option("blogname") == "Marketplace"
    assert await sqlite_db.get_option("missing") is None


@pytest.mark.asyncio
async def test_missing_tables_raise_setup_failure(tmp_path):
    utils = DbUtils(f"sqlite:///{tmp_path / 'empty.db'}", "wp_")
    try:
        with pytest.raises(FixtureSetupFailure) as excinfo:
            await utils.get_user_meta(2, PROFILE)
    finally:
        utils.dispose()

    assert excinfo.value.operation == "get_user_meta"
    assert excinfo.value.payload["status"] == "OperationalError"


@pytest.mark.asyncio
async def test_delete_option(sqlite_db):
    await sqlite_db.set_option("dokan_withdraw", {"withdraw_limit": "50"})

    assert await sqlite_db.delete_option("dokan_withdraw") == 1
    assert await sqlite_db.delete_option("dokan_withdraw") == 0
    assert await sqlite_db.get_option("dokan_withdraw") is None
