"""Direct database access for state the REST API does not expose.

WordPress keeps vendor profile data (payment methods, store details) as
PHP-serialized blobs in ``<prefix>usermeta``. ``DbUtils`` reads and writes
those rows through SQLAlchemy Core and decodes the blobs with
``phpserialize``. Calls run in a worker thread so async fixtures can await
them without blocking the event loop.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import anyio
import phpserialize
from sqlalchemy import (
    BigInteger,
    Column,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    create_engine,
    select,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from marketplace_e2e.config import settings
from marketplace_e2e.errors import FixtureSetupFailure
from marketplace_e2e.helpers import deep_merge

logger = logging.getLogger(__name__)

_SERIALIZED_PREFIXES = ("a:", "s:", "i:", "d:", "b:", "O:", "N;")


def maybe_unserialize(raw: Any) -> Any:
    """Decode a PHP-serialized value; plain strings are returned unchanged."""
    if raw is None:
        return None
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8")
    if not isinstance(raw, str) or not raw.startswith(_SERIALIZED_PREFIXES):
        return raw
    try:
        return _to_plain(phpserialize.loads(raw.encode("utf-8"), decode_strings=True))
    except ValueError:
        return raw


def _to_plain(value: Any) -> Any:
    # phpserialize hands back bytes for undecodable strings and keeps array keys as ints
    if isinstance(value, dict):
        return {(k.decode("utf-8") if isinstance(k, bytes) else k): _to_plain(v) for k, v in value.items()}
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return value


def maybe_serialize(value: Any) -> str:
    if isinstance(value, (dict, list, tuple, bool)) or value is None:
        return phpserialize.dumps(value).decode("utf-8")
    return str(value)


class DbUtils:
    """Read/modify WordPress user meta and options."""

    def __init__(self, url: Optional[str] = None, prefix: Optional[str] = None, engine: Optional[Engine] = None) -> None:
        self.url = url or settings.profile.db_url
        self.prefix = prefix if prefix is not None else settings.profile.db_prefix
        self.engine = engine or create_engine(self.url, future=True, pool_pre_ping=True)

        self.metadata = MetaData()
        self.usermeta = Table(
            f"{self.prefix}usermeta",
            self.metadata,
            Column("umeta_id", BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True),
            Column("user_id", BigInteger, nullable=False, index=True),
            Column("meta_key", String(255), index=True),
            Column("meta_value", Text),
        )
        self.options = Table(
            f"{self.prefix}options",
            self.metadata,
            Column("option_id", BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True),
            Column("option_name", String(191), unique=True, nullable=False),
            Column("option_value", Text, nullable=False),
            Column("autoload", String(20), nullable=False, default="yes"),
        )

    def create_schema(self) -> None:
        """Create the tables on an empty database (offline runs only)."""
        self.metadata.create_all(self.engine)

    def dispose(self) -> None:
        self.engine.dispose()

    def _fail(self, operation: str, exc: SQLAlchemyError, **payload: Any) -> FixtureSetupFailure:
        payload.setdefault("endpoint", self.engine.url.render_as_string(hide_password=True))
        payload.setdefault("status", type(exc).__name__)
        return FixtureSetupFailure(operation=operation, payload=payload, message=str(exc).splitlines()[0])

    # user meta

    def get_user_meta_sync(self, user_id: int, key: str) -> Any:
        query = select(self.usermeta.c.meta_value).where(
            self.usermeta.c.user_id == int(user_id), self.usermeta.c.meta_key == key
        )
        try:
            with self.engine.connect() as conn:
                raw = conn.execute(query).scalar()
        except SQLAlchemyError as exc:
            raise self._fail("get_user_meta", exc, user_id=user_id, key=key) from exc
        return maybe_unserialize(raw)

    def update_user_meta_sync(self, user_id: int, key: str, value: Any, merge: bool = True) -> Any:
        table = self.usermeta
        condition = (table.c.user_id == int(user_id)) & (table.c.meta_key == key)
        try:
            with self.engine.begin() as conn:
                row = conn.execute(select(table.c.umeta_id, table.c.meta_value).where(condition)).first()
                current = maybe_unserialize(row.meta_value) if row else None
                if merge and isinstance(current, Mapping) and isinstance(value, Mapping):
                    new_value = deep_merge(current, value)
                else:
                    new_value = value
                serialized = maybe_serialize(new_value)
                if row is None:
                    conn.execute(table.insert().values(user_id=int(user_id), meta_key=key, meta_value=serialized))
                else:
                    conn.execute(table.update().where(table.c.umeta_id == row.umeta_id).values(meta_value=serialized))
        except SQLAlchemyError as exc:
            raise self._fail("update_user_meta", exc, user_id=user_id, key=key) from exc
        logger.debug("usermeta %s[%s] updated (merge=%s)", user_id, key, merge)
        return new_value

    def delete_user_meta_sync(self, user_id: int, key: str) -> int:
        table = self.usermeta
        try:
            with self.engine.begin() as conn:
                return conn.execute(
                    table.delete().where(table.c.user_id == int(user_id), table.c.meta_key == key)
                ).rowcount
        except SQLAlchemyError as exc:
            raise self._fail("delete_user_meta", exc, user_id=user_id, key=key) from exc

    # options

    def get_option_sync(self, name: str) -> Any:
        query = select(self.options.c.option_value).where(self.options.c.option_name == name)
        try:
            with self.engine.connect() as conn:
                raw = conn.execute(query).scalar()
        except SQLAlchemyError as exc:
            raise self._fail("get_option", exc, option=name) from exc
        return maybe_unserialize(raw)

    def set_option_sync(self, name: str, value: Any) -> None:
        table = self.options
        serialized = maybe_serialize(value)
        try:
            with self.engine.begin() as conn:
                updated = conn.execute(
                    table.update().where(table.c.option_name == name).values(option_value=serialized)
                ).rowcount
                if not updated:
                    conn.execute(table.insert().values(option_name=name, option_value=serialized, autoload="yes"))
        except SQLAlchemyError as exc:
            raise self._fail("set_option", exc, option=name) from exc

    def delete_option_sync(self, name: str) -> int:
        try:
            with self.engine.begin() as conn:
                return conn.execute(self.options.delete().where(self.options.c.option_name == name)).rowcount
        except SQLAlchemyError as exc:
            raise self._fail("delete_option", exc, option=name) from exc

    # async facade

    async def get_user_meta(self, user_id: int, key: str) -> Any:
        return await anyio.to_thread.run_sync(self.get_user_meta_sync, user_id, key)

    async def update_user_meta(self, user_id: int, key: str, value: Any, merge: bool = True) -> Any:
        """Write ``value`` into the stored blob and return what was stored.

        With ``merge`` the new value is deep-merged into the existing mapping,
        so ``{"payment": {"paypal": {"email": ""}}}`` leaves other payment
        methods untouched. A missing row is inserted.
        """
        return await anyio.to_thread.run_sync(
            lambda: self.update_user_meta_sync(user_id, key, value, merge)
        )

    async def delete_user_meta(self, user_id: int, key: str) -> int:
        return await anyio.to_thread.run_sync(self.delete_user_meta_sync, user_id, key)

    async def get_option(self, name: str) -> Any:
        return await anyio.to_thread.run_sync(self.get_option_sync, name)

    async def set_option(self, name: str, value: Any) -> None:
        await anyio.to_thread.run_sync(self.set_option_sync, name, value)

    async def delete_option(self, name: str) -> int:
        return await anyio.to_thread.run_sync(self.delete_option_sync, name)
