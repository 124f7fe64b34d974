"""Async engine and session factory construction.

Nothing here is created at import time: the app lifespan (or a test, or the
migration env) builds an engine from Settings and owns its lifetime.

SQLite ignores ``SELECT ... FOR UPDATE``, so SQLite engines start every
transaction with ``BEGIN IMMEDIATE`` instead. That takes the database write
lock up front and serializes concurrent increments the same way a row lock
does on PostgreSQL or MySQL.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import Settings

SQLITE_BUSY_TIMEOUT_SECONDS = 30.0


class Base(DeclarativeBase):
    pass


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    url = settings.sqlalchemy_url
    engine_args: dict[str, Any] = {"echo": settings.db_echo}

    if url.startswith("sqlite"):
        engine_args["connect_args"] = {"timeout": SQLITE_BUSY_TIMEOUT_SECONDS}
        engine = create_async_engine(url, **engine_args)
        _use_immediate_transactions(engine)
        return engine

    engine_args["pool_pre_ping"] = True
    engine_args["pool_size"] = settings.db_pool_size
    engine_args["max_overflow"] = settings.db_max_overflow
    engine_args["pool_timeout"] = settings.db_pool_timeout
    engine_args["pool_recycle"] = 3600
    return create_async_engine(url, **engine_args)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        expire_on_commit=False,
        autoflush=False,
    )


def _use_immediate_transactions(engine: AsyncEngine) -> None:
    @event.listens_for(engine.sync_engine, "connect")
    def _disable_driver_begin(dbapi_connection, connection_record):
        # Stop the driver from emitting its own deferred BEGIN.
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")
