"""
SQLAlchemy async engine and session management

This module provides:
1. AsyncEngineManager: event-loop-aware engine / session maker
2. Base: declarative base for all ORM models
3. create_db_and_tables / drop_db_and_tables: schema bootstrap from metadata
4. Database class (injected through the DI container)

Backends:
- PostgreSQL through asyncpg (default, built from POSTGRES_* settings)
- SQLite through aiosqlite when DATABASE_URL points at it (tests, local dev).
  Every SQLite transaction starts with BEGIN IMMEDIATE so writers are
  serialized and SAVEPOINTs work.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from sqlalchemy import event
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


# =============================================================================
# Event-loop-aware Engine Manager
# =============================================================================


def _install_sqlite_transaction_hooks(engine: AsyncEngine) -> None:
    """Take over BEGIN from pysqlite so the store's own locking applies."""

    @event.listens_for(engine.sync_engine, 'connect')
    def _on_connect(dbapi_connection: Any, connection_record: Any) -> None:
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute('PRAGMA foreign_keys=ON')
        cursor.close()

    @event.listens_for(engine.sync_engine, 'begin')
    def _on_begin(conn: Connection) -> None:
        conn.exec_driver_sql('BEGIN IMMEDIATE')


class AsyncEngineManager:
    """
    Manages the SQLAlchemy async engine with event loop awareness.

    Ensures the engine is always bound to the current event loop to prevent
    "Task got Future attached to a different loop" errors (pytest-asyncio
    runs every test in a fresh loop).
    """

    def __init__(self) -> None:
        self._engine: Optional[AsyncEngine] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None
        self._stale_engines: list[AsyncEngine] = []

    def get_engine(self) -> AsyncEngine:
        try:
            current_loop = asyncio.get_running_loop()
        except RuntimeError:
            # No event loop running, create engine without loop tracking
            if self._engine is None:
                self._engine = self._create_engine()
            return self._engine

        if self._loop is not current_loop:
            if self._engine is not None:
                Logger.base.warning('🔄 [DB] Event loop changed, replacing engine')
                # Can't await dispose() from here; dispose_engines() reaps it later
                self._stale_engines.append(self._engine)
                self._session_maker = None

            Logger.base.info(f'🔗 [DB] Creating engine for event loop {id(current_loop)}')
            self._engine = self._create_engine()
            self._loop = current_loop

        assert self._engine is not None
        return self._engine

    def get_session_maker(self) -> async_sessionmaker[AsyncSession]:
        engine = self.get_engine()
        if self._session_maker is None:
            self._session_maker = async_sessionmaker(
                engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )
        return self._session_maker

    async def dispose(self) -> None:
        engines = [*self._stale_engines, *([self._engine] if self._engine else [])]
        for engine in engines:
            await engine.dispose()
        self._stale_engines.clear()
        self._engine = None
        self._loop = None
        self._session_maker = None
        Logger.base.info(f'🧹 [DB] Disposed {len(engines)} engine(s)')

    def _create_engine(self) -> AsyncEngine:
        """
        Pool configuration is centralized in settings for easy tuning.
        SQLite gets its default pool plus a busy timeout instead.
        """
        if settings.IS_SQLITE:
            engine = create_async_engine(
                settings.DATABASE_URL_ASYNC,
                echo=False,
                connect_args={'timeout': settings.DB_POOL_TIMEOUT},
            )
            _install_sqlite_transaction_hooks(engine)
            return engine

        return create_async_engine(
            settings.DATABASE_URL_ASYNC,
            echo=False,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_POOL_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,
            pool_pre_ping=settings.DB_POOL_PRE_PING,
        )


# Global engine manager
_engine_manager = AsyncEngineManager()


def get_engine() -> AsyncEngine:
    return _engine_manager.get_engine()


def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return _engine_manager.get_session_maker()


async def dispose_engines() -> None:
    await _engine_manager.dispose()


# =============================================================================
# Base Model
# =============================================================================


class Base(DeclarativeBase):
    pass


# =============================================================================
# Table Creation
# =============================================================================


def _import_models() -> None:
    # Registers every table on Base.metadata
    import src.service.ticketing.driven_adapter.model  # noqa: F401


async def create_db_and_tables() -> None:
    """Create database tables if they don't exist"""
    _import_models()
    try:
        async with get_engine().begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)
    except Exception as e:
        error_msg = str(e).lower()
        if any(keyword in error_msg for keyword in ['already exists', 'duplicate key']):
            Logger.base.info('Tables already exist, skipping creation')
        else:
            Logger.base.error(f'Error creating tables: {e}')
            raise


async def drop_db_and_tables() -> None:
    _import_models()
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


# =============================================================================
# Database Class (for DI)
# =============================================================================


class Database:
    """Session source for repositories and the unit of work."""

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Context manager for database sessions

        Uses AsyncEngineManager to get the event-loop-aware session maker.
        Closing the session returns the connection to the pool and rolls back
        anything left uncommitted.
        """
        session_maker = get_session_maker()
        async with session_maker() as session:
            yield session
