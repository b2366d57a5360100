"""
Async database access.

Engine is created lazily from DATABASE_URL so importing this module never
opens a connection.
"""

import os
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

_engine: AsyncEngine | None = None


def _database_url() -> str:
    url = os.environ.get("DATABASE_URL")
    if not url:
        raise RuntimeError("DATABASE_URL is not set")
    # Hosted Postgres URLs come as postgres:// or postgresql://
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]
    if url.startswith("postgresql://"):
        url = "postgresql+asyncpg://" + url[len("postgresql://"):]
    return url


def get_engine() -> AsyncEngine:
    """Return the shared engine, creating it on first use."""
    global _engine
    if _engine is None:
        _engine = create_async_engine(_database_url(), pool_pre_ping=True)
    return _engine


@asynccontextmanager
async def get_connection() -> AsyncIterator[AsyncConnection]:
    """Connection without an implicit transaction commit. Caller commits."""
    async with get_engine().connect() as conn:
        yield conn


@asynccontextmanager
async def get_transaction() -> AsyncIterator[AsyncConnection]:
    """Connection inside a transaction that commits on exit, rolls back on error."""
    async with get_engine().begin() as conn:
        yield conn


async def close_engine() -> None:
    """Dispose the engine (tests and shutdown)."""
    global _engine
    if _engine is not None:
        await _engine.dispose()
        _engine = None
