"""Async Postgres connection pool shared by the ledger."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from psycopg import AsyncConnection
from psycopg_pool import AsyncConnectionPool

from sms_ledger.db.session import session_configurer


def create_pool(
        database_url: str,
        *,
        timezone: str = "UTC",
        min_size: int = 1,
        max_size: int | None = None,
        timeout: float = 30.0,
) -> AsyncConnectionPool:
    """Create an async DB pool whose connections use `timezone` as session timezone.

    The returned pool is created with `open=False`. Call `await pool.open()` at startup.
    """

    return AsyncConnectionPool(
        conninfo=database_url,
        min_size=min_size,
        max_size=max_size,
        timeout=timeout,
        open=False,
        configure=session_configurer(timezone),
    )


@asynccontextmanager
async def get_conn(pool: AsyncConnectionPool) -> AsyncIterator[AsyncConnection]:
    """Acquire a connection from the pool.

    The pool's `connection()` context commits on clean exit and rolls back on error.
    """

    async with pool.connection() as conn:
        yield conn
