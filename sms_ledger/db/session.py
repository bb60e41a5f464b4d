"""DB session configuration helpers.

`created_at` is `timestamptz` and month bounds are bound as timezone-aware values, so comparisons
do not depend on the session timezone. It is still pinned to `DB_TIMEZONE` on every connection so
timestamps read back render the same way everywhere.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from psycopg import AsyncConnection, sql


def set_time_zone(timezone: str) -> sql.Composed:
    """`SET TIME ZONE` statement; `SET` takes no bind parameters, so the zone is quoted as a literal."""

    return sql.SQL("SET TIME ZONE {}").format(sql.Literal(timezone))


def session_configurer(timezone: str) -> Callable[[AsyncConnection], Awaitable[None]]:
    """Build the pool `configure` callback that pins each new connection to `timezone`."""

    statement = set_time_zone(timezone)

    async def configure(conn: AsyncConnection) -> None:
        await conn.execute(statement, prepare=False)
        # `SET` starts a transaction when autocommit is disabled; commit so the pool doesn't see INTRANS.
        await conn.commit()

    return configure
