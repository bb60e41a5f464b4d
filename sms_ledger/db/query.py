"""Safe DB query helpers.

These helpers never interpolate user values into SQL; all values are passed via `params`.
DB errors are not swallowed here (the ledger decides how to surface them).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, LiteralString, cast

from psycopg import AsyncConnection


async def fetch_scalar_decimal(
        conn: AsyncConnection,
        sql: str,
        params: tuple[Any, ...] = (),
) -> Decimal:
    """Execute a scalar query and return a `Decimal`.

    Contract:
        - Returns `Decimal(0)` if the query yields no rows or the first column is NULL.
    """

    async with conn.cursor() as cur:
        await cur.execute(cast(LiteralString, sql), params)
        row = await cur.fetchone()

    if not row:
        return Decimal(0)

    value = row[0]
    if value is None:
        return Decimal(0)

    return Decimal(value)


async def execute(conn: AsyncConnection, sql: str, params: tuple[Any, ...] = ()) -> int:
    """Execute a write statement and return the affected row count."""

    async with conn.cursor() as cur:
        await cur.execute(cast(LiteralString, sql), params)
        return cur.rowcount
