"""Cash ledger persistence.

`Ledger` is the interface the webhook handler depends on; `PostgresLedger` implements it on top of
the async pool. Any database failure is surfaced as `PersistenceError` so the handler can turn it
into a reply without knowing about psycopg.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

import psycopg
from psycopg_pool import AsyncConnectionPool

from sms_ledger.db.pool import get_conn
from sms_ledger.db.query import execute, fetch_scalar_decimal
from sms_ledger.intent.schema import Period
from sms_ledger.sql.builder import build_insert_query, build_sum_query


class PersistenceError(RuntimeError):
    """Raised when a ledger read or write fails."""


class Ledger(ABC):
    """Storage operations needed by the SMS handler."""

    @abstractmethod
    async def insert_cash_entry(self, sender: str, amount: Decimal) -> None:
        """Append one entry; the store assigns `created_at`.

        Raises:
            PersistenceError: If the write fails.
        """

    @abstractmethod
    async def sum_amounts(self, period: Period | None = None) -> Decimal:
        """Sum every amount, or only those with `period.start <= created_at < period.end`.

        Raises:
            PersistenceError: If the read fails.
        """


class PostgresLedger(Ledger):
    """`Ledger` backed by the `cash_entries` table."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool

    async def insert_cash_entry(self, sender: str, amount: Decimal) -> None:
        sql, params = build_insert_query(sender, amount)
        try:
            async with get_conn(self._pool) as conn:
                await execute(conn, sql, params)
        except psycopg.Error as exc:
            raise PersistenceError(f"insert failed: {exc}") from exc

    async def sum_amounts(self, period: Period | None = None) -> Decimal:
        sql, params = build_sum_query(period)
        try:
            async with get_conn(self._pool) as conn:
                return await fetch_scalar_decimal(conn, sql, params)
        except psycopg.Error as exc:
            raise PersistenceError(f"sum failed: {exc}") from exc
