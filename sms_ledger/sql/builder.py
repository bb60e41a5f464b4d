"""Deterministic SQL builder.

The builder produces parameterized SQL for the two ledger operations. Table and column names are
fixed constants; only values (sender, amount, period bounds) become bound parameters.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from sms_ledger.intent.schema import Period

CASH_ENTRIES_TABLE = "cash_entries"


def _build_period_clause(column_ref: str, period: Period) -> tuple[str, list[Any]]:
    return f"{column_ref} >= %s AND {column_ref} < %s", [period.start, period.end]


def build_sum_query(period: Period | None = None) -> tuple[str, tuple[Any, ...]]:
    """Build `SUM(amount)` over all entries, or over entries created within `period`.

    The result is never NULL: an empty set sums to `0`.
    """

    params: list[Any] = []
    sql = f"SELECT COALESCE(SUM(e.amount), 0) FROM {CASH_ENTRIES_TABLE} e"

    if period is not None:
        clause, p = _build_period_clause("e.created_at", period)
        sql += f" WHERE {clause}"
        params.extend(p)

    return sql, tuple(params)


def build_insert_query(sender: str, amount: Decimal) -> tuple[str, tuple[Any, ...]]:
    """Build the insert for one cash entry; `created_at` is assigned by the database.

    `amount` comes from a validated `CashEntry`, which already rejects negative values.
    """

    sql = f"INSERT INTO {CASH_ENTRIES_TABLE} (phone, amount) VALUES (%s, %s)"
    return sql, (sender, amount)
