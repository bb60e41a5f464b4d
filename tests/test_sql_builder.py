"""Tests for the deterministic SQL builder (fixed identifiers + parameter binding)."""

from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal

from sms_ledger.intent.schema import Period
from sms_ledger.sql.builder import build_insert_query, build_sum_query


def _placeholder_count(sql: str) -> int:
    return sql.count("%s")


def test_build_sum_without_period() -> None:
    sql, params = build_sum_query()
    assert sql == "SELECT COALESCE(SUM(e.amount), 0) FROM cash_entries e"
    assert params == ()


def test_build_sum_with_half_open_period() -> None:
    start = datetime(2023, 3, 1, tzinfo=UTC)
    end = datetime(2023, 4, 1, tzinfo=UTC)
    sql, params = build_sum_query(Period(start=start, end=end))

    assert "WHERE e.created_at >= %s AND e.created_at < %s" in sql
    assert "<=" not in sql
    assert params == (start, end)
    assert _placeholder_count(sql) == len(params)


def test_build_insert_binds_values() -> None:
    sql, params = build_insert_query("+15551234567", Decimal("12.5"))
    assert sql == "INSERT INTO cash_entries (phone, amount) VALUES (%s, %s)"
    assert params == ("+15551234567", Decimal("12.5"))
    assert "+1555" not in sql
