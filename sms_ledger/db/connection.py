"""Synchronous Postgres connections for one-off tasks (migrations)."""

from __future__ import annotations

import psycopg

from sms_ledger.db.session import set_time_zone


def connect(database_url: str, *, timezone: str = "UTC") -> psycopg.Connection:
    """Open a connection with the session timezone pinned to `timezone`."""

    conn = psycopg.connect(database_url)
    conn.execute(set_time_zone(timezone), prepare=False)
    return conn
