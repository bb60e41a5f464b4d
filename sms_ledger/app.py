"""Application composition root.

This module wires together configuration, the DB pool, the ledger and the messaging client into the
SMS handler shared by the HTTP routes, the scheduler and the prompt CLI.
"""

from __future__ import annotations

from dataclasses import dataclass

from psycopg_pool import AsyncConnectionPool

from sms_ledger.config.settings import Settings
from sms_ledger.db.ledger import PostgresLedger
from sms_ledger.db.pool import create_pool
from sms_ledger.messaging.twilio import TwilioMessenger
from sms_ledger.webhook.handlers import SmsHandler


@dataclass(frozen=True)
class App:
    """Shared application dependencies."""

    settings: Settings
    pool: AsyncConnectionPool
    handler: SmsHandler


def create_app(settings: Settings) -> App:
    """Create the application container.

    Note:
        The returned DB pool is not opened. Call `await app.pool.open()` at startup.
    """

    pool = create_pool(settings.database_url, timezone=settings.db_timezone, max_size=10)
    messenger = TwilioMessenger(
        account_sid=settings.twilio_account_sid,
        auth_token=settings.twilio_auth_token,
        from_number=settings.twilio_phone_number,
    )
    handler = SmsHandler(PostgresLedger(pool), messenger, tz=settings.tz)
    return App(settings=settings, pool=pool, handler=handler)
