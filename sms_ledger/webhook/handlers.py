"""SMS request handler.

Hard contract: every inbound message produces exactly one reply string. Ledger failures become a
fixed error reply; any other internal error is logged and answered with a generic reply. Nothing
propagates back to the transport.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime, tzinfo
from time import monotonic

from sms_ledger import replies
from sms_ledger.db.ledger import Ledger, PersistenceError
from sms_ledger.intent.classifier import classify
from sms_ledger.intent.schema import CashEntry, Intent, Invalid, MonthQuery, Total
from sms_ledger.messaging.base import Messenger

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class SmsHandler:
    """Classifies inbound SMS, performs one ledger call and formats the reply."""

    def __init__(
        self,
        ledger: Ledger,
        messenger: Messenger,
        *,
        tz: tzinfo = UTC,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._ledger = ledger
        self._messenger = messenger
        self._tz = tz
        self._clock = clock

    def reference_year(self) -> int:
        """Current year in the ledger timezone; used when only a month name is sent."""

        return self._clock().astimezone(self._tz).year

    async def handle(self, body: str, sender: str) -> str:
        """Handle one inbound SMS and return the reply text."""

        started = monotonic()

        # noinspection PyBroadException
        try:
            intent = classify(body, self.reference_year(), self._tz)
            reply = await self._dispatch(intent, sender)
        except Exception:
            # Handler boundary: the sender always gets a reply, never a transport error.
            logger.exception("handler failed sender=%s", sender)
            return replies.UNEXPECTED_ERROR

        latency_ms = int((monotonic() - started) * 1000)
        logger.info("handled intent=%s latency_ms=%d", intent.kind, latency_ms)
        return reply

    async def _dispatch(self, intent: Intent, sender: str) -> str:
        if isinstance(intent, Total):
            try:
                total = await self._ledger.sum_amounts(None)
            except PersistenceError as exc:
                logger.warning("total lookup failed: %s", exc)
                return replies.RETRIEVE_ERROR
            return replies.format_total(total)

        if isinstance(intent, CashEntry):
            try:
                await self._ledger.insert_cash_entry(sender, intent.amount)
            except PersistenceError as exc:
                logger.warning("cash entry insert failed: %s", exc)
                return replies.SAVE_ERROR
            return replies.ENTRY_RECORDED

        if isinstance(intent, MonthQuery):
            try:
                total = await self._ledger.sum_amounts(intent.period)
            except PersistenceError as exc:
                logger.warning("month lookup failed label=%s: %s", intent.label, exc)
                return replies.RETRIEVE_ERROR
            return replies.format_month_total(intent.label, total)

        if isinstance(intent, Invalid):
            logger.info("unsupported reason=%s", intent.reason)
            return replies.INVALID_INPUT

        raise TypeError(f"unhandled intent: {intent!r}")

    async def send_prompt(self, to: str) -> str:
        """Send the daily prompt to `to` and return the provider message id.

        Raises:
            MessagingError: Propagated to the trigger so it can report the failure itself.
        """

        return await self._messenger.send_message(to, replies.DAILY_PROMPT)
