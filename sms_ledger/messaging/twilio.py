"""Twilio REST client for outbound SMS."""

from __future__ import annotations

import logging

import httpx

from sms_ledger.messaging.base import MessagingError, Messenger

logger = logging.getLogger(__name__)

TWILIO_API_BASE = "https://api.twilio.com"


class TwilioMessenger(Messenger):
    """Sends SMS through the Twilio Messages API."""

    def __init__(
        self,
        account_sid: str,
        auth_token: str,
        from_number: str,
        *,
        api_base: str = TWILIO_API_BASE,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._account_sid = account_sid
        self._auth_token = auth_token
        self._from_number = from_number
        self._api_base = api_base.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def _messages_url(self) -> str:
        return f"{self._api_base}/2010-04-01/Accounts/{self._account_sid}/Messages.json"

    async def send_message(self, to: str, body: str) -> str:
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                resp = await client.post(
                    self._messages_url(),
                    auth=(self._account_sid, self._auth_token),
                    data={
                        "From": self._from_number,
                        "To": to,
                        "Body": body,
                    },
                )
        except httpx.HTTPError as exc:
            raise MessagingError(f"twilio request failed: {exc}") from exc

        if resp.status_code != 201:
            raise MessagingError(f"twilio returned {resp.status_code}: {resp.text}")

        try:
            sid = resp.json()["sid"]
        except (ValueError, KeyError) as exc:
            raise MessagingError("twilio response has no message sid") from exc

        logger.info("sent sms to=%s sid=%s", to, sid)
        return sid
