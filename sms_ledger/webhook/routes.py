"""HTTP routes: Twilio inbound webhook, prompt trigger and health check."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Form, HTTPException, Request
from fastapi.responses import PlainTextResponse, Response

from sms_ledger import replies
from sms_ledger.messaging.base import MessagingError
from sms_ledger.messaging.twiml import TWIML_CONTENT_TYPE, render_message
from sms_ledger.webhook.handlers import SmsHandler

logger = logging.getLogger(__name__)

router = APIRouter()


def _handler(request: Request) -> SmsHandler:
    return request.app.state.handler


@router.post("/sms")
async def receive_sms(
    request: Request,
    body: str = Form(default="", alias="Body"),
    sender: str = Form(default="", alias="From"),
) -> Response:
    """Twilio messaging webhook: always answers 200 with a single TwiML message."""

    logger.info("received sms from=%s", sender)
    reply = await _handler(request).handle(body, sender)
    return Response(content=render_message(reply), media_type=TWIML_CONTENT_TYPE)


@router.post("/prompt")
async def trigger_prompt(request: Request) -> dict[str, str]:
    """Send the daily prompt to the configured number (for an external scheduler)."""

    to = request.app.state.prompt_number
    if not to:
        raise HTTPException(status_code=503, detail="USER_PHONE_NUMBER is not configured")

    try:
        sid = await _handler(request).send_prompt(to)
    except MessagingError as exc:
        logger.error("prompt failed: %s", exc)
        raise HTTPException(status_code=502, detail="messaging provider rejected the prompt") from exc

    return {"sid": sid}


@router.get("/", response_class=PlainTextResponse)
async def health() -> str:
    return replies.HEALTH
