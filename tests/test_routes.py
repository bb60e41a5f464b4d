"""Tests for the HTTP transport: TwiML webhook, prompt trigger and health check."""

from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal
from types import SimpleNamespace

from fastapi import FastAPI
from fastapi.testclient import TestClient

from sms_ledger.webhook.handlers import SmsHandler
from sms_ledger.webhook.main import create_api
from sms_ledger.webhook.routes import router
from tests.fakes import FakeLedger, FakeMessenger

_TWIML_PREFIX = '<?xml version="1.0" encoding="UTF-8"?><Response><Message>'


def _client(
        ledger: FakeLedger | None = None,
        messenger: FakeMessenger | None = None,
        prompt_number: str | None = "+15551234567",
) -> TestClient:
    api = FastAPI()
    api.state.handler = SmsHandler(
        ledger or FakeLedger(),
        messenger or FakeMessenger(),
        clock=lambda: datetime(2024, 6, 10, tzinfo=UTC),
    )
    api.state.prompt_number = prompt_number
    api.include_router(router)
    return TestClient(api)


def test_sms_webhook_replies_with_twiml() -> None:
    ledger = FakeLedger()
    client = _client(ledger)

    resp = client.post("/sms", data={"Body": " 50 ", "From": "+15550001111"})

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/xml")
    assert resp.text == (
        f"{_TWIML_PREFIX}Your cash entry has been recorded.</Message></Response>"
    )
    assert ledger.inserts == [("+15550001111", Decimal("50"))]


def test_sms_webhook_total() -> None:
    client = _client(FakeLedger(total=Decimal("125.5")))

    resp = client.post("/sms", data={"Body": "total", "From": "+15550001111"})

    assert resp.text == f"{_TWIML_PREFIX}Total cash collected: $125.50</Message></Response>"


def test_sms_webhook_missing_fields_is_invalid_input() -> None:
    ledger = FakeLedger()
    client = _client(ledger)

    resp = client.post("/sms", data={})

    assert resp.status_code == 200
    assert "Invalid input." in resp.text
    assert ledger.calls == 0


def test_sms_webhook_read_failure_still_replies() -> None:
    client = _client(FakeLedger(fail_reads=True))

    resp = client.post("/sms", data={"Body": "Mar 2023", "From": "+15550001111"})

    assert resp.status_code == 200
    assert "An error occurred while retrieving data." in resp.text
    assert resp.text.startswith(_TWIML_PREFIX)


def test_prompt_trigger_sends_message() -> None:
    messenger = FakeMessenger()
    client = _client(messenger=messenger)

    resp = client.post("/prompt")

    assert resp.status_code == 200
    assert resp.json()["sid"].startswith("SM")
    assert messenger.sent == [("+15551234567", "How much cash did you make today?")]


def test_prompt_trigger_reports_provider_failure() -> None:
    client = _client(messenger=FakeMessenger(fail=True))

    resp = client.post("/prompt")

    assert resp.status_code == 502


def test_prompt_trigger_requires_destination() -> None:
    client = _client(prompt_number=None)

    resp = client.post("/prompt")

    assert resp.status_code == 503


def test_health() -> None:
    resp = _client().get("/")
    assert resp.status_code == 200
    assert resp.text == "SMS Tracker App is running."


def test_create_api_wires_state() -> None:
    handler = SmsHandler(FakeLedger(), FakeMessenger())
    app = SimpleNamespace(
        settings=SimpleNamespace(user_phone_number="+15559990000", prompt_schedule_enabled=False),
        pool=object(),
        handler=handler,
    )

    api = create_api(app)  # type: ignore[arg-type]

    assert api.state.handler is handler
    assert api.state.prompt_number == "+15559990000"
    # Lifespan (pool open, scheduler) only runs inside `with TestClient(...)`.
    assert TestClient(api).get("/").text == "SMS Tracker App is running."
