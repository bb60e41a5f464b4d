"""Tests for the in-process daily prompt scheduler."""

from __future__ import annotations

from types import SimpleNamespace
from zoneinfo import ZoneInfo

import pytest

from sms_ledger.scheduler import PROMPT_JOB_ID, create_scheduler, send_daily_prompt
from sms_ledger.webhook.handlers import SmsHandler
from tests.fakes import FakeLedger, FakeMessenger


def _settings(**overrides):  # type: ignore[no-untyped-def]
    values = {
        "user_phone_number": "+15551234567",
        "prompt_schedule": "30 16 * * tue-sat",
        "tz": ZoneInfo("America/New_York"),
    }
    values.update(overrides)
    return SimpleNamespace(**values)


def test_create_scheduler_registers_cron_job() -> None:
    scheduler = create_scheduler(_settings(), SmsHandler(FakeLedger(), FakeMessenger()))

    jobs = scheduler.get_jobs()
    assert [job.id for job in jobs] == [PROMPT_JOB_ID]
    trigger = str(jobs[0].trigger)
    assert "day_of_week='tue-sat'" in trigger
    assert "hour='16'" in trigger
    assert "minute='30'" in trigger


def test_create_scheduler_rejects_bad_crontab() -> None:
    with pytest.raises(ValueError):
        create_scheduler(_settings(prompt_schedule="every day"), SmsHandler(FakeLedger(), FakeMessenger()))


def test_create_scheduler_requires_destination() -> None:
    with pytest.raises(ValueError):
        create_scheduler(_settings(user_phone_number=None), SmsHandler(FakeLedger(), FakeMessenger()))


@pytest.mark.asyncio
async def test_send_daily_prompt() -> None:
    messenger = FakeMessenger()

    await send_daily_prompt(SmsHandler(FakeLedger(), messenger), "+15551234567")

    assert messenger.sent == [("+15551234567", "How much cash did you make today?")]


@pytest.mark.asyncio
async def test_send_daily_prompt_logs_failure(caplog: pytest.LogCaptureFixture) -> None:
    await send_daily_prompt(SmsHandler(FakeLedger(), FakeMessenger(fail=True)), "+15551234567")

    assert "scheduled prompt failed" in caplog.text
