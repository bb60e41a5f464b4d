"""In-process cron for the daily prompt SMS.

The job is the trigger collaborator: a failed send is logged here and retried only by the next
scheduled run.
"""

from __future__ import annotations

import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from sms_ledger.config.settings import Settings
from sms_ledger.messaging.base import MessagingError
from sms_ledger.webhook.handlers import SmsHandler

log = logging.getLogger(__name__)

PROMPT_JOB_ID = "daily_prompt"


async def send_daily_prompt(handler: SmsHandler, to: str) -> None:
    try:
        sid = await handler.send_prompt(to)
    except MessagingError:
        log.exception("scheduled prompt failed to=%s", to)
        return
    log.info("scheduled prompt sent sid=%s", sid)


def create_scheduler(settings: Settings, handler: SmsHandler) -> AsyncIOScheduler:
    """Create (but do not start) a scheduler with the daily prompt job.

    Raises:
        ValueError: If `PROMPT_SCHEDULE` is not a valid crontab expression.
    """

    if not settings.user_phone_number:
        raise ValueError("USER_PHONE_NUMBER is required for the prompt scheduler")

    scheduler = AsyncIOScheduler(timezone=settings.tz)
    scheduler.add_job(
        send_daily_prompt,
        CronTrigger.from_crontab(settings.prompt_schedule, timezone=settings.tz),
        args=(handler, settings.user_phone_number),
        id=PROMPT_JOB_ID,
        replace_existing=True,
    )
    return scheduler
