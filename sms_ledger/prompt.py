"""One-shot daily prompt for an external scheduler (cron, CI job, cloud trigger).

Exits with status 1 if the prompt cannot be sent so the caller can report the failure.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from sms_ledger.app import create_app
from sms_ledger.config.logging import configure_logging
from sms_ledger.config.settings import load_settings
from sms_ledger.messaging.base import MessagingError

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point; returns the process exit code."""

    parser = argparse.ArgumentParser(description="Send the daily cash prompt SMS.")
    parser.add_argument("--to", help="Destination number (defaults to USER_PHONE_NUMBER).")
    args = parser.parse_args(argv)

    settings = load_settings()
    configure_logging(settings.log_level)

    to = args.to or settings.user_phone_number
    if not to:
        logger.error("USER_PHONE_NUMBER not configured")
        return 1

    # The pool stays closed: sending the prompt never touches the ledger.
    app = create_app(settings)
    try:
        sid = asyncio.run(app.handler.send_prompt(to))
    except MessagingError as exc:
        logger.error("prompt failed: %s", exc)
        return 1

    logger.info("prompt sent sid=%s", sid)
    return 0


if __name__ == "__main__":
    sys.exit(main())
