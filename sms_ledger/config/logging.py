"""Logging configuration for the webhook service."""

from __future__ import annotations

import logging

_QUIET_LOGGERS = ("httpx", "apscheduler")


def configure_logging(level: str = "INFO") -> None:
    """Configure process logging at `level` (normally `Settings.log_level`).

    Logs are for internal diagnostics only; nothing here is ever sent back to the SMS sender.
    """

    log_level = level.upper()
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s %(message)s")
    # `basicConfig` is a no-op once a handler exists (uvicorn, pytest), so set the level directly.
    logging.getLogger().setLevel(log_level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
