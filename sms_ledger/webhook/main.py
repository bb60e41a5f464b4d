"""Webhook service entrypoint."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from sms_ledger.app import App, create_app
from sms_ledger.config.logging import configure_logging
from sms_ledger.config.settings import load_settings
from sms_ledger.scheduler import create_scheduler
from sms_ledger.webhook.routes import router

logger = logging.getLogger(__name__)


def create_api(app: App) -> FastAPI:
    """Build the FastAPI application around an (unopened) application container."""

    @asynccontextmanager
    async def lifespan(api: FastAPI) -> AsyncIterator[None]:
        await app.pool.open(wait=True)

        scheduler = None
        if app.settings.prompt_schedule_enabled:
            scheduler = create_scheduler(app.settings, app.handler)
            scheduler.start()
            logger.info("prompt scheduler started schedule=%r", app.settings.prompt_schedule)

        try:
            yield
        finally:
            logger.info("shutting down")
            if scheduler is not None:
                scheduler.shutdown(wait=False)
            await app.pool.close()

    api = FastAPI(title="SMS Ledger", lifespan=lifespan)
    api.state.handler = app.handler
    api.state.prompt_number = app.settings.user_phone_number
    api.include_router(router)
    return api


def main() -> None:
    """Run the webhook HTTP server."""

    settings = load_settings()
    configure_logging(settings.log_level)

    api = create_api(create_app(settings))
    uvicorn.run(api, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
