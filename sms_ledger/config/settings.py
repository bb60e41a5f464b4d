"""Environment configuration and validation.

This module defines strongly-typed application settings loaded from environment variables
(optionally via a local `.env` file).

Month boundaries are resolved in `LEDGER_TIMEZONE`, while the DB session itself stays locked to UTC
so stored `created_at` values compare deterministically against timezone-aware bounds.
"""

from __future__ import annotations

import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    database_url: str = Field(alias="DATABASE_URL")
    db_timezone: str = Field(default="UTC", alias="DB_TIMEZONE")

    twilio_account_sid: str = Field(alias="TWILIO_ACCOUNT_SID")
    twilio_auth_token: str = Field(alias="TWILIO_AUTH_TOKEN")
    twilio_phone_number: str = Field(alias="TWILIO_PHONE_NUMBER")
    user_phone_number: str | None = Field(default=None, alias="USER_PHONE_NUMBER")

    ledger_timezone: str = Field(default="America/New_York", alias="LEDGER_TIMEZONE")

    prompt_schedule_enabled: bool = Field(default=False, alias="PROMPT_SCHEDULE_ENABLED")
    prompt_schedule: str = Field(default="30 16 * * tue-sat", alias="PROMPT_SCHEDULE")

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("db_timezone")
    @classmethod
    def validate_db_timezone_is_utc(cls, value: str) -> str:
        """Validate that the DB session timezone is locked to UTC."""

        if value.upper() != "UTC":
            raise ValueError("DB_TIMEZONE must be UTC")
        return "UTC"

    @field_validator("ledger_timezone")
    @classmethod
    def validate_ledger_timezone(cls, value: str) -> str:
        """Validate that the ledger timezone is a known IANA zone name."""

        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"LEDGER_TIMEZONE is not a known timezone: {value!r}") from exc
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that `LOG_LEVEL` names a standard logging level."""

        name = value.upper()
        if name not in logging.getLevelNamesMapping():
            raise ValueError(f"LOG_LEVEL is not a logging level: {value!r}")
        return name

    @model_validator(mode="after")
    def validate_prompt_config(self) -> Settings:
        """Validate the optional in-process prompt scheduler.

        If the scheduler is enabled, a destination number must be provided.
        """

        if self.prompt_schedule_enabled and not self.user_phone_number:
            raise ValueError("USER_PHONE_NUMBER is required when PROMPT_SCHEDULE_ENABLED=true")
        return self

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.ledger_timezone)


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is missing or invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
