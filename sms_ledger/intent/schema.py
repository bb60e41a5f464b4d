"""Intent schema (Pydantic models).

This schema is the contract between the classifier and the webhook handler. Every inbound message
produces exactly one of the models below; they are transient and never persisted.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

UNRECOGNIZED_INPUT = "unrecognized input"


class Period(BaseModel):
    """A half-open, timezone-aware time interval: `[start, end)`.

    The ledger must filter with `created_at >= start AND created_at < end`.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    start: datetime
    end: datetime

    @model_validator(mode="after")
    def validate_range(self) -> Period:
        """Validate that both bounds are timezone-aware and `start < end`."""

        if self.start.tzinfo is None or self.end.tzinfo is None:
            raise ValueError("period bounds must be timezone-aware")
        if self.start >= self.end:
            raise ValueError("start must be < end")
        return self


class Total(BaseModel):
    """Request for the sum of every recorded amount."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["total"] = "total"


class CashEntry(BaseModel):
    """A non-negative dollar amount to be recorded for the sender."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["cash_entry"] = "cash_entry"
    amount: Decimal = Field(ge=0)


class MonthQuery(BaseModel):
    """Request for the sum of amounts recorded within one calendar month.

    `month` is 1-based (1 = January). `label` is the month rendered as full name plus year, e.g.
    `"March 2023"`, and is used verbatim in the reply.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["month_query"] = "month_query"
    year: int
    month: int = Field(ge=1, le=12)
    period: Period
    label: str


class Invalid(BaseModel):
    """Input that matched none of the accepted shapes."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["invalid"] = "invalid"
    reason: str = UNRECOGNIZED_INPUT


Intent = Annotated[Total | CashEntry | MonthQuery | Invalid, Field(discriminator="kind")]
