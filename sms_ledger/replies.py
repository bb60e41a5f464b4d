"""User-facing reply texts.

These strings are part of the observable SMS contract and are compared verbatim in tests.
"""

from __future__ import annotations

from decimal import Decimal

ENTRY_RECORDED = "Your cash entry has been recorded."
TOTAL_TEMPLATE = "Total cash collected: ${total:.2f}"
MONTH_TOTAL_TEMPLATE = "Total cash for {label}: ${total:.2f}"

SAVE_ERROR = "An error occurred while saving your entry. Please try again later."
RETRIEVE_ERROR = "An error occurred while retrieving data. Please try again later."
INVALID_INPUT = (
    'Invalid input. Please send a number, a valid date (e.g., "March 2023" or "03/2023"), '
    'or "total".'
)
UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."

DAILY_PROMPT = "How much cash did you make today?"
HEALTH = "SMS Tracker App is running."


def format_total(total: Decimal) -> str:
    return TOTAL_TEMPLATE.format(total=total)


def format_month_total(label: str, total: Decimal) -> str:
    return MONTH_TOTAL_TEMPLATE.format(label=label, total=total)
