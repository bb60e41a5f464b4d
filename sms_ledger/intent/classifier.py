"""Rules-based SMS intent classifier.

The classifier is strict and deterministic:
    - rules are evaluated in a fixed order and the first match wins,
    - each rule only accepts an exact, full-string shape,
    - anything unmatched becomes `Invalid`.

It performs no I/O; the caller supplies the reference year and timezone.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, tzinfo
from decimal import Decimal

from sms_ledger.intent import dates
from sms_ledger.intent.schema import CashEntry, Intent, Invalid, MonthQuery, Period, Total

TOTAL_KEYWORD = "total"

_AMOUNT_RE = re.compile(r"[0-9]+(?:\.[0-9]+)?")


@dataclass(frozen=True)
class _Context:
    text: str
    reference_year: int
    tz: tzinfo


Matcher = Callable[[_Context], Intent | None]


@dataclass(frozen=True)
class Rule:
    """A named matcher; returns an intent when it recognizes the text, otherwise `None`."""

    name: str
    match: Matcher


def _match_total(ctx: _Context) -> Total | None:
    if ctx.text.lower() == TOTAL_KEYWORD:
        return Total()
    return None


def _match_amount(ctx: _Context) -> CashEntry | None:
    if _AMOUNT_RE.fullmatch(ctx.text) is None:
        return None
    return CashEntry(amount=Decimal(ctx.text))


def _month_query(year: int, month: int, tz: tzinfo) -> MonthQuery | None:
    try:
        start, end = dates.month_bounds(year, month, tz)
    except ValueError:
        return None
    return MonthQuery(
        year=year,
        month=month,
        period=Period(start=start, end=end),
        label=dates.month_label(year, month),
    )


def _match_month(ctx: _Context) -> MonthQuery | None:
    parsed = dates.parse_month(ctx.text)
    if parsed is None:
        return None
    return _month_query(*parsed, ctx.tz)


def _match_bare_month_name(ctx: _Context) -> MonthQuery | None:
    # "March" -> "March <reference year>"; only the named formats are retried.
    parsed = dates.parse_month(f"{ctx.text} {ctx.reference_year}", dates.NAMED_MONTH_FORMATS)
    if parsed is None:
        return None
    return _month_query(*parsed, ctx.tz)


RULES: tuple[Rule, ...] = (
    Rule("total", _match_total),
    Rule("amount", _match_amount),
    Rule("month", _match_month),
    Rule("bare_month_name", _match_bare_month_name),
)


def _context(text: str, reference_year: int, tz: tzinfo) -> _Context:
    return _Context(text=(text or "").strip(), reference_year=reference_year, tz=tz)


def classify(text: str, reference_year: int, tz: tzinfo = UTC) -> Intent:
    """Classify an SMS body into exactly one intent.

    Args:
        text: Raw message body; surrounding whitespace is ignored.
        reference_year: Year assumed when only a month name is given.
        tz: Timezone in which month boundaries are resolved.
    """

    ctx = _context(text, reference_year, tz)
    for rule in RULES:
        intent = rule.match(ctx)
        if intent is not None:
            return intent
    return Invalid()


def matching_rules(text: str, reference_year: int, tz: tzinfo = UTC) -> list[str]:
    """Return the names of every rule that recognizes `text` (diagnostics and tests)."""

    ctx = _context(text, reference_year, tz)
    return [rule.name for rule in RULES if rule.match(ctx) is not None]
