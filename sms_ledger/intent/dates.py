"""English month parsing utilities (half-open month intervals).

A user "month" is resolved in the ledger timezone as:
    - `[first day 00:00:00, first day of the next month 00:00:00)`

Only a fixed set of strict formats is accepted. Each pattern must match the whole (trimmed) input;
anything else is not a month.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, tzinfo

_MONTH_NAMES: tuple[str, ...] = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)
_MONTH_ABBRS: tuple[str, ...] = tuple(name[:3] for name in _MONTH_NAMES)

_MONTHS_BY_NAME: dict[str, int] = {name: idx + 1 for idx, name in enumerate(_MONTH_NAMES)}
_MONTHS_BY_ABBR: dict[str, int] = {abbr: idx + 1 for idx, abbr in enumerate(_MONTH_ABBRS)}

_FLAGS = re.IGNORECASE | re.ASCII

_MM = r"(?P<m>0[1-9]|1[0-2])"
_M = r"(?P<m>0?[1-9]|1[0-2])"
_DD = r"(?P<d>0[1-9]|[12][0-9]|3[01])"
_D = r"(?P<d>0?[1-9]|[12][0-9]|3[01])"
_YYYY = r"(?P<y>[0-9]{4})"


@dataclass(frozen=True)
class MonthFormat:
    """One accepted month shape: a name for diagnostics plus a full-match pattern."""

    name: str
    pattern: re.Pattern[str]


FULL_NAME = MonthFormat("MMMM YYYY", re.compile(rf"(?P<name>{'|'.join(_MONTH_NAMES)}) {_YYYY}", _FLAGS))
ABBR_NAME = MonthFormat("MMM YYYY", re.compile(rf"(?P<abbr>{'|'.join(_MONTH_ABBRS)}) {_YYYY}", _FLAGS))

# Priority order matters: the first format that matches decides the month.
MONTH_FORMATS: tuple[MonthFormat, ...] = (
    FULL_NAME,
    ABBR_NAME,
    MonthFormat("MM/YYYY", re.compile(rf"{_MM}/{_YYYY}", _FLAGS)),
    MonthFormat("M/YYYY", re.compile(rf"{_M}/{_YYYY}", _FLAGS)),
    MonthFormat("MM/DD/YYYY", re.compile(rf"{_MM}/{_DD}/{_YYYY}", _FLAGS)),
    MonthFormat("M/D/YYYY", re.compile(rf"{_M}/{_D}/{_YYYY}", _FLAGS)),
)
NAMED_MONTH_FORMATS: tuple[MonthFormat, ...] = (FULL_NAME, ABBR_NAME)


def _month_from_match(match: re.Match[str]) -> tuple[int, int] | None:
    groups = match.groupdict()
    year = int(groups["y"])

    if groups.get("name"):
        month = _MONTHS_BY_NAME[groups["name"].lower()]
    elif groups.get("abbr"):
        month = _MONTHS_BY_ABBR[groups["abbr"].lower()]
    else:
        month = int(groups["m"])

    try:
        # Rejects year 0000 and calendar-invalid days such as 02/30.
        date(year, month, int(groups.get("d") or 1))
    except ValueError:
        return None
    return year, month


def parse_month(text: str, formats: tuple[MonthFormat, ...] = MONTH_FORMATS) -> tuple[int, int] | None:
    """Strictly parse `text` against `formats` in order.

    Returns:
        `(year, month)` with a 1-based month for the first matching format; otherwise `None`.
        A date such as `03/15/2023` resolves to its month; the day is validated and then dropped.
    """

    for fmt in formats:
        match = fmt.pattern.fullmatch(text)
        if match is None:
            continue
        return _month_from_match(match)
    return None


def month_bounds(year: int, month: int, tz: tzinfo = UTC) -> tuple[datetime, datetime]:
    """Return the half-open `[start, end)` interval covering a calendar month in `tz`.

    Raises:
        ValueError: If the following month is not representable (December 9999).
    """

    start_day = date(year, month, 1)
    end_day = date(year + 1, 1, 1) if month == 12 else date(year, month + 1, 1)
    start = datetime.combine(start_day, time.min, tzinfo=tz)
    end = datetime.combine(end_day, time.min, tzinfo=tz)
    return start, end


def month_label(year: int, month: int) -> str:
    """Render a month as full English name plus 4-digit year (e.g. `"March 2023"`)."""

    return f"{_MONTH_NAMES[month - 1].capitalize()} {year:04d}"
