"""
Date normalization for CMS exports

The Publish date column is filled by hand and by several export tools, so
the same calendar day shows up as "17 Oct 2023", "17/10/2023" or an ISO
timestamp. Everything is normalized to an aware UTC datetime.

Formats, tried in order (first match wins):
1. D[D] <Month name> YYYY    e.g. "17 Oct 2023", "5 September 2024"
2. D[D]/M[M]/YYYY            day/month/year, never month/day/year
3. Anything dateutil can parse (missing day or month default to the 1st
   and January)

A string shaped like form 1 or 2 never reaches dateutil: if its day or
month is out of range the date is rejected, not reinterpreted.

Timezone policy: calendar dates are UTC midnight, naive timestamps are
taken as UTC, aware timestamps are converted to UTC.
"""

import calendar
import math
import re
from datetime import datetime, timedelta, timezone
from typing import Optional

from dateutil import parser as date_parser

from content_freshness import config


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

NAMED_MONTH_PATTERN = re.compile(r"^(\d{1,2})\s+([A-Za-z]+)\.?,?\s+(\d{4})$")
SLASHED_PATTERN = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")

GENERIC_DEFAULT = datetime(2000, 1, 1)


def _build_month_lookup() -> dict:
    lookup = {}
    for number in range(1, 13):
        lookup[calendar.month_name[number].lower()] = number
        lookup[calendar.month_abbr[number].lower()] = number
    lookup["sept"] = 9
    return lookup


MONTH_LOOKUP = _build_month_lookup()


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes, convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _utc_midnight(year: int, month: int, day: int) -> Optional[datetime]:
    try:
        return datetime(year, month, day, tzinfo=timezone.utc)
    except ValueError:
        return None


def _from_named_month(match: re.Match) -> Optional[datetime]:
    month = MONTH_LOOKUP.get(match.group(2).lower())
    if month is None:
        return None
    return _utc_midnight(int(match.group(3)), month, int(match.group(1)))


def _from_slashed(match: re.Match) -> Optional[datetime]:
    day, month, year = (int(part) for part in match.groups())
    return _utc_midnight(year, month, day)


DATE_FORMS = (
    (NAMED_MONTH_PATTERN, _from_named_month),
    (SLASHED_PATTERN, _from_slashed),
)


def _parse_generic(text: str) -> Optional[datetime]:
    # Missing parts come from GENERIC_DEFAULT, not from today's date
    try:
        return ensure_utc(date_parser.parse(text, default=GENERIC_DEFAULT))
    except (ValueError, OverflowError):
        return None


def parse_date(raw: Optional[str]) -> Optional[datetime]:
    """
    Parse a loosely formatted publish date.

    Args:
        raw: Date string from the export (may be empty or None)

    Returns:
        Aware UTC datetime, or None if no format matched
    """
    if not raw or not raw.strip():
        return None
    text = raw.strip()

    for pattern, build in DATE_FORMS:
        match = pattern.match(text)
        if match:
            return build(match)
    return _parse_generic(text)


def to_epoch_millis(value: datetime) -> int:
    """Milliseconds since the Unix epoch."""
    return (ensure_utc(value) - EPOCH) // timedelta(milliseconds=1)


def to_iso_date(value: datetime) -> str:
    """UTC calendar date as YYYY-MM-DD."""
    return ensure_utc(value).date().isoformat()


def compute_age_months(published: datetime, now: datetime) -> int:
    """
    Whole months elapsed since publication.

    A month is DAYS_PER_MONTH days. Future dates count as age 0.
    """
    elapsed = ensure_utc(now) - ensure_utc(published)
    months = math.floor(elapsed / timedelta(days=config.DAYS_PER_MONTH))
    return max(0, months)
