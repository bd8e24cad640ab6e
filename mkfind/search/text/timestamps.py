"""Timestamp extraction and temporal predicates.

Dates are recognised in ``MM/DD/YYYY`` or ``MM/DD/YY`` form, optionally
followed by a time of day such as ``10:00 AM`` or ``9:30:15 pm``. Values are
interpreted in the local timezone and expressed as epoch milliseconds, with
``0`` standing for "no timestamp found".
"""

import re
from datetime import datetime

MS_PER_DAY = 24 * 60 * 60 * 1000

_DATE_TIME_RE = re.compile(
    r"(\d{1,2})/(\d{1,2})/(\d{2,4})(?:\s+(\d{1,2}):(\d{2})(?::(\d{2}))?\s*(AM|PM))?",
    re.IGNORECASE | re.ASCII,
)


def extract_timestamp(text: str) -> int:
    """Return the first date in text as epoch milliseconds, or 0 if there is none."""
    match = _DATE_TIME_RE.search(text)
    if match is None:
        return 0

    month, day, year = int(match[1]), int(match[2]), int(match[3])
    if year < 100:
        year += 2000

    hours = minutes = seconds = 0
    if match[4]:
        hours, minutes = int(match[4]), int(match[5])
        seconds = int(match[6]) if match[6] else 0
        meridiem = match[7].upper()
        if meridiem == "PM" and hours != 12:
            hours += 12
        elif meridiem == "AM" and hours == 12:
            hours = 0

    try:
        return round(datetime(year, month, day, hours, minutes, seconds).timestamp() * 1000)
    except (ValueError, OverflowError, OSError):
        # Not a calendar date, e.g. 02/30/2026 or 13:00 PM
        return 0


def past(ts: int, days: int | None = None, *, now: int) -> bool:
    """Whether ts lies before now, and no more than ``days`` days back if given."""
    if ts == 0:
        return False
    if days is None:
        return ts < now
    return now - days * MS_PER_DAY <= ts < now


def future(ts: int, days: int | None = None, *, now: int) -> bool:
    """Whether ts lies after now, and no more than ``days`` days ahead if given."""
    if ts == 0:
        return False
    if days is None:
        return ts > now
    return now < ts <= now + days * MS_PER_DAY


def today(ts: int, *, now: int) -> bool:
    """Whether ts falls on the same local calendar date as now."""
    if ts == 0:
        return False
    return datetime.fromtimestamp(ts / 1000).date() == datetime.fromtimestamp(now / 1000).date()
