"""Date normalization for as-of-date parameters and repeal descriptions."""

import re
from datetime import date, datetime

from engine.exceptions import FormatError

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Repeal phrasing in document descriptions, tried in order.
# "Prenehal veljati 31.12.2019", "Razveljavljena 01.07.2008", "2019-12-31"
REPEAL_DATE_PATTERNS: list[re.Pattern] = [
    re.compile(r"Prenehal\s+veljati\s+(\d{2})\.(\d{2})\.(\d{4})", re.IGNORECASE),
    re.compile(r"Razveljavljen[a]?\s+(\d{2})\.(\d{2})\.(\d{4})", re.IGNORECASE),
    re.compile(r"(\d{4})-(\d{2})-(\d{2})"),
]


def _is_calendar_date(value: str) -> bool:
    try:
        parsed = datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return False
    return parsed.isoformat() == value


def normalize_date(value: str | None) -> str | None:
    """Validate and canonicalize an ISO date string.

    Blank or missing input returns None so the caller can substitute today.

    Raises:
        FormatError: If the value is not YYYY-MM-DD or not a real calendar
            date (e.g. "2021-02-30").
    """
    if value is None:
        return None
    trimmed = value.strip()
    if not trimmed:
        return None
    if not ISO_DATE_PATTERN.match(trimmed) or not _is_calendar_date(trimmed):
        raise FormatError("date must be an ISO date in YYYY-MM-DD format")
    return trimmed


def today_iso() -> str:
    """Return today's date as YYYY-MM-DD."""
    return date.today().isoformat()


def extract_repeal_date(description: str | None) -> str | None:
    """Find a repeal date in a free-text document description.

    Returns the first match converted to YYYY-MM-DD, or None. Matched dates
    are not checked against the calendar.
    """
    if not description:
        return None

    for pattern in REPEAL_DATE_PATTERNS:
        match = pattern.search(description)
        if match is None:
            continue
        if ISO_DATE_PATTERN.match(match.group(0)):
            return match.group(0)
        day, month, year = match.groups()
        return f"{year}-{month}-{day}"

    return None
