from __future__ import annotations

import re
from datetime import date, datetime

from dateutil import parser as date_parser

# Two defaults that differ in every calendar field; a component the text does
# not name shows up as a difference between the two parses.
_DETECTION_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))

MONTHS = {
    "jan": 1,
    "january": 1,
    "feb": 2,
    "february": 2,
    "mar": 3,
    "march": 3,
    "apr": 4,
    "april": 4,
    "may": 5,
    "jun": 6,
    "june": 6,
    "jul": 7,
    "july": 7,
    "aug": 8,
    "august": 8,
    "sep": 9,
    "sept": 9,
    "september": 9,
    "oct": 10,
    "october": 10,
    "nov": 11,
    "november": 11,
    "dec": 12,
    "december": 12,
}

# "Mon. Nov. 24 @ 9:00am": optional weekday, month word, day of month.
_ACADEMIC_DATE_RE = re.compile(r"(?:\w+\.?\s+)?([A-Za-z]+)\.?\s+(\d{1,2})(?:\D|$)", re.ASCII)


def _to_local_naive(value: datetime) -> datetime | None:
    if value.tzinfo is None:
        return value
    try:
        return value.astimezone().replace(tzinfo=None)
    except (ValueError, OverflowError):
        return None


def parse_native_date(text: str | None) -> datetime | None:
    """Parse ISO 8601 and common English dates that name year, month and day.

    Returns a naive local datetime, or ``None`` when the text is not a full
    date. Timezone-aware inputs (``...Z``, ``+02:00``) are converted to local
    time.
    """
    normalized = (text or "").strip()
    if not normalized:
        return None

    try:
        first, second = (date_parser.parse(normalized, default=default) for default in _DETECTION_DEFAULTS)
    except (ValueError, OverflowError):
        return None

    if (first.year, first.month, first.day) != (second.year, second.month, second.day):
        return None
    return _to_local_naive(first)


def parse_academic_date(text: str, *, today: date | None = None) -> datetime | None:
    """Parse syllabus-style dates that omit the year, using the current year."""
    match = _ACADEMIC_DATE_RE.search(text)
    if not match:
        return None

    month = MONTHS.get(match.group(1).lower())
    if month is None:
        return None

    year = (today or date.today()).year
    try:
        return datetime(year, month, int(match.group(2)))
    except ValueError:
        return None


def parse_flexible_date(text: str | None, *, today: date | None = None) -> datetime | None:
    """Parse a loosely formatted due date.

    Native formats win; the academic fallback only runs when they fail.
    ``None`` is the invalid-date result and callers must check for it.
    """
    normalized = (text or "").strip()
    if not normalized:
        return None

    parsed = parse_native_date(normalized)
    if parsed is not None:
        return parsed
    return parse_academic_date(normalized, today=today)
