from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from .parsing import parse_flexible_date
from .status import DeadlineLike

NO_DEADLINES_TEXT = "No deadlines"
UNDATED_TEXT = "Date TBD"


@dataclass(frozen=True)
class DeadlineDisplay:
    text: str
    days_until: int | None = None
    is_overdue: bool = False
    is_urgent: bool = False


def _short_date(value: datetime, current_day: date) -> str:
    label = f"{value:%b} {value.day}"
    if value.year != current_day.year:
        label = f"{label}, {value.year}"
    return label


def _relative_text(days: int) -> str | None:
    if days < 0:
        overdue = abs(days)
        return f"{overdue} day{'' if overdue == 1 else 's'} overdue"
    if days == 0:
        return "Due today"
    if days == 1:
        return "Due tomorrow"
    if days <= 7:
        return f"Due in {days} days"
    return None


def describe_deadline(deadline: DeadlineLike | None, *, today: date | None = None) -> DeadlineDisplay:
    """Classify a deadline relative to today and render its display text.

    Flags are derived from the day difference, not from the rendered text.
    """
    if deadline is None:
        return DeadlineDisplay(text=NO_DEADLINES_TEXT)

    current_day = today or date.today()
    parsed = parse_flexible_date(deadline.due_date, today=current_day)
    if parsed is None:
        return DeadlineDisplay(text=UNDATED_TEXT)

    days = (parsed.date() - current_day).days
    text = _relative_text(days) or _short_date(parsed, current_day)
    return DeadlineDisplay(
        text=text,
        days_until=days,
        is_overdue=days < 0,
        is_urgent=days in (0, 1),
    )


def format_deadline_display(deadline: DeadlineLike | None, *, today: date | None = None) -> str:
    return describe_deadline(deadline, today=today).text


def format_absolute_deadline_date(deadline: DeadlineLike, *, today: date | None = None) -> str | None:
    parsed = parse_flexible_date(deadline.due_date, today=today)
    if parsed is None:
        return None
    return f"{parsed:%b} {parsed.day}, {parsed.year}"


# The two checks below match substrings of format_deadline_display output.
def is_deadline_overdue(deadline_text: str) -> bool:
    return "overdue" in deadline_text


def is_deadline_urgent(deadline_text: str) -> bool:
    return "today" in deadline_text or "tomorrow" in deadline_text
