from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Generic, Protocol, Sequence, TypeVar

from .parsing import parse_flexible_date


class DeadlineLike(Protocol):
    """Anything with a ``due_date`` string: tasks, deadlines, courses."""

    @property
    def due_date(self) -> str | None: ...


T = TypeVar("T", bound=DeadlineLike)


@dataclass(frozen=True)
class ParsedDeadline(Generic[T]):
    original: T
    parsed_date: datetime


@dataclass(frozen=True)
class DeadlineStatus(Generic[T]):
    next_deadline: T | None = None
    closest_deadline: T | None = None
    is_finished: bool = False
    has_upcoming: bool = False


def parse_deadlines(deadlines: Sequence[T], *, today: date | None = None) -> list[ParsedDeadline[T]]:
    """Parse and sort deadlines ascending; unparsable ones are dropped.

    The sort is stable, so records sharing a timestamp keep input order.
    """
    parsed: list[ParsedDeadline[T]] = []
    for deadline in deadlines:
        parsed_date = parse_flexible_date(deadline.due_date, today=today)
        if parsed_date is not None:
            parsed.append(ParsedDeadline(original=deadline, parsed_date=parsed_date))
    return sorted(parsed, key=lambda item: item.parsed_date)


def partition_deadlines(
    deadlines: Sequence[T],
    *,
    today: date | None = None,
) -> tuple[list[T], list[T]]:
    """Split records into (dated, undated); undated is the TBD bucket."""
    dated = [item.original for item in parse_deadlines(deadlines, today=today)]
    dated_ids = {id(item) for item in dated}
    undated = [deadline for deadline in deadlines if id(deadline) not in dated_ids]
    return dated, undated


def get_deadline_status(deadlines: Sequence[T], *, today: date | None = None) -> DeadlineStatus[T]:
    if not deadlines:
        return DeadlineStatus()

    current_day = today or date.today()
    parsed = parse_deadlines(deadlines, today=current_day)
    if not parsed:
        return DeadlineStatus()

    upcoming = next(
        (item for item in parsed if item.parsed_date.date() >= current_day),
        None,
    )
    closest = upcoming or parsed[-1]

    return DeadlineStatus(
        next_deadline=upcoming.original if upcoming else None,
        closest_deadline=closest.original,
        is_finished=upcoming is None,
        has_upcoming=upcoming is not None,
    )
