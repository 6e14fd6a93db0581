from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Literal, Protocol, Sequence

from pydantic import BaseModel, ConfigDict

from app.deadlines import DeadlineLike, parse_native_date

StatusColor = Literal["green", "blue", "yellow", "red", "gray"]

_TEXT_CLASSES: dict[str, str] = {
    "green": "text-green-700",
    "blue": "text-blue-700",
    "yellow": "text-yellow-700",
    "red": "text-red-700",
    "gray": "text-gray-700",
}

_BG_CLASSES: dict[str, str] = {
    "green": "bg-green-50 border-green-200",
    "blue": "bg-blue-50 border-blue-200",
    "yellow": "bg-yellow-50 border-yellow-200",
    "red": "bg-red-50 border-red-200",
    "gray": "bg-gray-50 border-gray-200",
}


class CourseStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: str
    message: str
    color: StatusColor


class TaskLike(Protocol):
    @property
    def completed(self) -> bool: ...


@dataclass(frozen=True)
class StatusContext:
    progress: float
    days_until: int | None


@dataclass(frozen=True)
class StatusRule:
    band: str
    applies: Callable[[StatusContext], bool]
    result: CourseStatus


def _no_deadline(ctx: StatusContext) -> bool:
    return ctx.days_until is None


def _overdue(ctx: StatusContext) -> bool:
    return ctx.days_until is not None and ctx.days_until < 0


def _urgent(ctx: StatusContext) -> bool:
    return ctx.days_until is not None and ctx.days_until <= 7


def _buffered(ctx: StatusContext) -> bool:
    return ctx.days_until is not None and ctx.days_until > 7


def _long_buffer(ctx: StatusContext) -> bool:
    return ctx.days_until is not None and ctx.days_until > 30


def _status(status: str, message: str, color: StatusColor) -> CourseStatus:
    return CourseStatus(status=status, message=message, color=color)


# First matching rule wins: completed, no deadline, overdue, urgent, buffer.
COURSE_STATUS_RULES: tuple[StatusRule, ...] = (
    StatusRule(
        "completed",
        lambda c: c.progress == 100,
        _status("Completed", "Up to date! Great work!", "green"),
    ),
    StatusRule(
        "no_deadline",
        lambda c: _no_deadline(c) and c.progress == 0,
        _status("Getting Started", "Ready to begin? Add some tasks!", "gray"),
    ),
    StatusRule(
        "no_deadline",
        lambda c: _no_deadline(c) and c.progress < 30,
        _status("In Progress", "You're on your way!", "blue"),
    ),
    StatusRule(
        "no_deadline",
        lambda c: _no_deadline(c) and c.progress < 70,
        _status("Making Progress", "Keep the momentum going!", "blue"),
    ),
    StatusRule(
        "no_deadline",
        _no_deadline,
        _status("Nearly There", "Almost finished!", "green"),
    ),
    StatusRule(
        "overdue",
        lambda c: _overdue(c) and c.progress < 50,
        _status("Behind Schedule", "Time to catch up! Focus on priorities.", "red"),
    ),
    StatusRule(
        "overdue",
        lambda c: _overdue(c) and c.progress < 90,
        _status("Needs Attention", "Push through - you're almost there!", "red"),
    ),
    StatusRule(
        "overdue",
        _overdue,
        _status("Final Push", "So close! Finish strong!", "yellow"),
    ),
    StatusRule(
        "urgent",
        lambda c: _urgent(c) and c.progress < 30,
        _status("Needs Focus", "Deadline approaching - time to accelerate!", "red"),
    ),
    StatusRule(
        "urgent",
        lambda c: _urgent(c) and c.progress < 70,
        _status("Crunch Time", "Deadline near - stay focused!", "yellow"),
    ),
    StatusRule(
        "urgent",
        _urgent,
        _status("Final Sprint", "Almost done! You've got this!", "yellow"),
    ),
    StatusRule(
        "buffer",
        lambda c: _buffered(c) and c.progress == 0,
        _status("Just Starting", "Let's build momentum!", "gray"),
    ),
    StatusRule(
        "buffer",
        lambda c: _long_buffer(c) and c.progress < 25,
        _status("Early Days", "Plenty of time - stay consistent!", "blue"),
    ),
    StatusRule(
        "buffer",
        lambda c: _buffered(c) and c.progress < 25,
        _status("Getting Started", "Good pace, keep it up!", "blue"),
    ),
    StatusRule(
        "buffer",
        lambda c: _long_buffer(c) and c.progress < 50,
        _status("Ahead of Schedule", "Excellent progress!", "green"),
    ),
    StatusRule(
        "buffer",
        lambda c: _buffered(c) and c.progress < 50,
        _status("On Track", "Steady progress!", "blue"),
    ),
    StatusRule(
        "buffer",
        lambda c: _long_buffer(c) and c.progress < 75,
        _status("Way Ahead", "Outstanding work!", "green"),
    ),
    StatusRule(
        "buffer",
        lambda c: _buffered(c) and c.progress < 75,
        _status("On Track", "You're doing great!", "green"),
    ),
    StatusRule(
        "buffer",
        lambda c: _buffered(c) and c.progress < 90,
        _status("Nearly Complete", "The finish line is in sight!", "green"),
    ),
    StatusRule(
        "buffer",
        _buffered,
        _status("Final Touches", "Almost perfect - wrap it up!", "green"),
    ),
)


def days_until_nearest_deadline(
    deadlines: Sequence[DeadlineLike],
    *,
    today: date | None = None,
) -> int | None:
    """Days to the first upcoming deadline, else to the most recent past one.

    Only natively parsable dates count here; syllabus-style dates without a
    year are ignored.
    """
    current_day = today or date.today()
    day_counts: list[int] = []
    for deadline in deadlines:
        parsed = parse_native_date(deadline.due_date)
        if parsed is not None:
            day_counts.append((parsed.date() - current_day).days)

    if not day_counts:
        return None

    day_counts.sort()
    upcoming = next((days for days in day_counts if days >= 0), None)
    return upcoming if upcoming is not None else day_counts[-1]


def resolve_status_rule(progress: float, days_until: int | None) -> StatusRule:
    ctx = StatusContext(progress=progress, days_until=days_until)
    for rule in COURSE_STATUS_RULES:
        if rule.applies(ctx):
            return rule
    raise LookupError(f"No course status rule for progress={progress} days_until={days_until}")


def get_course_status(
    progress_percentage: float,
    deadlines: Sequence[DeadlineLike],
    tasks_count: int,
    *,
    today: date | None = None,
) -> CourseStatus:
    """Derive the course status label from task progress and deadline urgency.

    ``tasks_count`` is carried for context and does not affect the result.
    """
    days_until = days_until_nearest_deadline(deadlines, today=today)
    return resolve_status_rule(progress_percentage, days_until).result


def compute_course_progress(tasks: Sequence[TaskLike]) -> int:
    root_tasks = [task for task in tasks if not getattr(task, "parent_task_id", None)]
    if not root_tasks:
        return 0
    completed = sum(1 for task in root_tasks if task.completed)
    return int(completed / len(root_tasks) * 100 + 0.5)


def status_color_class(color: StatusColor) -> str:
    return _TEXT_CLASSES[color]


def status_bg_class(color: StatusColor) -> str:
    return _BG_CLASSES[color]
