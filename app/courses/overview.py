from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Sequence

from app.deadlines import (
    DeadlineLike,
    DeadlineStatus,
    format_absolute_deadline_date,
    format_deadline_display,
    get_deadline_status,
)

from .status import CourseStatus, TaskLike, compute_course_progress, get_course_status


@dataclass(frozen=True)
class CourseOverview:
    progress_percentage: float
    tasks_count: int
    status: CourseStatus
    deadline_status: DeadlineStatus[Any]
    headline: str
    subtitle: str


def _title(record: Any) -> str | None:
    return getattr(record, "title", None) or None


def _subtitle(deadline_status: DeadlineStatus[Any], *, today: date) -> str:
    closest = deadline_status.closest_deadline
    if deadline_status.is_finished:
        if closest is None:
            return "Course timeline complete"
        last_date = format_absolute_deadline_date(closest, today=today)
        return f"Last deadline: {last_date or _title(closest)}"
    return (
        _title(deadline_status.next_deadline)
        or _title(closest)
        or "Add your first deadline"
    )


def build_course_overview(
    tasks: Sequence[TaskLike],
    deadlines: Sequence[DeadlineLike],
    *,
    progress_percentage: float | None = None,
    today: date | None = None,
) -> CourseOverview:
    """Compose the course page header: progress, status label and next deadline."""
    current_day = today or date.today()
    root_tasks = [task for task in tasks if not getattr(task, "parent_task_id", None)]
    progress = compute_course_progress(tasks) if progress_percentage is None else progress_percentage

    deadline_status = get_deadline_status(deadlines, today=current_day)
    if deadline_status.is_finished:
        headline = "Finished"
    else:
        headline = format_deadline_display(
            deadline_status.next_deadline or deadline_status.closest_deadline,
            today=current_day,
        )

    return CourseOverview(
        progress_percentage=progress,
        tasks_count=len(root_tasks),
        status=get_course_status(progress, deadlines, len(root_tasks), today=current_day),
        deadline_status=deadline_status,
        headline=headline,
        subtitle=_subtitle(deadline_status, today=current_day),
    )
