from __future__ import annotations

import logging
from datetime import date

from app.courses import build_course_overview, status_bg_class, status_color_class
from app.schemas.courses import CourseOverviewResponse, CourseStatusOut, CourseStatusRequest

logger = logging.getLogger(__name__)


def course_overview(payload: CourseStatusRequest, *, today: date | None = None) -> CourseOverviewResponse:
    overview = build_course_overview(
        payload.tasks,
        payload.deadlines,
        progress_percentage=payload.progress_percentage,
        today=today,
    )
    status = overview.status

    logger.info(
        "course_status_computed progress=%s tasks=%s deadlines=%s status=%s",
        overview.progress_percentage,
        overview.tasks_count,
        len(payload.deadlines),
        status.status,
    )

    return CourseOverviewResponse(
        progress_percentage=overview.progress_percentage,
        tasks_count=overview.tasks_count,
        status=CourseStatusOut(
            status=status.status,
            message=status.message,
            color=status.color,
            text_class=status_color_class(status.color),
            bg_class=status_bg_class(status.color),
        ),
        next_deadline=overview.deadline_status.next_deadline,
        closest_deadline=overview.deadline_status.closest_deadline,
        is_finished=overview.deadline_status.is_finished,
        headline=overview.headline,
        subtitle=overview.subtitle,
    )
