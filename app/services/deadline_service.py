from __future__ import annotations

import logging
from datetime import date

from app.deadlines import describe_deadline, get_deadline_status, partition_deadlines
from app.deadlines.display import DeadlineDisplay
from app.schemas.deadlines import (
    DeadlineDisplayOut,
    DeadlineDisplayRequest,
    DeadlineStatusRequest,
    DeadlineStatusResponse,
)

logger = logging.getLogger(__name__)


def to_display_out(display: DeadlineDisplay) -> DeadlineDisplayOut:
    return DeadlineDisplayOut(
        text=display.text,
        days_until=display.days_until,
        is_overdue=display.is_overdue,
        is_urgent=display.is_urgent,
    )


def summarize_deadlines(payload: DeadlineStatusRequest, *, today: date | None = None) -> DeadlineStatusResponse:
    current_day = today or date.today()
    deadline_status = get_deadline_status(payload.deadlines, today=current_day)
    dated, undated = partition_deadlines(payload.deadlines, today=current_day)
    display = describe_deadline(
        deadline_status.next_deadline or deadline_status.closest_deadline,
        today=current_day,
    )

    logger.info(
        "deadline_status_computed total=%s parsed=%s has_upcoming=%s is_finished=%s",
        len(payload.deadlines),
        len(dated),
        deadline_status.has_upcoming,
        deadline_status.is_finished,
    )

    return DeadlineStatusResponse(
        next_deadline=deadline_status.next_deadline,
        closest_deadline=deadline_status.closest_deadline,
        is_finished=deadline_status.is_finished,
        has_upcoming=deadline_status.has_upcoming,
        display=to_display_out(display),
        parsed_count=len(dated),
        tbd=undated,
    )


def display_deadline(payload: DeadlineDisplayRequest, *, today: date | None = None) -> DeadlineDisplayOut:
    return to_display_out(describe_deadline(payload, today=today))
