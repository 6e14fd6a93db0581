from .display import (
    DeadlineDisplay,
    describe_deadline,
    format_absolute_deadline_date,
    format_deadline_display,
    is_deadline_overdue,
    is_deadline_urgent,
)
from .parsing import parse_academic_date, parse_flexible_date, parse_native_date
from .status import (
    DeadlineLike,
    DeadlineStatus,
    ParsedDeadline,
    get_deadline_status,
    parse_deadlines,
    partition_deadlines,
)

__all__ = [
    "DeadlineLike",
    "DeadlineStatus",
    "ParsedDeadline",
    "get_deadline_status",
    "parse_deadlines",
    "partition_deadlines",
    "parse_flexible_date",
    "parse_native_date",
    "parse_academic_date",
    "DeadlineDisplay",
    "describe_deadline",
    "format_deadline_display",
    "format_absolute_deadline_date",
    "is_deadline_overdue",
    "is_deadline_urgent",
]
