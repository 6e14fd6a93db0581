from .overview import CourseOverview, build_course_overview
from .status import (
    COURSE_STATUS_RULES,
    CourseStatus,
    StatusRule,
    compute_course_progress,
    days_until_nearest_deadline,
    get_course_status,
    resolve_status_rule,
    status_bg_class,
    status_color_class,
)

__all__ = [
    "COURSE_STATUS_RULES",
    "CourseStatus",
    "StatusRule",
    "compute_course_progress",
    "days_until_nearest_deadline",
    "get_course_status",
    "resolve_status_rule",
    "status_bg_class",
    "status_color_class",
    "CourseOverview",
    "build_course_overview",
]
