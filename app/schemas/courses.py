from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field

from app.courses.status import StatusColor
from app.schemas.deadlines import DeadlineIn


class TaskIn(BaseModel):
    id: str | None = Field(default=None, max_length=100)
    title: str | None = Field(default=None, max_length=300)
    completed: bool = False
    parent_task_id: str | None = Field(
        default=None,
        max_length=100,
        validation_alias=AliasChoices("parent_task_id", "parentTaskId"),
    )
    due_date: str | None = Field(
        default=None,
        max_length=200,
        validation_alias=AliasChoices("due_date", "dueDate"),
    )


class CourseStatusRequest(BaseModel):
    tasks: list[TaskIn] = Field(default_factory=list, max_length=1000)
    deadlines: list[DeadlineIn] = Field(default_factory=list, max_length=500)
    progress_percentage: float | None = Field(
        default=None,
        ge=0.0,
        le=100.0,
        validation_alias=AliasChoices("progress_percentage", "progressPercentage"),
    )


class CourseStatusOut(BaseModel):
    status: str
    message: str
    color: StatusColor
    text_class: str
    bg_class: str


class CourseOverviewResponse(BaseModel):
    progress_percentage: float
    tasks_count: int
    status: CourseStatusOut
    next_deadline: DeadlineIn | None = None
    closest_deadline: DeadlineIn | None = None
    is_finished: bool = False
    headline: str
    subtitle: str
