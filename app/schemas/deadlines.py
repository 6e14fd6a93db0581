from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, BaseModel, Field

Priority = Literal["low", "medium", "high"]


class DeadlineIn(BaseModel):
    id: str | None = Field(default=None, max_length=100)
    course_id: str | None = Field(
        default=None,
        max_length=100,
        validation_alias=AliasChoices("course_id", "courseId"),
    )
    title: str | None = Field(default=None, max_length=300)
    due_date: str | None = Field(
        default=None,
        max_length=200,
        validation_alias=AliasChoices("due_date", "dueDate"),
    )
    priority: Priority | None = None
    description: str | None = Field(default=None, max_length=2000)


class DeadlineDisplayOut(BaseModel):
    text: str
    days_until: int | None = None
    is_overdue: bool = False
    is_urgent: bool = False


class DeadlineDisplayRequest(BaseModel):
    due_date: str | None = Field(
        default=None,
        max_length=200,
        validation_alias=AliasChoices("due_date", "dueDate"),
    )


class DeadlineStatusRequest(BaseModel):
    deadlines: list[DeadlineIn] = Field(default_factory=list, max_length=500)


class DeadlineStatusResponse(BaseModel):
    next_deadline: DeadlineIn | None = None
    closest_deadline: DeadlineIn | None = None
    is_finished: bool = False
    has_upcoming: bool = False
    display: DeadlineDisplayOut
    parsed_count: int = Field(default=0, ge=0)
    tbd: list[DeadlineIn] = Field(default_factory=list)
