from fastapi import APIRouter, Header, Request

from app.core.rate_limit import rate_limit
from app.core.security import check_api_key
from app.schemas.deadlines import (
    DeadlineDisplayOut,
    DeadlineDisplayRequest,
    DeadlineStatusRequest,
    DeadlineStatusResponse,
)
from app.services.deadline_service import display_deadline, summarize_deadlines

router = APIRouter()


@router.post("/deadlines/status", response_model=DeadlineStatusResponse)
@rate_limit()
async def deadlines_status(
    request: Request,
    payload: DeadlineStatusRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key)
    return summarize_deadlines(payload)


@router.post("/deadlines/display", response_model=DeadlineDisplayOut)
@rate_limit()
async def deadlines_display(
    request: Request,
    payload: DeadlineDisplayRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key)
    return display_deadline(payload)
