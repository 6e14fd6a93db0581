from fastapi import APIRouter, Header, Request

from app.core.rate_limit import rate_limit
from app.core.security import check_api_key
from app.schemas.courses import CourseOverviewResponse, CourseStatusRequest
from app.services.course_service import course_overview

router = APIRouter()


@router.post("/courses/status", response_model=CourseOverviewResponse)
@rate_limit()
async def courses_status(
    request: Request,
    payload: CourseStatusRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key)
    return course_overview(payload)
