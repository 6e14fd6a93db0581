from fastapi import APIRouter, Header, HTTPException, Request, status

from app.core.endpoint_rate_limit import EndpointRateLimitExceeded, enforce_endpoint_rate_limit
from app.core.rate_limit import client_key
from app.core.scoring import get_scoring_int
from app.core.security import check_api_key
from app.schemas.resume import ResumeAnalyzeRequest, ResumeAnalyzeResponse
from app.services.resume_service import ResumeInputError, analyze_resume

router = APIRouter()


def _enforce_resume_rate_limit(request: Request) -> None:
    limit = get_scoring_int("rate_limits.resume_analyze.limit", 5)
    window_seconds = get_scoring_int("rate_limits.resume_analyze.window_seconds", 60)
    try:
        enforce_endpoint_rate_limit(
            client_key=f"resume:{client_key(request)}",
            route_key=request.url.path,
            limit=limit,
            window_seconds=window_seconds,
        )
    except EndpointRateLimitExceeded as exc:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=str(exc),
            headers={"Retry-After": str(exc.retry_after_seconds)},
        ) from exc


@router.post("/resume/analyze", response_model=ResumeAnalyzeResponse)
async def resume_analyze(
    request: Request,
    payload: ResumeAnalyzeRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    check_api_key(x_api_key)
    _enforce_resume_rate_limit(request)
    try:
        return analyze_resume(payload)
    except ResumeInputError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
