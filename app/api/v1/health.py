from fastapi import APIRouter

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check that the planner API is up.")
async def health_check() -> dict[str, str]:
    return {"status": "healthy"}
