from fastapi import APIRouter, Depends

from resumatch.api.deps import get_app_settings, get_llm_client
from resumatch.core.config import Settings
from resumatch.schemas.health import HealthResponse, StatusResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: Settings = Depends(get_app_settings),
    llm_client=Depends(get_llm_client),
) -> HealthResponse:
    configured = llm_client is not None
    return HealthResponse(
        status="healthy" if configured else "degraded",
        llm_configured=configured,
        model=settings.gemini_model,
        version=settings.app_version,
    )


@router.get("/status", response_model=StatusResponse)
async def liveness() -> StatusResponse:
    return StatusResponse(status="ok")
