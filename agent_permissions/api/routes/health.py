"""
Routes untuk health check
"""
from fastapi import APIRouter, Depends

from agent_permissions.api.config import Settings
from agent_permissions.api.dependencies import get_settings
from agent_permissions.api.models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/api/v1/health", response_model=HealthResponse)
async def health_check(app_settings: Settings = Depends(get_settings)):
    """Report whether the model credential and the standard are available"""
    credential_configured = bool(app_settings.GOOGLE_API_KEY)
    standard_loaded = app_settings.load_standard() is not None

    return HealthResponse(
        status="healthy" if credential_configured else "degraded",
        credential_configured=credential_configured,
        standard_loaded=standard_loaded,
        llm_model=app_settings.LLM_MODEL
    )
