"""
Main routes untuk aplikasi
"""
from fastapi import APIRouter

from agent_permissions.api.config import settings

router = APIRouter()


@router.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": settings.API_TITLE,
        "status": "running",
        "version": settings.API_VERSION,
        "features": [
            "robots.txt gated landing page snapshot",
            "Existing .well-known policy lookup",
            "Model drafted agent-permissions.json",
            "Policy builder and explainer"
        ]
    }
