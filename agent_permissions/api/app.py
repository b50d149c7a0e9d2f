"""
FastAPI application factory dan configuration
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agent_permissions.api.config import settings
from agent_permissions.api.routes import generate, health, policy, root


# Setup logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Factory function untuk membuat FastAPI app"""
    app = FastAPI(
        title=settings.API_TITLE,
        description=settings.API_DESCRIPTION,
        version=settings.API_VERSION
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(root.router)
    app.include_router(health.router)
    app.include_router(generate.router)
    app.include_router(policy.router)

    if not settings.GOOGLE_API_KEY:
        logger.warning("GOOGLE_API_KEY is not set; /api/v1/generate will be rejected")

    return app
