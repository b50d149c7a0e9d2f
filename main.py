"""
Entry point untuk Agent Permissions Playground API
"""
import uvicorn

from agent_permissions.api.app import create_app
from agent_permissions.api.config import settings

# Create FastAPI app instance
app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD
    )
