"""
API routes module

Module ini berisi semua route handlers untuk API endpoints.
"""

from . import generate, health, policy, root

# Import routers untuk mudah diakses
from .generate import router as generate_router
from .health import router as health_router
from .policy import router as policy_router
from .root import router as root_router

__all__ = [
    # Modules
    'generate',
    'health',
    'policy',
    'root',

    # Routers
    'generate_router',
    'health_router',
    'policy_router',
    'root_router'
]
