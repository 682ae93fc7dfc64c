"""
API Routers - FastAPI endpoint definitions.
"""

from konektz.presentation.api.auth import router as auth_router
from konektz.presentation.api.conversations import router as conversations_router
from konektz.presentation.api.health import router as health_router

__all__ = [
    "auth_router",
    "conversations_router",
    "health_router",
]
