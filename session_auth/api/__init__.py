"""API endpoints module."""

from fastapi import APIRouter

from session_auth.auth.routes import router as auth_router
from session_auth.api.users import router as users_router

api_router = APIRouter(prefix="/api")

api_router.include_router(auth_router)
api_router.include_router(users_router)

__all__ = ["api_router"]
