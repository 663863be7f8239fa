"""User API endpoints."""

from fastapi import APIRouter, Depends

from session_auth.auth import users
from session_auth.auth.session import SessionUser
from session_auth.auth.users import PublicUser
from session_auth.auth.validators import restricted

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[PublicUser])
async def list_users(user: SessionUser = Depends(restricted)):
    """List registered users. Requires an active session."""
    return await users.find_all()
