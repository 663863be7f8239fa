"""Authentication routes."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import BaseModel

from session_auth.auth import users
from session_auth.auth.passwords import hash_password, verify_password
from session_auth.auth.session import (
    SessionStore,
    SessionStoreError,
    SessionUser,
    clear_session_cookie,
    get_session_id,
    get_session_store,
    set_session_cookie,
)
from session_auth.auth.users import PublicUser
from session_auth.auth.validators import (
    INVALID_CREDENTIALS,
    check_password_length,
    check_username_exists,
    check_username_free,
    message_response,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])


class Credentials(BaseModel):
    """Login request body. Missing fields fail the guards."""
    username: Optional[str] = None
    password: Optional[str] = None


class Registration(Credentials):
    """Register request body. A missing password fails the length guard."""
    username: str


class MessageResponse(BaseModel):
    message: str


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=PublicUser,
)
async def register(credentials: Registration):
    """Create a user with a hashed password."""
    result = await check_username_free(credentials.username)
    if not result.passed:
        return result.response

    result = check_password_length(credentials.password)
    if not result.passed:
        return result.response

    password_hash = hash_password(credentials.password)
    user = await users.insert(credentials.username, password_hash)
    logger.info(f"Registered user {user.username}")
    return user


@router.post("/login", response_model=MessageResponse)
async def login(
    credentials: Credentials,
    request: Request,
    response: Response,
    store: SessionStore = Depends(get_session_store),
):
    """Verify credentials and start a session."""
    result = await check_username_exists(credentials.username)
    if not result.passed:
        logger.info("Login rejected: unknown username")
        return result.response

    user = result.user
    if not verify_password(credentials.password or "", user.password):
        logger.warning(f"Login rejected: bad password for {user.username}")
        return message_response(status.HTTP_401_UNAUTHORIZED, INVALID_CREDENTIALS)

    # One session per client: replace any session the request already carries
    old_sid = get_session_id(request)
    if old_sid:
        await store.destroy(old_sid)

    sid = await store.create(SessionUser(**user.public().model_dump()))
    set_session_cookie(response, sid)
    logger.info(f"User {user.username} logged in")
    return {"message": f"Welcome {user.username}!"}


@router.get("/logout", response_model=MessageResponse)
async def logout(
    request: Request,
    response: Response,
    store: SessionStore = Depends(get_session_store),
):
    """End the current session, if there is one."""
    sid = get_session_id(request)
    user = await store.read(sid)
    if not user:
        return {"message": "no session"}

    try:
        await store.destroy(sid)
    except SessionStoreError as e:
        # Reported with a 200 status, matching the established API
        logger.error(f"Logout failed for {user.username}: {e}")
        return {"message": "something went wrong"}

    clear_session_cookie(response)
    logger.info(f"User {user.username} logged out")
    return {"message": "logged out"}
