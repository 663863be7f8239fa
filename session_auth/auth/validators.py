"""Credential guards run before the auth handlers.

Each guard returns a GuardResult. A result carrying a response ends the
request with that response; otherwise the handler continues, using any user
the guard resolved.
"""

from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict

from session_auth.auth import users
from session_auth.auth.session import (
    SessionStore,
    SessionUser,
    get_session_id,
    get_session_store,
)
from session_auth.auth.users import UserRecord
from session_auth.config import get_settings

USERNAME_TAKEN = "Username taken"
INVALID_CREDENTIALS = "Invalid credentials"
PASSWORD_TOO_SHORT = "Password must be longer than {} chars"
NOT_AUTHENTICATED = "You shall not pass!"


def message_response(status_code: int, message: str) -> JSONResponse:
    """Build a ``{"message": ...}`` JSON response."""
    return JSONResponse(status_code=status_code, content={"message": message})


class GuardResult(BaseModel):
    """Outcome of a guard: continue, or stop with ``response``."""
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    response: Optional[JSONResponse] = None
    user: Optional[UserRecord] = None

    @property
    def passed(self) -> bool:
        return self.response is None


PASS = GuardResult()


def fail(status_code: int, message: str) -> GuardResult:
    return GuardResult(response=message_response(status_code, message))


async def check_username_free(username: Optional[str]) -> GuardResult:
    """Reject registration if the username already belongs to a user."""
    if await users.find_by_username(username or ""):
        return fail(status.HTTP_422_UNPROCESSABLE_ENTITY, USERNAME_TAKEN)
    return PASS


async def check_username_exists(username: Optional[str]) -> GuardResult:
    """Resolve the stored user for a login, or reject with 401."""
    user = await users.find_by_username(username or "")
    if not user:
        return fail(status.HTTP_401_UNAUTHORIZED, INVALID_CREDENTIALS)
    return GuardResult(user=user)


def check_password_length(password: Optional[str]) -> GuardResult:
    """Reject passwords shorter than the configured minimum."""
    min_length = get_settings().min_password_length
    if len(password or "") < min_length:
        return fail(status.HTTP_422_UNPROCESSABLE_ENTITY, PASSWORD_TOO_SHORT.format(min_length - 1))
    return PASS


async def get_session_user_optional(
    request: Request,
    store: SessionStore = Depends(get_session_store),
) -> Optional[SessionUser]:
    """Get the user of the request's session, or None if anonymous."""
    return await store.read(get_session_id(request))


async def restricted(
    user: Optional[SessionUser] = Depends(get_session_user_optional),
) -> SessionUser:
    """Require an active session, raising 401 otherwise."""
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=NOT_AUTHENTICATED,
        )
    return user
