"""Server-side session storage and the session cookie."""

import json
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

import aiosqlite
from fastapi import Request, Response
from pydantic import BaseModel

from session_auth.config import get_settings
from session_auth.database import get_database

logger = logging.getLogger(__name__)


class SessionStoreError(RuntimeError):
    """Raised when the session store cannot complete an operation."""


class SessionUser(BaseModel):
    """Copy of the authenticated user kept in a session."""
    user_id: int
    username: str


def _now() -> datetime:
    return datetime.now(timezone.utc)


class SessionStore:
    """Sessions persisted in the sessions table.

    Session IDs are random and opaque. Every session expires
    ``max_age_seconds`` after creation; an expired session reads as absent.
    """

    def __init__(self, max_age_seconds: int):
        self.max_age_seconds = max_age_seconds

    async def create(self, user: SessionUser) -> str:
        """Start a session for ``user`` and return its ID."""
        sid = secrets.token_urlsafe(32)
        now = _now()
        expires_at = now + timedelta(seconds=self.max_age_seconds)

        db = await get_database()
        await db.execute(
            """INSERT INTO sessions (sid, user_id, data, created_at, expires_at)
               VALUES (?, ?, ?, ?, ?)""",
            (sid, user.user_id, user.model_dump_json(), now.isoformat(), expires_at.isoformat())
        )
        await db.commit()
        return sid

    async def read(self, sid: Optional[str]) -> Optional[SessionUser]:
        """Return the session's user, or None if missing or expired."""
        if not sid:
            return None

        db = await get_database()
        cursor = await db.execute(
            "SELECT data, expires_at FROM sessions WHERE sid = ?", (sid,)
        )
        row = await cursor.fetchone()
        if not row:
            return None

        if datetime.fromisoformat(row["expires_at"]) <= _now():
            try:
                await self.destroy(sid)
            except SessionStoreError as e:
                logger.warning(f"Could not remove expired session: {e}")
            return None

        return SessionUser(**json.loads(row["data"]))

    async def destroy(self, sid: str) -> None:
        """Delete a session. Deleting an unknown session is a no-op."""
        try:
            db = await get_database()
            await db.execute("DELETE FROM sessions WHERE sid = ?", (sid,))
            await db.commit()
        except aiosqlite.Error as e:
            raise SessionStoreError(f"Could not destroy session: {e}") from e

    async def cleanup_expired(self) -> int:
        """Delete all expired sessions and return how many were removed."""
        db = await get_database()
        cursor = await db.execute(
            "DELETE FROM sessions WHERE expires_at <= ? RETURNING sid",
            (_now().isoformat(),)
        )
        deleted = await cursor.fetchall()
        await db.commit()
        return len(deleted)


_session_store: Optional[SessionStore] = None


def get_session_store() -> SessionStore:
    """Get the shared session store."""
    global _session_store

    if _session_store is None:
        _session_store = SessionStore(get_settings().session_max_age_seconds)
    return _session_store


def get_session_id(request: Request) -> Optional[str]:
    """Read the session ID from the request cookie."""
    return request.cookies.get(get_settings().session_cookie_name)


def set_session_cookie(response: Response, sid: str) -> None:
    """Attach the session cookie to a response."""
    settings = get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=sid,
        max_age=settings.session_max_age_seconds,
        httponly=settings.session_cookie_httponly,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )


def clear_session_cookie(response: Response) -> None:
    """Remove the session cookie from the client."""
    settings = get_settings()
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=settings.session_cookie_httponly,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
