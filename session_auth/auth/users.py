"""User storage backed by the users table."""

import logging
from typing import Optional

from pydantic import BaseModel

from session_auth.database import get_db

logger = logging.getLogger(__name__)


class PublicUser(BaseModel):
    """User fields that are safe to return to clients."""
    user_id: int
    username: str


class UserRecord(PublicUser):
    """Stored user, including the password hash."""
    password: str

    def public(self) -> PublicUser:
        return PublicUser(user_id=self.user_id, username=self.username)


async def find_by_username(username: str) -> Optional[UserRecord]:
    """Get a user, with password hash, by username."""
    async with get_db() as db:
        cursor = await db.execute(
            "SELECT id, username, password FROM users WHERE username = ?",
            (username,)
        )
        row = await cursor.fetchone()

    if row:
        return UserRecord(
            user_id=row["id"],
            username=row["username"],
            password=row["password"],
        )
    return None


async def find_by_id(user_id: int) -> Optional[PublicUser]:
    """Get a user by ID."""
    async with get_db() as db:
        cursor = await db.execute(
            "SELECT id, username FROM users WHERE id = ?", (user_id,)
        )
        row = await cursor.fetchone()

    if row:
        return PublicUser(user_id=row["id"], username=row["username"])
    return None


async def find_all() -> list[PublicUser]:
    """List all users ordered by ID."""
    async with get_db() as db:
        cursor = await db.execute("SELECT id, username FROM users ORDER BY id")
        rows = await cursor.fetchall()

    return [PublicUser(user_id=row["id"], username=row["username"]) for row in rows]


async def insert(username: str, password_hash: str) -> PublicUser:
    """Create a user and return it as stored.

    The username must already have been checked as free; a duplicate still
    fails on the UNIQUE constraint and the IntegrityError propagates.
    """
    async with get_db() as db:
        cursor = await db.execute(
            """INSERT INTO users (username, password)
               VALUES (?, ?)
               RETURNING id""",
            (username, password_hash)
        )
        row = await cursor.fetchone()
        await db.commit()

    logger.info(f"Created user {row['id']} ({username})")
    return await find_by_id(row["id"])
