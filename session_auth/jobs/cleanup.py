"""Expired session cleanup job."""

import logging

from session_auth.auth.session import get_session_store

logger = logging.getLogger(__name__)


async def run_session_cleanup() -> int:
    """Delete sessions past their expiry."""
    removed = await get_session_store().cleanup_expired()
    if removed:
        logger.info(f"Session cleanup removed {removed} expired sessions")
    return removed
