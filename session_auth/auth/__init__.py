"""Authentication module."""

from session_auth.auth.session import (
    SessionStore,
    SessionStoreError,
    SessionUser,
    get_session_store,
)
from session_auth.auth.validators import (
    get_session_user_optional,
    restricted,
)

__all__ = [
    "SessionStore",
    "SessionStoreError",
    "SessionUser",
    "get_session_store",
    "get_session_user_optional",
    "restricted",
]
