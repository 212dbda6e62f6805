"""Services module for the notification grouping core."""

from services.database import check_connection, get_sync_session, session_scope

__all__ = [
    "check_connection",
    "get_sync_session",
    "session_scope",
]
