"""Error types for notification grouping."""

from __future__ import annotations


class GroupingError(Exception):
    """Base error for the notification grouping core."""


class ActiveNotificationsUnavailableError(GroupingError):
    """Raised when live notifications are enumerated on a platform that cannot."""

    def __init__(self, sdk_int: int, required_sdk: int) -> None:
        """Initialize the error with the running and required platform versions."""
        super().__init__(
            f"active notification enumeration requires sdk >= {required_sdk}, running {sdk_int}"
        )
        self.sdk_int = sdk_int
        self.required_sdk = required_sdk


class NotificationDisplayError(GroupingError):
    """Raised by display adapters when a notification cannot be issued."""

    def __init__(self, notification_id: int, message: str) -> None:
        """Initialize the error with the notification id that failed."""
        super().__init__(message)
        self.notification_id = notification_id
