"""Live notification values and the display subsystem interface."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Protocol, Sequence


@dataclass(frozen=True)
class NotificationAction:
    """Action button attached to a notification."""

    identifier: str
    title: str
    icon: str | None = None


@dataclass(frozen=True)
class DisplayNotification:
    """Built notification as handed to, or read back from, the display subsystem."""

    group_key: str | None = None
    is_summary: bool = False
    title: str | None = None
    text: str | None = None
    small_icon: str | None = None
    channel_id: str | None = None
    priority: int = 0
    only_alert_once: bool = False
    actions: tuple[NotificationAction, ...] = ()
    extras: Mapping[str, Any] = field(default_factory=dict)

    def with_group(self, group_key: str | None) -> "DisplayNotification":
        """Return a copy of this notification with only the group key replaced."""
        return replace(self, group_key=group_key)


@dataclass(frozen=True)
class LiveDisplayEntry:
    """Notification currently shown by the platform, keyed by its display id."""

    notification_id: int
    notification: DisplayNotification
    tag: str | None = None
    posted_at: int | None = None

    @property
    def group_key(self) -> str | None:
        return self.notification.group_key

    @property
    def is_summary(self) -> bool:
        return self.notification.is_summary


class ActiveNotificationSource(Protocol):
    """Protocol for reading the live notification set."""

    def get_active_notifications(self) -> Sequence[LiveDisplayEntry]:
        """Return every notification the platform is currently showing."""
        ...


class NotificationPublisher(Protocol):
    """Protocol for issuing notifications to the display subsystem."""

    def notify(self, notification_id: int, notification: DisplayNotification) -> None:
        """Show a notification, replacing any live one with the same id."""
        ...


class NotificationDisplay(ActiveNotificationSource, NotificationPublisher, Protocol):
    """Display subsystem that can both enumerate and issue notifications."""
