"""Grouping and summary recency for locally displayed notifications."""

from grouping.active_set import collect_groupless, count_groupless, is_group_summary, is_groupless
from grouping.capabilities import PlatformInfo
from grouping.constants import (
    ACTIVE_NOTIFICATIONS_MIN_SDK,
    GROUPLESS_SUMMARY_ID,
    GROUPLESS_SUMMARY_KEY,
    RECOVER_BUILDER_MIN_SDK,
)
from grouping.display import (
    ActiveNotificationSource,
    DisplayNotification,
    LiveDisplayEntry,
    NotificationAction,
    NotificationDisplay,
    NotificationPublisher,
)
from grouping.errors import (
    ActiveNotificationsUnavailableError,
    GroupingError,
    NotificationDisplayError,
)
from grouping.reassignment import (
    ReassignmentFailure,
    ReassignmentReport,
    reassign_groupless,
    resolve_groupless_overflow,
)
from grouping.recency import get_most_recent_active_id

__all__ = [
    "ACTIVE_NOTIFICATIONS_MIN_SDK",
    "ActiveNotificationSource",
    "ActiveNotificationsUnavailableError",
    "DisplayNotification",
    "GROUPLESS_SUMMARY_ID",
    "GROUPLESS_SUMMARY_KEY",
    "GroupingError",
    "LiveDisplayEntry",
    "NotificationAction",
    "NotificationDisplay",
    "NotificationDisplayError",
    "NotificationPublisher",
    "PlatformInfo",
    "RECOVER_BUILDER_MIN_SDK",
    "ReassignmentFailure",
    "ReassignmentReport",
    "collect_groupless",
    "count_groupless",
    "get_most_recent_active_id",
    "is_group_summary",
    "is_groupless",
    "reassign_groupless",
    "resolve_groupless_overflow",
]
