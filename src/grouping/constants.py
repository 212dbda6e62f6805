"""Shared constants for notification grouping."""

from __future__ import annotations

GROUPLESS_SUMMARY_KEY = "os_group_undefined"
"""Reserved group key for the synthetic group that collects groupless notifications."""

GROUPLESS_SUMMARY_ID = -718463522
"""Display id of the summary notification shown for the groupless group."""

ACTIVE_NOTIFICATIONS_MIN_SDK = 23
"""First platform version that can enumerate live notifications."""

RECOVER_BUILDER_MIN_SDK = 24
"""First platform version that can rebuild a notification from a live one."""
