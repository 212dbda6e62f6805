"""Composition of the grouping operations for notification lifecycle callers."""

from __future__ import annotations

import logging
from typing import Callable

from sqlalchemy.orm import Session

from config import settings
from grouping.active_set import collect_groupless, count_groupless
from grouping.capabilities import PlatformInfo
from grouping.display import LiveDisplayEntry, NotificationDisplay
from grouping.reassignment import ReassignmentReport, resolve_groupless_overflow
from grouping.recency import get_most_recent_active_id
from services.database import get_sync_session, session_scope

logger = logging.getLogger(__name__)


class NotificationGroupingService:
    """Entry point for groupless folding and summary recency lookups."""

    def __init__(
        self,
        display: NotificationDisplay,
        platform: PlatformInfo,
        max_visible_notifications: int,
        session_factory: Callable[[], Session] | None = None,
    ) -> None:
        """Initialize the service with its display, platform, and ledger access."""
        if max_visible_notifications < 1:
            raise ValueError("max_visible_notifications must be >= 1.")
        self._display = display
        self._platform = platform
        self._limit = max_visible_notifications
        self._session_factory = session_factory or get_sync_session

    @classmethod
    def from_settings(
        cls,
        display: NotificationDisplay,
        platform: PlatformInfo,
        session_factory: Callable[[], Session] | None = None,
    ) -> "NotificationGroupingService":
        """Build a service using the configured visible notification limit."""
        return cls(
            display,
            platform,
            settings.grouping.max_visible_notifications,
            session_factory=session_factory,
        )

    @property
    def max_visible_notifications(self) -> int:
        return self._limit

    def groupless_count(self) -> int:
        """Count live groupless notifications; requires enumeration support."""
        self._platform.require_active_notifications()
        return count_groupless(self._display)

    def groupless_entries(self) -> list[LiveDisplayEntry]:
        """Collect live groupless notifications; requires enumeration support."""
        self._platform.require_active_notifications()
        return collect_groupless(self._display)

    def fold_groupless_overflow(self) -> ReassignmentReport | None:
        """Fold groupless notifications when they reach the visible limit."""
        if not self._platform.supports_active_notifications:
            logger.info(
                "Skipping groupless folding; sdk=%s cannot enumerate active notifications.",
                self._platform.sdk_int,
            )
            return None
        return resolve_groupless_overflow(
            self._display,
            self._limit,
            sdk_int=self._platform.sdk_int,
        )

    def most_recent_active_id(self, group: str | None, groupless: bool = False) -> int | None:
        """Return the display id whose content should back the group's summary."""
        try:
            with session_scope(self._session_factory) as session:
                return get_most_recent_active_id(session, group, groupless)
        except Exception:
            logger.exception("Failed to open ledger session for group: %s", group)
            return None
