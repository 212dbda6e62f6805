"""Fold groupless notifications under the synthetic groupless summary key."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from grouping.active_set import collect_groupless, count_groupless
from grouping.constants import GROUPLESS_SUMMARY_KEY, RECOVER_BUILDER_MIN_SDK
from grouping.display import (
    DisplayNotification,
    LiveDisplayEntry,
    NotificationDisplay,
    NotificationPublisher,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReassignmentFailure:
    """Entry that could not be reissued under the groupless key."""

    notification_id: int
    error: str


@dataclass(frozen=True)
class ReassignmentReport:
    """Outcome of one reassignment pass."""

    reassigned_ids: list[int] = field(default_factory=list)
    failures: list[ReassignmentFailure] = field(default_factory=list)

    @property
    def failed_ids(self) -> list[int]:
        return [failure.notification_id for failure in self.failures]


def _rebuild_with_groupless_key(
    entry: LiveDisplayEntry, sdk_int: int | None
) -> DisplayNotification:
    """Recreate the entry's notification with the groupless summary key."""
    if sdk_int is not None and sdk_int < RECOVER_BUILDER_MIN_SDK:
        # No builder recovery below this version; only the group key survives.
        logger.warning(
            "Cannot recover notification content on sdk=%s; reissuing id=%s bare.",
            sdk_int,
            entry.notification_id,
        )
        return DisplayNotification(group_key=GROUPLESS_SUMMARY_KEY)
    return entry.notification.with_group(GROUPLESS_SUMMARY_KEY)


def reassign_groupless(
    publisher: NotificationPublisher,
    entries: Iterable[LiveDisplayEntry],
    sdk_int: int | None = None,
) -> ReassignmentReport:
    """Reissue each entry in place with the groupless summary key.

    Entries are independent: a failure to reissue one entry is logged and
    recorded, and the remaining entries are still processed.
    """
    reassigned: list[int] = []
    failures: list[ReassignmentFailure] = []
    for entry in entries:
        try:
            notification = _rebuild_with_groupless_key(entry, sdk_int)
            publisher.notify(entry.notification_id, notification)
        except Exception as exc:
            logger.exception(
                "Failed to reassign notification id=%s to the groupless group.",
                entry.notification_id,
                extra={"notification_id": entry.notification_id},
            )
            failures.append(
                ReassignmentFailure(notification_id=entry.notification_id, error=str(exc))
            )
            continue
        reassigned.append(entry.notification_id)

    if failures:
        logger.warning(
            "Groupless reassignment finished with %s failures out of %s entries.",
            len(failures),
            len(reassigned) + len(failures),
        )
    return ReassignmentReport(reassigned_ids=reassigned, failures=failures)


def resolve_groupless_overflow(
    display: NotificationDisplay,
    limit: int,
    sdk_int: int | None = None,
) -> ReassignmentReport | None:
    """Fold groupless notifications once their count reaches the visible limit.

    Returns None when the count is below the limit. The live set is read again
    before reassigning, so notifications that arrived after counting are
    folded as well.
    """
    count = count_groupless(display)
    if count < limit:
        logger.debug("Groupless count %s below limit %s; nothing to fold.", count, limit)
        return None

    entries = collect_groupless(display)
    logger.info(
        "Folding %s groupless notifications (limit=%s) under %s.",
        len(entries),
        limit,
        GROUPLESS_SUMMARY_KEY,
    )
    return reassign_groupless(display, entries, sdk_int=sdk_int)
