"""Resolve the most recent active notification of a group from the ledger."""

from __future__ import annotations

import logging
from contextlib import closing

from sqlalchemy import select
from sqlalchemy.orm import Session

from grouping.constants import GROUPLESS_SUMMARY_KEY
from models import NotificationRecord

logger = logging.getLogger(__name__)


def _build_most_recent_query(group: str | None, groupless: bool):
    """Build the query for the newest active, non-summary record of a group."""
    if groupless:
        # Groupless rows are stored without a group in the ledger.
        group_filter = NotificationRecord.group_id.is_(None)
    else:
        group_filter = NotificationRecord.group_id == group
    return (
        select(NotificationRecord.android_notification_id)
        .where(group_filter)
        .where(NotificationRecord.dismissed.is_(False))
        .where(NotificationRecord.opened.is_(False))
        .where(NotificationRecord.is_summary.is_(False))
        .order_by(
            NotificationRecord.created_time.desc(),
            NotificationRecord.android_notification_id.desc(),
        )
        .limit(1)
    )


def get_most_recent_active_id(
    session: Session,
    group: str | None,
    groupless: bool,
) -> int | None:
    """Return the display id of the newest active notification in a group.

    Active means neither dismissed nor opened; summaries are excluded. When
    ``groupless`` is set the ``group`` argument is ignored and records without
    a group are matched. Ties on ``created_time`` resolve to the highest
    display id.

    Ledger failures are logged and reported as None, which callers treat as
    "nothing left to summarize".
    """
    if not groupless and group == GROUPLESS_SUMMARY_KEY:
        groupless = True
    if not groupless and group is None:
        logger.warning("Most recent notification lookup requires a group key.")
        return None

    try:
        query = _build_most_recent_query(group, groupless)
        with closing(session.execute(query)) as result:
            row = result.first()
    except Exception:
        logger.exception(
            "Error getting android notification id for summary notification group: %s",
            group,
            extra={"group_key": group},
        )
        return None

    if row is None:
        return None
    return row[0]
