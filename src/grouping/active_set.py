"""Classify live notifications as summary, grouped, or groupless."""

from __future__ import annotations

import logging

from grouping.constants import GROUPLESS_SUMMARY_KEY
from grouping.display import ActiveNotificationSource, LiveDisplayEntry

logger = logging.getLogger(__name__)


def is_group_summary(entry: LiveDisplayEntry) -> bool:
    """Return True when the entry is the summary of its group."""
    return entry.is_summary


def is_groupless(entry: LiveDisplayEntry) -> bool:
    """Return True for a non-summary entry without an application group.

    Entries already folded under the groupless summary key still count as
    groupless so repeated passes see the whole synthetic group.
    """
    if is_group_summary(entry):
        return False
    return entry.group_key is None or entry.group_key == GROUPLESS_SUMMARY_KEY


def collect_groupless(source: ActiveNotificationSource) -> list[LiveDisplayEntry]:
    """Return groupless live entries in platform enumeration order.

    The caller must have checked that the platform can enumerate live
    notifications.
    """
    entries = source.get_active_notifications()
    groupless = [entry for entry in entries if is_groupless(entry)]
    logger.debug("Found %s groupless of %s active notifications.", len(groupless), len(entries))
    return groupless


def count_groupless(source: ActiveNotificationSource) -> int:
    """Return the number of groupless live entries."""
    return len(collect_groupless(source))
