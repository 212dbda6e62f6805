"""Platform capability checks for notification grouping."""

from __future__ import annotations

from dataclasses import dataclass

from grouping.constants import ACTIVE_NOTIFICATIONS_MIN_SDK, RECOVER_BUILDER_MIN_SDK
from grouping.errors import ActiveNotificationsUnavailableError


@dataclass(frozen=True)
class PlatformInfo:
    """Version information for the platform hosting the display subsystem."""

    sdk_int: int

    @property
    def supports_active_notifications(self) -> bool:
        return self.sdk_int >= ACTIVE_NOTIFICATIONS_MIN_SDK

    @property
    def supports_builder_recovery(self) -> bool:
        return self.sdk_int >= RECOVER_BUILDER_MIN_SDK

    def require_active_notifications(self) -> None:
        """Raise when the platform cannot enumerate live notifications."""
        if not self.supports_active_notifications:
            raise ActiveNotificationsUnavailableError(
                self.sdk_int, ACTIVE_NOTIFICATIONS_MIN_SDK
            )
