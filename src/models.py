"""Data models for the notification ledger."""

from sqlalchemy import BigInteger, Boolean, Column, Index, Integer, String, Text
from sqlalchemy.orm import declarative_base

# SQLAlchemy base
Base = declarative_base()


class NotificationRecord(Base):
    """Ledger row for a notification received on this device.

    Rows are written by the ingestion path and read here for recency
    lookups. A NULL ``group_id`` means the application assigned no group.
    """

    __tablename__ = "notification"

    id = Column(Integer, primary_key=True)
    notification_id = Column(String(64), nullable=True)
    android_notification_id = Column(Integer, nullable=False)
    group_id = Column(String(200), nullable=True)
    collapse_id = Column(String(200), nullable=True)
    is_summary = Column(Boolean, nullable=False, default=False)
    opened = Column(Boolean, nullable=False, default=False)
    dismissed = Column(Boolean, nullable=False, default=False)
    title = Column(Text, nullable=True)
    message = Column(Text, nullable=True)
    created_time = Column(BigInteger, nullable=False)

    __table_args__ = (
        Index("notification_group_id_idx", "group_id"),
        Index("notification_android_notification_id_idx", "android_notification_id"),
        Index("notification_created_time_idx", "created_time"),
    )

    def __repr__(self) -> str:
        return (
            f"<NotificationRecord(android_notification_id={self.android_notification_id}, "
            f"group_id={self.group_id!r}, created_time={self.created_time})>"
        )
