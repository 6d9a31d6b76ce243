"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from activity_notifications.infrastructure.database import Base
from activity_notifications.utils import now_utc


class NotificationModel(Base):
    """Database representation of a notification.

    ``activity_type``/``activity_id`` form a polymorphic reference without a
    foreign key; the referenced row may disappear before the notification does.
    """

    __tablename__ = "notification"
    __table_args__ = (
        UniqueConstraint(
            "account_id",
            "activity_type",
            "activity_id",
            name="uq_notification_account_activity",
        ),
        Index("ix_notification_activity", "activity_type", "activity_id"),
    )

    id = Column(Integer, primary_key=True, index=True)
    account_id = Column(
        Integer,
        ForeignKey("account.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    from_account_id = Column(
        Integer,
        ForeignKey("account.id", ondelete="CASCADE"),
        nullable=True,
    )
    activity_type = Column(String(30), nullable=False)
    activity_id = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    updated_at = Column(
        DateTime(timezone=True), nullable=False, default=now_utc, onupdate=now_utc
    )

    from_account = relationship("AccountModel", foreign_keys=[from_account_id])


__all__ = ["NotificationModel"]
