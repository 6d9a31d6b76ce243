"""SQLAlchemy models for the activities that notify an account."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from activity_notifications.infrastructure.database import Base
from activity_notifications.utils import now_utc


class MentionModel(Base):
    """Account mentioned inside a status."""

    __tablename__ = "mention"
    __table_args__ = (
        UniqueConstraint("account_id", "status_id", name="uq_mention_account_status"),
    )

    id = Column(Integer, primary_key=True, index=True)
    status_id = Column(
        Integer,
        ForeignKey("status.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    account_id = Column(
        Integer,
        ForeignKey("account.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)

    account = relationship("AccountModel")
    status = relationship("StatusModel", back_populates="mentions")


class FollowModel(Base):
    """Accepted follow from ``account_id`` to ``target_account_id``."""

    __tablename__ = "follow"
    __table_args__ = (
        UniqueConstraint(
            "account_id", "target_account_id", name="uq_follow_account_target"
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    account_id = Column(
        Integer, ForeignKey("account.id", ondelete="CASCADE"), nullable=False
    )
    target_account_id = Column(
        Integer,
        ForeignKey("account.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)

    account = relationship("AccountModel", foreign_keys=[account_id])


class FollowRequestModel(Base):
    """Follow awaiting approval by ``target_account_id``."""

    __tablename__ = "follow_request"
    __table_args__ = (
        UniqueConstraint(
            "account_id", "target_account_id", name="uq_follow_request_account_target"
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    account_id = Column(
        Integer, ForeignKey("account.id", ondelete="CASCADE"), nullable=False
    )
    target_account_id = Column(
        Integer,
        ForeignKey("account.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)

    account = relationship("AccountModel", foreign_keys=[account_id])


class FavouriteModel(Base):
    """Status favourited by ``account_id``."""

    __tablename__ = "favourite"
    __table_args__ = (
        UniqueConstraint("account_id", "status_id", name="uq_favourite_account_status"),
    )

    id = Column(Integer, primary_key=True, index=True)
    account_id = Column(
        Integer, ForeignKey("account.id", ondelete="CASCADE"), nullable=False
    )
    status_id = Column(
        Integer,
        ForeignKey("status.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)

    account = relationship("AccountModel")
    status = relationship("StatusModel")


__all__ = ["FavouriteModel", "FollowModel", "FollowRequestModel", "MentionModel"]
