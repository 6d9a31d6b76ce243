"""SQLAlchemy models for statuses and the records attached to them."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import relationship

from activity_notifications.infrastructure.database import Base
from activity_notifications.utils import now_utc


status_tag_table = Table(
    "status_tag",
    Base.metadata,
    Column(
        "status_id",
        Integer,
        ForeignKey("status.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "tag_id",
        Integer,
        ForeignKey("tag.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class StatusModel(Base):
    """Database representation of a status, optionally reblogging another one."""

    __tablename__ = "status"

    id = Column(Integer, primary_key=True, index=True)
    account_id = Column(
        Integer,
        ForeignKey("account.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    text = Column(Text, nullable=False, default="")
    reblog_of_id = Column(
        Integer,
        ForeignKey("status.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)

    account = relationship("AccountModel")
    reblog = relationship("StatusModel", remote_side=[id])
    media_attachments = relationship(
        "MediaAttachmentModel",
        order_by="MediaAttachmentModel.id",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    tags = relationship("TagModel", secondary=status_tag_table, order_by="TagModel.id")
    mentions = relationship(
        "MentionModel",
        back_populates="status",
        order_by="MentionModel.id",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class MediaAttachmentModel(Base):
    """File attached to a status."""

    __tablename__ = "media_attachment"

    id = Column(Integer, primary_key=True, index=True)
    status_id = Column(
        Integer,
        ForeignKey("status.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    url = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)


class TagModel(Base):
    """Hashtag used by statuses."""

    __tablename__ = "tag"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True)


__all__ = ["MediaAttachmentModel", "StatusModel", "TagModel", "status_tag_table"]
