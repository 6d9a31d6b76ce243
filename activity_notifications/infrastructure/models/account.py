"""SQLAlchemy model for accounts."""

from sqlalchemy import Column, DateTime, Integer, String, UniqueConstraint

from activity_notifications.infrastructure.database import Base
from activity_notifications.utils import now_utc


class AccountModel(Base):
    """Database representation of an account that can cause notifications."""

    __tablename__ = "account"
    __table_args__ = (
        UniqueConstraint("username", "domain", name="uq_account_username_domain"),
    )

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(30), nullable=False)
    domain = Column(String(255), nullable=True)
    display_name = Column(String(100), nullable=False, default="")
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    updated_at = Column(
        DateTime(timezone=True), nullable=False, default=now_utc, onupdate=now_utc
    )


__all__ = ["AccountModel"]
