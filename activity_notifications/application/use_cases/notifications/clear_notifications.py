"""Use cases removing notifications."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from activity_notifications.domain.entities import ActivityRef
from activity_notifications.infrastructure.repositories import NotificationRepository

logger = logging.getLogger(__name__)


def clear_notifications(session: Session, *, account_id: int) -> int:
    """Delete every notification received by ``account_id``."""

    deleted = NotificationRepository(session).delete_for_account(account_id)
    logger.info("Cleared %s notifications for account %s", deleted, account_id)
    return deleted


def remove_activity_notifications(session: Session, *, activity: ActivityRef) -> int:
    """Delete the notifications pointing at a removed activity."""

    return NotificationRepository(session).delete_for_activity(activity)


__all__ = ["clear_notifications", "remove_activity_notifications"]
