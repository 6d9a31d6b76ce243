"""Use case for recording a notification about an activity."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from activity_notifications.domain.entities import ActivityRef, Notification
from activity_notifications.domain.exceptions import DuplicateNotificationError
from activity_notifications.infrastructure.repositories import (
    ActivityRepository,
    NotificationRepository,
)

from .origin import assign_origin_account

logger = logging.getLogger(__name__)


def create_notification(
    session: Session,
    *,
    account_id: int,
    activity: ActivityRef,
) -> Notification:
    """Notify ``account_id`` about ``activity`` at most once.

    When a notification for the same recipient and activity already exists,
    including one inserted concurrently, that notification is returned.
    """

    repository = NotificationRepository(session)

    existing = repository.get_by_activity(account_id, activity)
    if existing is not None:
        logger.debug(
            "Account %s already notified about %s %s",
            account_id,
            activity.kind.value,
            activity.activity_id,
        )
        return existing

    notification = Notification(id=None, account_id=account_id, activity=activity)
    assign_origin_account(notification, ActivityRepository(session))

    try:
        return repository.create(notification)
    except DuplicateNotificationError:
        existing = repository.get_by_activity(account_id, activity)
        if existing is None:
            raise
        logger.debug(
            "Concurrent notification for account %s about %s %s kept",
            account_id,
            activity.kind.value,
            activity.activity_id,
        )
        return existing


__all__ = ["create_notification"]
