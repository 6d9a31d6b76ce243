"""Read path returning a recipient's newest notifications."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from activity_notifications.config import get_settings
from activity_notifications.domain.entities import Notification
from activity_notifications.infrastructure.cache import NotificationCache
from activity_notifications.infrastructure.repositories import (
    AccountRepository,
    ActivityRepository,
    NotificationRepository,
)

from .rehydrate import reload_stale_associations

logger = logging.getLogger(__name__)


def load_notifications(
    session: Session,
    *,
    account_id: int,
    cache: NotificationCache | None = None,
    limit: int | None = None,
    browserable_only: bool = True,
) -> list[Notification]:
    """Return the newest notifications of ``account_id`` ready for display.

    Cached entries have their origin account refreshed in one lookup; the rest
    are read from the store. Activities for the whole page are loaded with the
    display preloads, and notifications whose activity is gone are dropped.
    The cache is only read here.
    """

    if limit is None:
        limit = get_settings().notification_page_limit

    repository = NotificationRepository(session)
    cache_ids = repository.list_cache_ids(
        account_id, limit=limit, browserable_only=browserable_only
    )
    if not cache_ids:
        return []

    cached = cache.fetch_many(cache_ids) if cache is not None else {}
    if cached:
        reload_stale_associations(list(cached.values()), AccountRepository(session))

    missing_ids = [item.id for item in cache_ids if item.id not in cached]
    stored = {notification.id: notification for notification in repository.get_many(missing_ids)}

    page = [
        cached.get(item.id) or stored.get(item.id)
        for item in cache_ids
    ]
    page = [notification for notification in page if notification is not None]

    activities = ActivityRepository(session).resolve_many(
        [notification.activity for notification in page], eager=True
    )

    visible: list[Notification] = []
    for notification in page:
        notification.loaded_activity = activities.get(notification.activity)
        if notification.loaded_activity is None:
            logger.debug(
                "Skipping notification %s: %s %s no longer exists",
                notification.id,
                notification.activity.kind.value,
                notification.activity.activity_id,
            )
            continue
        visible.append(notification)
    return visible


__all__ = ["load_notifications"]
