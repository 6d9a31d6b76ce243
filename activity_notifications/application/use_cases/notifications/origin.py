"""Derivation of the account that caused a notification."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from activity_notifications.domain.entities import (
    Activity,
    ActivityKind,
    ActivityRef,
    Notification,
)
from activity_notifications.domain.exceptions import UnknownActivityTypeError

logger = logging.getLogger(__name__)


class ActivityLookup(Protocol):
    def resolve(self, ref: ActivityRef, *, eager: bool = True) -> Activity | None: ...


def _own_account(activity: Activity, activities: ActivityLookup) -> int | None:
    return activity.account_id


def _mentioning_status_account(activity: Activity, activities: ActivityLookup) -> int | None:
    # A mention row belongs to the mentioned account; the origin is the author
    # of the status that contains it.
    status = activities.resolve(
        ActivityRef(ActivityKind.STATUS, activity.status_id), eager=False
    )
    return status.account_id if status is not None else None


_ORIGIN_BY_KIND: dict[ActivityKind, Callable[[Activity, ActivityLookup], int | None]] = {
    ActivityKind.STATUS: _own_account,
    ActivityKind.FOLLOW: _own_account,
    ActivityKind.FAVOURITE: _own_account,
    ActivityKind.FOLLOW_REQUEST: _own_account,
    ActivityKind.MENTION: _mentioning_status_account,
}


def assign_origin_account(notification: Notification, activities: ActivityLookup) -> None:
    """Set ``from_account_id`` on a notification that has not been saved yet.

    Persisted notifications are left untouched. When the activity cannot be
    found the origin stays empty.
    """

    if notification.is_persisted:
        return

    kind = notification.activity.kind
    origin = _ORIGIN_BY_KIND.get(kind)
    if origin is None:
        raise UnknownActivityTypeError(kind)

    activity = activities.resolve(notification.activity, eager=False)
    if activity is None:
        logger.debug(
            "Activity %s %s not found while deriving notification origin",
            kind.value,
            notification.activity.activity_id,
        )
        notification.from_account_id = None
        return

    notification.from_account_id = origin(activity, activities)


__all__ = ["ActivityLookup", "assign_origin_account"]
