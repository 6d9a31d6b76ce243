"""Pure rules deriving a notification's kind, subject and visibility."""

from __future__ import annotations

from enum import Enum

from activity_notifications.domain.entities.activity import (
    Activity,
    ActivityKind,
    Status,
)
from activity_notifications.domain.exceptions import UnknownActivityTypeError


class NotificationType(str, Enum):
    """Semantic label exposed to clients for a notification."""

    MENTION = "mention"
    REBLOG = "reblog"
    FOLLOW = "follow"
    FOLLOW_REQUEST = "follow_request"
    FAVOURITE = "favourite"


# A Status activity only produces a notification when it reposts the
# recipient's content, hence "reblog" rather than a generic "status".
_TYPE_BY_KIND: dict[ActivityKind, NotificationType] = {
    ActivityKind.STATUS: NotificationType.REBLOG,
    ActivityKind.MENTION: NotificationType.MENTION,
    ActivityKind.FOLLOW: NotificationType.FOLLOW,
    ActivityKind.FOLLOW_REQUEST: NotificationType.FOLLOW_REQUEST,
    ActivityKind.FAVOURITE: NotificationType.FAVOURITE,
}


def classify_activity(kind: ActivityKind | str) -> NotificationType:
    """Return the notification type for an activity ``kind``.

    Raises ``UnknownActivityTypeError`` for tags outside ``ActivityKind``.
    """

    activity_kind = ActivityKind.parse(kind)
    if activity_kind not in _TYPE_BY_KIND:
        raise UnknownActivityTypeError(kind)
    return _TYPE_BY_KIND[activity_kind]


def resolve_target(
    notification_type: NotificationType, activity: Activity | None
) -> Status | None:
    """Return the status a notification should render, if any.

    Follow and follow request notifications are about the actor, so they have
    no target. A deleted activity has no target either.
    """

    if activity is None:
        return None

    notification_type = NotificationType(notification_type)
    if notification_type is NotificationType.REBLOG:
        return activity.reblog
    if notification_type in (NotificationType.FAVOURITE, NotificationType.MENTION):
        return activity.status
    return None


def is_browserable(notification_type: NotificationType) -> bool:
    """Follow requests are listed through the pending approval flow instead."""

    return NotificationType(notification_type) is not NotificationType.FOLLOW_REQUEST


__all__ = [
    "NotificationType",
    "classify_activity",
    "is_browserable",
    "resolve_target",
]
