"""Notification domain: entities, classification rules and errors."""

from .entities import (
    Account,
    Activity,
    ActivityKind,
    ActivityRef,
    Favourite,
    Follow,
    FollowRequest,
    MediaAttachment,
    Mention,
    Notification,
    Status,
    Tag,
)
from .classification import (
    NotificationType,
    classify_activity,
    is_browserable,
    resolve_target,
)
from .exceptions import DuplicateNotificationError, UnknownActivityTypeError

__all__ = [
    "Account",
    "Activity",
    "ActivityKind",
    "ActivityRef",
    "DuplicateNotificationError",
    "Favourite",
    "Follow",
    "FollowRequest",
    "MediaAttachment",
    "Mention",
    "Notification",
    "NotificationType",
    "Status",
    "Tag",
    "UnknownActivityTypeError",
    "classify_activity",
    "is_browserable",
    "resolve_target",
]
