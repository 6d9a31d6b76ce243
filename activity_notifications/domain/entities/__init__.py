"""Domain entities exposed by the package."""

from .account import Account
from .activity import (
    Activity,
    ActivityKind,
    ActivityRef,
    Favourite,
    Follow,
    FollowRequest,
    MediaAttachment,
    Mention,
    Status,
    Tag,
)
from .notification import Notification

__all__ = [
    "Account",
    "Activity",
    "ActivityKind",
    "ActivityRef",
    "Favourite",
    "Follow",
    "FollowRequest",
    "MediaAttachment",
    "Mention",
    "Notification",
    "Status",
    "Tag",
]
