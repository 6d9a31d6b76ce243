"""Domain entities for the activities a notification can point at."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Union

from activity_notifications.domain.exceptions import UnknownActivityTypeError

from .account import Account


class ActivityKind(str, Enum):
    """Closed set of activity type tags stored next to ``activity_id``."""

    MENTION = "Mention"
    STATUS = "Status"
    FOLLOW = "Follow"
    FOLLOW_REQUEST = "FollowRequest"
    FAVOURITE = "Favourite"

    @classmethod
    def parse(cls, value: "ActivityKind | str") -> "ActivityKind":
        """Return the kind matching ``value`` or raise ``UnknownActivityTypeError``."""

        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownActivityTypeError(value) from None


@dataclass(frozen=True)
class ActivityRef:
    """Polymorphic reference from a notification to its activity row."""

    kind: ActivityKind
    activity_id: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", ActivityKind.parse(self.kind))


@dataclass
class MediaAttachment:
    id: int | None
    status_id: int
    url: str
    description: str | None = None


@dataclass
class Tag:
    id: int | None
    name: str


@dataclass
class Status:
    """A post. ``reblog`` is set when the status reposts another one."""

    id: int | None
    account_id: int
    text: str = ""
    reblog_of_id: int | None = None
    created_at: datetime | None = None
    account: Account | None = None
    reblog: Status | None = None
    media_attachments: list[MediaAttachment] = field(default_factory=list)
    tags: list[Tag] = field(default_factory=list)
    mentions: list[Mention] = field(default_factory=list)


@dataclass
class Mention:
    """An account mentioned inside a status.

    ``account_id`` is the mentioned account, not the author of the status.
    """

    id: int | None
    account_id: int
    status_id: int
    account: Account | None = None
    status: Status | None = None


@dataclass
class Follow:
    id: int | None
    account_id: int
    target_account_id: int
    account: Account | None = None


@dataclass
class FollowRequest:
    id: int | None
    account_id: int
    target_account_id: int
    account: Account | None = None


@dataclass
class Favourite:
    id: int | None
    account_id: int
    status_id: int
    account: Account | None = None
    status: Status | None = None


Activity = Union[Mention, Status, Follow, FollowRequest, Favourite]


__all__ = [
    "Activity",
    "ActivityKind",
    "ActivityRef",
    "Favourite",
    "Follow",
    "FollowRequest",
    "MediaAttachment",
    "Mention",
    "Status",
    "Tag",
]
