"""Domain entity representing an activity notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from activity_notifications.domain.classification import (
    NotificationType,
    classify_activity,
    is_browserable,
    resolve_target,
)

from .account import Account
from .activity import Activity, ActivityRef, Status


@dataclass
class Notification:
    """Notice delivered to ``account_id`` about a single activity.

    ``from_account_id`` is denormalized at creation time. ``from_account`` and
    ``loaded_activity`` are attached by repositories and read paths; they are
    never persisted.
    """

    id: int | None
    account_id: int
    activity: ActivityRef
    from_account_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    from_account: Account | None = None
    loaded_activity: Activity | None = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    @property
    def type(self) -> NotificationType:
        return classify_activity(self.activity.kind)

    @property
    def target_status(self) -> Status | None:
        return resolve_target(self.type, self.loaded_activity)

    @property
    def browserable(self) -> bool:
        return is_browserable(self.type)


__all__ = ["Notification"]
