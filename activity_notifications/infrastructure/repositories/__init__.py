"""Repository implementations for infrastructure layer."""

from .account_repository import AccountRepository
from .activity_repository import ActivityRepository
from .notification_repository import NotificationCacheId, NotificationRepository

__all__ = [
    "AccountRepository",
    "ActivityRepository",
    "NotificationCacheId",
    "NotificationRepository",
]
