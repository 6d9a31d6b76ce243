"""Use cases creating, reading and repairing activity notifications."""

from .clear_notifications import clear_notifications, remove_activity_notifications
from .create_notification import create_notification
from .load_notifications import load_notifications
from .origin import assign_origin_account
from .rehydrate import reload_stale_associations

__all__ = [
    "assign_origin_account",
    "clear_notifications",
    "create_notification",
    "load_notifications",
    "reload_stale_associations",
    "remove_activity_notifications",
]
