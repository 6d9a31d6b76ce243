"""Aggregate application use cases."""

from .notifications import (
    assign_origin_account,
    clear_notifications,
    create_notification,
    load_notifications,
    reload_stale_associations,
    remove_activity_notifications,
)

__all__ = [
    "assign_origin_account",
    "clear_notifications",
    "create_notification",
    "load_notifications",
    "reload_stale_associations",
    "remove_activity_notifications",
]
