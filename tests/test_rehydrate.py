"""Tests for refreshing origin accounts on cached notifications."""

from __future__ import annotations

from activity_notifications.application.use_cases.notifications import (
    reload_stale_associations,
)
from activity_notifications.domain import Account, ActivityKind, ActivityRef, Notification


class RecordingAccountLookup:
    def __init__(self, accounts):
        self.accounts = {account.id: account for account in accounts}
        self.calls = []

    def get_map_by_ids(self, account_ids):
        requested = set(account_ids)
        self.calls.append(requested)
        return {key: value for key, value in self.accounts.items() if key in requested}


def _cached(notification_id, from_account_id, display_name="stale"):
    return Notification(
        id=notification_id,
        account_id=100,
        activity=ActivityRef(ActivityKind.FOLLOW, notification_id),
        from_account_id=from_account_id,
        from_account=(
            Account(id=from_account_id, username=f"user{from_account_id}", display_name=display_name)
            if from_account_id is not None
            else None
        ),
    )


def test_reload_uses_a_single_bulk_lookup():
    fresh_one = Account(id=1, username="user1", display_name="Fresh One")
    fresh_two = Account(id=2, username="user2", display_name="Fresh Two")
    lookup = RecordingAccountLookup([fresh_one, fresh_two])
    notifications = [_cached(10, 1), _cached(11, 1), _cached(12, 2)]

    reload_stale_associations(notifications, lookup)

    assert lookup.calls == [{1, 2}]
    assert [n.from_account for n in notifications] == [fresh_one, fresh_one, fresh_two]


def test_reload_leaves_deleted_accounts_empty():
    lookup = RecordingAccountLookup([Account(id=1, username="user1")])
    notifications = [_cached(10, 1), _cached(11, 3)]

    reload_stale_associations(notifications, lookup)

    assert notifications[0].from_account.id == 1
    assert notifications[1].from_account is None
    assert notifications[1].from_account_id == 3


def test_reload_skips_lookup_without_origins():
    lookup = RecordingAccountLookup([])
    notifications = [_cached(10, None)]

    reload_stale_associations(notifications, lookup)
    reload_stale_associations([], lookup)

    assert lookup.calls == []
    assert notifications[0].from_account is None
