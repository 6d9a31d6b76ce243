"""Tests for deriving the account that caused a notification."""

from __future__ import annotations

import pytest

from activity_notifications.application.use_cases.notifications import (
    assign_origin_account,
)
from activity_notifications.domain import (
    ActivityKind,
    ActivityRef,
    Favourite,
    Follow,
    FollowRequest,
    Mention,
    Notification,
    Status,
)


class StubActivityLookup:
    def __init__(self, *activities):
        self.activities = {}
        for activity in activities:
            kind = {
                Status: ActivityKind.STATUS,
                Mention: ActivityKind.MENTION,
                Follow: ActivityKind.FOLLOW,
                FollowRequest: ActivityKind.FOLLOW_REQUEST,
                Favourite: ActivityKind.FAVOURITE,
            }[type(activity)]
            self.activities[ActivityRef(kind, activity.id)] = activity
        self.calls = []

    def resolve(self, ref, *, eager=True):
        self.calls.append((ref, eager))
        return self.activities.get(ref)


@pytest.mark.parametrize(
    ("activity", "expected"),
    [
        (Status(id=1, account_id=11, reblog_of_id=9), 11),
        (Follow(id=2, account_id=12, target_account_id=1), 12),
        (Favourite(id=42, account_id=7, status_id=99), 7),
        (FollowRequest(id=5, account_id=3, target_account_id=1), 3),
    ],
)
def test_origin_is_the_activity_owner(activity, expected):
    lookup = StubActivityLookup(activity)
    kind = next(ref.kind for ref in lookup.activities)
    notification = Notification(id=None, account_id=1, activity=ActivityRef(kind, activity.id))

    assign_origin_account(notification, lookup)

    assert notification.from_account_id == expected
    assert all(eager is False for _, eager in lookup.calls)


def test_mention_origin_is_the_status_author():
    status = Status(id=50, account_id=8)
    mention = Mention(id=4, account_id=1, status_id=50)
    lookup = StubActivityLookup(status, mention)
    notification = Notification(
        id=None, account_id=1, activity=ActivityRef(ActivityKind.MENTION, 4)
    )

    assign_origin_account(notification, lookup)

    assert notification.from_account_id == 8
    assert lookup.calls == [
        (ActivityRef(ActivityKind.MENTION, 4), False),
        (ActivityRef(ActivityKind.STATUS, 50), False),
    ]


def test_mention_without_status_has_no_origin():
    lookup = StubActivityLookup(Mention(id=4, account_id=1, status_id=50))
    notification = Notification(
        id=None, account_id=1, activity=ActivityRef(ActivityKind.MENTION, 4)
    )

    assign_origin_account(notification, lookup)

    assert notification.from_account_id is None


def test_missing_activity_leaves_origin_empty():
    lookup = StubActivityLookup()
    notification = Notification(
        id=None, account_id=1, activity=ActivityRef(ActivityKind.FAVOURITE, 42)
    )

    assign_origin_account(notification, lookup)

    assert notification.from_account_id is None


def test_persisted_notification_is_left_untouched():
    lookup = StubActivityLookup(Favourite(id=42, account_id=7, status_id=99))
    notification = Notification(
        id=15,
        account_id=1,
        activity=ActivityRef(ActivityKind.FAVOURITE, 42),
        from_account_id=3,
    )

    assign_origin_account(notification, lookup)
    assign_origin_account(notification, lookup)

    assert notification.from_account_id == 3
    assert lookup.calls == []
