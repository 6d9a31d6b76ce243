"""Tests for the notification classification rules."""

from __future__ import annotations

import pytest

from activity_notifications.domain import (
    ActivityKind,
    ActivityRef,
    Favourite,
    Follow,
    FollowRequest,
    Mention,
    Notification,
    NotificationType,
    Status,
    UnknownActivityTypeError,
    classify_activity,
    is_browserable,
    resolve_target,
)
from activity_notifications.domain.preload import STATUS_PRELOAD, preload_for


@pytest.mark.parametrize(
    ("kind", "expected"),
    [
        (ActivityKind.STATUS, NotificationType.REBLOG),
        (ActivityKind.MENTION, NotificationType.MENTION),
        (ActivityKind.FOLLOW, NotificationType.FOLLOW),
        (ActivityKind.FOLLOW_REQUEST, NotificationType.FOLLOW_REQUEST),
        (ActivityKind.FAVOURITE, NotificationType.FAVOURITE),
        ("Status", NotificationType.REBLOG),
        ("FollowRequest", NotificationType.FOLLOW_REQUEST),
    ],
)
def test_classify_activity(kind, expected):
    assert classify_activity(kind) is expected


@pytest.mark.parametrize("tag", ["Poll", "status", "", None])
def test_classify_activity_rejects_unknown_tags(tag):
    with pytest.raises(UnknownActivityTypeError):
        classify_activity(tag)


def test_activity_ref_rejects_unknown_tag():
    with pytest.raises(UnknownActivityTypeError) as excinfo:
        ActivityRef("Poll", 1)

    assert excinfo.value.activity_type == "Poll"


def test_activity_ref_accepts_tag_strings():
    ref = ActivityRef("Favourite", 42)

    assert ref.kind is ActivityKind.FAVOURITE
    assert ref == ActivityRef(ActivityKind.FAVOURITE, 42)


@pytest.mark.parametrize(
    ("notification_type", "expected"),
    [
        (NotificationType.REBLOG, True),
        (NotificationType.MENTION, True),
        (NotificationType.FOLLOW, True),
        (NotificationType.FAVOURITE, True),
        (NotificationType.FOLLOW_REQUEST, False),
    ],
)
def test_is_browserable(notification_type, expected):
    assert is_browserable(notification_type) is expected


def test_reblog_target_is_the_reblogged_status():
    original = Status(id=1, account_id=10, text="original")
    reblog = Status(id=2, account_id=20, reblog_of_id=1, reblog=original)

    assert resolve_target(NotificationType.REBLOG, reblog) is original


def test_favourite_and_mention_target_their_status():
    status = Status(id=99, account_id=1)
    favourite = Favourite(id=42, account_id=7, status_id=99, status=status)
    mention = Mention(id=3, account_id=1, status_id=99, status=status)

    assert resolve_target(NotificationType.FAVOURITE, favourite) is status
    assert resolve_target(NotificationType.MENTION, mention) is status


def test_follow_notifications_have_no_target():
    follow = Follow(id=1, account_id=2, target_account_id=3)
    request = FollowRequest(id=5, account_id=3, target_account_id=4)

    assert resolve_target(NotificationType.FOLLOW, follow) is None
    assert resolve_target(NotificationType.FOLLOW_REQUEST, request) is None


@pytest.mark.parametrize("notification_type", list(NotificationType))
def test_missing_activity_has_no_target(notification_type):
    assert resolve_target(notification_type, None) is None


def test_notification_derived_views():
    status = Status(id=99, account_id=1)
    notification = Notification(
        id=None,
        account_id=1,
        activity=ActivityRef(ActivityKind.FAVOURITE, 42),
        loaded_activity=Favourite(id=42, account_id=7, status_id=99, status=status),
    )

    assert notification.type is NotificationType.FAVOURITE
    assert notification.target_status is status
    assert notification.browserable is True


def test_status_preload_includes_reblog_content():
    relations = {item.relation: item for item in STATUS_PRELOAD}

    assert set(relations) == {"account", "media_attachments", "tags", "mentions", "reblog"}
    reblog_relations = {item.relation for item in relations["reblog"].children}
    assert reblog_relations == {"account", "media_attachments", "tags", "mentions"}
    assert [item.relation for item in relations["mentions"].children] == ["account"]


def test_mention_preload_wraps_status_preload():
    (status_preload,) = preload_for(ActivityKind.MENTION)

    assert status_preload.relation == "status"
    assert status_preload.children == STATUS_PRELOAD
