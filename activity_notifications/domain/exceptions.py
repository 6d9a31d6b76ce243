"""Errors raised by the notification domain."""

from __future__ import annotations


class UnknownActivityTypeError(ValueError):
    """An activity type tag outside the supported set reached the domain.

    This signals a schema mismatch between the store and the code and is never
    recovered from inside the package.
    """

    def __init__(self, activity_type: object) -> None:
        self.activity_type = activity_type
        super().__init__(f"Unsupported notification activity type: {activity_type!r}")


class DuplicateNotificationError(Exception):
    """The recipient already has a notification for the same activity."""

    def __init__(self, account_id: int, activity: object) -> None:
        self.account_id = account_id
        self.activity = activity
        super().__init__(
            f"Account {account_id} already has a notification for {activity!r}"
        )


__all__ = ["DuplicateNotificationError", "UnknownActivityTypeError"]
