"""Refresh of origin accounts attached to cached notifications."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

from activity_notifications.domain.entities import Account, Notification


class AccountLookup(Protocol):
    def get_map_by_ids(self, account_ids: Iterable[int | None]) -> dict[int, Account]: ...


def reload_stale_associations(
    notifications: Sequence[Notification], accounts: AccountLookup
) -> None:
    """Replace every ``from_account`` with a freshly loaded account.

    All origin accounts of the batch are fetched with a single lookup. A
    notification whose origin account no longer exists ends up with
    ``from_account`` set to ``None``.
    """

    account_ids = {
        notification.from_account_id
        for notification in notifications
        if notification.from_account_id is not None
    }
    account_map = accounts.get_map_by_ids(account_ids) if account_ids else {}

    for notification in notifications:
        notification.from_account = account_map.get(notification.from_account_id)


__all__ = ["AccountLookup", "reload_stale_associations"]
