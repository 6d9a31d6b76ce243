"""Key-value cache holding serialized notifications."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import Protocol

from pydantic import BaseModel, ValidationError

from activity_notifications.config import get_settings
from activity_notifications.domain.entities import (
    Account,
    ActivityKind,
    ActivityRef,
    Notification,
)
from activity_notifications.infrastructure.repositories import NotificationCacheId

logger = logging.getLogger(__name__)


class CacheBackend(Protocol):
    """Minimal interface of the cache store."""

    def get_many(self, keys: Sequence[str]) -> dict[str, str]: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryCacheBackend:
    """Process-local backend, suitable for tests and single worker setups."""

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}

    def get_many(self, keys: Sequence[str]) -> dict[str, str]:
        return {key: self._entries[key] for key in keys if key in self._entries}

    def set(self, key: str, value: str) -> None:
        self._entries[key] = value

    def __len__(self) -> int:
        return len(self._entries)


class CachedAccount(BaseModel):
    """Snapshot of the origin account taken when the entry was written."""

    id: int
    username: str
    display_name: str = ""
    domain: str | None = None
    updated_at: datetime | None = None


class CachedNotification(BaseModel):
    """Serialized form of a notification stored in the cache."""

    id: int
    account_id: int
    from_account_id: int | None = None
    activity_type: str
    activity_id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None
    from_account: CachedAccount | None = None

    @classmethod
    def from_entity(cls, notification: Notification) -> "CachedNotification":
        account = notification.from_account
        return cls(
            id=notification.id,
            account_id=notification.account_id,
            from_account_id=notification.from_account_id,
            activity_type=notification.activity.kind.value,
            activity_id=notification.activity.activity_id,
            created_at=notification.created_at,
            updated_at=notification.updated_at,
            from_account=(
                CachedAccount(
                    id=account.id,
                    username=account.username,
                    display_name=account.display_name,
                    domain=account.domain,
                    updated_at=account.updated_at,
                )
                if account is not None and account.id is not None
                else None
            ),
        )

    def to_entity(self) -> Notification:
        account = self.from_account
        return Notification(
            id=self.id,
            account_id=self.account_id,
            activity=ActivityRef(ActivityKind.parse(self.activity_type), self.activity_id),
            from_account_id=self.from_account_id,
            created_at=self.created_at,
            updated_at=self.updated_at,
            from_account=(
                Account(
                    id=account.id,
                    username=account.username,
                    display_name=account.display_name,
                    domain=account.domain,
                    updated_at=account.updated_at,
                )
                if account is not None
                else None
            ),
        )


class NotificationCache:
    """Read and write notifications addressed by id and last update time.

    Entries are immutable per key: a changed notification gets a new key
    through its ``updated_at``. The attached origin account snapshot is not
    part of the key and may be stale.
    """

    def __init__(self, backend: CacheBackend, *, namespace: str | None = None) -> None:
        self.backend = backend
        self.namespace = namespace or get_settings().notification_cache_namespace

    def key_for(self, notification_id: int, updated_at: datetime | None) -> str:
        version = updated_at.strftime("%Y%m%d%H%M%S%f") if updated_at else "0"
        return f"{self.namespace}:notification:{notification_id}-{version}"

    def fetch_many(self, cache_ids: Iterable[NotificationCacheId]) -> dict[int, Notification]:
        """Return cached notifications keyed by id; misses are left out."""

        keys = {self.key_for(item.id, item.updated_at): item.id for item in cache_ids}
        if not keys:
            return {}

        found: dict[int, Notification] = {}
        for key, raw in self.backend.get_many(list(keys)).items():
            try:
                found[keys[key]] = CachedNotification.model_validate_json(raw).to_entity()
            except ValidationError:
                logger.warning("Discarding unreadable cache entry %s", key)
        return found

    def put(self, notification: Notification) -> None:
        if notification.id is None:
            raise ValueError("Only persisted notifications can be cached")
        payload = CachedNotification.from_entity(notification).model_dump_json()
        self.backend.set(self.key_for(notification.id, notification.updated_at), payload)


__all__ = [
    "CacheBackend",
    "CachedAccount",
    "CachedNotification",
    "InMemoryCacheBackend",
    "NotificationCache",
]
