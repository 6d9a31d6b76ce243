"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session, joinedload

from activity_notifications.domain.entities import (
    ActivityKind,
    ActivityRef,
    Notification,
)
from activity_notifications.domain.exceptions import DuplicateNotificationError
from activity_notifications.infrastructure.models import NotificationModel
from activity_notifications.utils import ensure_app_timezone

from .account_repository import AccountRepository

_NON_BROWSERABLE_TYPES = (ActivityKind.FOLLOW_REQUEST.value,)


@dataclass(frozen=True)
class NotificationCacheId:
    """Columns needed to address a cached notification."""

    id: int
    updated_at: datetime
    activity: ActivityRef


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_activity(self, account_id: int, activity: ActivityRef) -> Notification | None:
        model = (
            self.session.query(NotificationModel)
            .options(joinedload(NotificationModel.from_account))
            .filter(NotificationModel.account_id == account_id)
            .filter(NotificationModel.activity_type == activity.kind.value)
            .filter(NotificationModel.activity_id == activity.activity_id)
            .one_or_none()
        )
        return self._to_entity(model) if model else None

    def get_many(self, notification_ids: Sequence[int]) -> list[Notification]:
        """Return notifications for ``notification_ids`` keeping the given order."""

        if not notification_ids:
            return []

        query = (
            self.session.query(NotificationModel)
            .options(joinedload(NotificationModel.from_account))
            .filter(NotificationModel.id.in_(set(notification_ids)))
        )
        by_id = {model.id: self._to_entity(model) for model in query.all()}
        return [by_id[item] for item in notification_ids if item in by_id]

    def list_for_account(
        self,
        account_id: int,
        *,
        limit: int | None = 40,
        browserable_only: bool = True,
    ) -> list[Notification]:
        query = self._account_query(account_id, browserable_only=browserable_only)
        query = query.options(joinedload(NotificationModel.from_account))
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def list_cache_ids(
        self,
        account_id: int,
        *,
        limit: int | None = 40,
        browserable_only: bool = True,
    ) -> list[NotificationCacheId]:
        """Return the newest notifications of ``account_id`` without hydrating them."""

        query = self._account_query(account_id, browserable_only=browserable_only)
        query = query.with_entities(
            NotificationModel.id,
            NotificationModel.updated_at,
            NotificationModel.activity_type,
            NotificationModel.activity_id,
        )
        if limit is not None:
            query = query.limit(limit)
        return [
            NotificationCacheId(
                id=notification_id,
                updated_at=ensure_app_timezone(updated_at),
                activity=ActivityRef(ActivityKind.parse(activity_type), activity_id),
            )
            for notification_id, updated_at, activity_type, activity_id in query.all()
        ]

    def create(self, notification: Notification) -> Notification:
        """Insert ``notification``.

        Raises ``DuplicateNotificationError`` when the recipient already has a
        notification for the same activity; the session is rolled back.
        """

        model = NotificationModel()
        self._apply_entity_to_model(model, notification)
        self.session.add(model)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise DuplicateNotificationError(
                notification.account_id, notification.activity
            ) from exc
        self.session.refresh(model)
        return self._to_entity(model)

    def delete_for_account(self, account_id: int) -> int:
        deleted = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.account_id == account_id)
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return deleted

    def delete_for_activity(self, activity: ActivityRef) -> int:
        deleted = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.activity_type == activity.kind.value)
            .filter(NotificationModel.activity_id == activity.activity_id)
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return deleted

    def _account_query(self, account_id: int, *, browserable_only: bool) -> Query:
        query = self.session.query(NotificationModel).filter(
            NotificationModel.account_id == account_id
        )
        if browserable_only:
            query = query.filter(
                NotificationModel.activity_type.not_in(_NON_BROWSERABLE_TYPES)
            )
        return query.order_by(NotificationModel.id.desc())

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationModel, notification: Notification
    ) -> None:
        model.account_id = notification.account_id
        model.from_account_id = notification.from_account_id
        model.activity_type = notification.activity.kind.value
        model.activity_id = notification.activity.activity_id

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        from_account = model.from_account
        return Notification(
            id=model.id,
            account_id=model.account_id,
            activity=ActivityRef(
                ActivityKind.parse(model.activity_type), model.activity_id
            ),
            from_account_id=model.from_account_id,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
            from_account=(
                AccountRepository._to_entity(from_account) if from_account else None
            ),
        )


__all__ = ["NotificationCacheId", "NotificationRepository"]
