"""Persistence layer for account data."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.orm import Session

from activity_notifications.domain.entities import Account
from activity_notifications.infrastructure.models import AccountModel
from activity_notifications.utils import ensure_app_timezone


class AccountRepository:
    """Read access to :class:`Account` entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_map_by_ids(self, account_ids: Iterable[int | None]) -> dict[int, Account]:
        """Return the accounts matching ``account_ids`` in a single query.

        Unknown identifiers are absent from the mapping.
        """

        unique_ids = {int(account_id) for account_id in account_ids if account_id is not None}
        if not unique_ids:
            return {}

        query = self.session.query(AccountModel).filter(AccountModel.id.in_(unique_ids))
        return {model.id: self._to_entity(model) for model in query.all()}

    @staticmethod
    def _to_entity(model: AccountModel) -> Account:
        return Account(
            id=model.id,
            username=model.username,
            display_name=model.display_name or "",
            domain=model.domain,
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["AccountRepository"]
