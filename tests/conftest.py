"""Shared fixtures for the notification tests."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "activity_notifications_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ.setdefault("APP_TIMEZONE", "UTC")

from activity_notifications.config import get_settings  # noqa: E402

get_settings.cache_clear()

from activity_notifications.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from activity_notifications.infrastructure.models import (  # noqa: E402
    AccountModel,
    FavouriteModel,
    FollowModel,
    FollowRequestModel,
    MediaAttachmentModel,
    MentionModel,
    StatusModel,
    TagModel,
)


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session():
    with SessionLocal() as db:
        yield db


class Factory:
    """Insert activity rows and return their identifiers."""

    def __init__(self, session) -> None:
        self.session = session

    def _save(self, model):
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return model

    def account(self, username: str, *, display_name: str = "", domain: str | None = None) -> int:
        return self._save(
            AccountModel(username=username, display_name=display_name, domain=domain)
        ).id

    def status(
        self,
        account_id: int,
        *,
        text: str = "",
        reblog_of_id: int | None = None,
        media_urls: tuple[str, ...] = (),
        tags: tuple[str, ...] = (),
    ) -> int:
        model = StatusModel(account_id=account_id, text=text, reblog_of_id=reblog_of_id)
        for url in media_urls:
            model.media_attachments.append(MediaAttachmentModel(url=url))
        for name in tags:
            tag = self.session.query(TagModel).filter_by(name=name).one_or_none()
            model.tags.append(tag or TagModel(name=name))
        return self._save(model).id

    def mention(self, status_id: int, account_id: int) -> int:
        return self._save(MentionModel(status_id=status_id, account_id=account_id)).id

    def favourite(self, account_id: int, status_id: int) -> int:
        return self._save(FavouriteModel(account_id=account_id, status_id=status_id)).id

    def follow(self, account_id: int, target_account_id: int) -> int:
        return self._save(
            FollowModel(account_id=account_id, target_account_id=target_account_id)
        ).id

    def follow_request(self, account_id: int, target_account_id: int) -> int:
        return self._save(
            FollowRequestModel(account_id=account_id, target_account_id=target_account_id)
        ).id

    def rename(self, account_id: int, display_name: str) -> None:
        model = self.session.get(AccountModel, account_id)
        model.display_name = display_name
        self._save(model)


@pytest.fixture()
def factory(session):
    return Factory(session)
