"""Resolution of polymorphic activity references."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session, selectinload

from activity_notifications.domain.entities import (
    Activity,
    ActivityKind,
    ActivityRef,
    Favourite,
    Follow,
    FollowRequest,
    MediaAttachment,
    Mention,
    Status,
    Tag,
)
from activity_notifications.domain.preload import Preload, preload_for
from activity_notifications.infrastructure.models import (
    AccountModel,
    FavouriteModel,
    FollowModel,
    FollowRequestModel,
    MediaAttachmentModel,
    MentionModel,
    StatusModel,
    TagModel,
)
from activity_notifications.utils import ensure_app_timezone

from .account_repository import AccountRepository

_MODEL_BY_KIND = {
    ActivityKind.MENTION: MentionModel,
    ActivityKind.STATUS: StatusModel,
    ActivityKind.FOLLOW: FollowModel,
    ActivityKind.FOLLOW_REQUEST: FollowRequestModel,
    ActivityKind.FAVOURITE: FavouriteModel,
}


class ActivityRepository:
    """Load the activity rows notifications point at.

    ``eager`` lookups apply the display preload graph of the activity kind.
    Non-eager lookups only map scalar columns; nested relations stay ``None``.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def resolve(self, ref: ActivityRef, *, eager: bool = True) -> Activity | None:
        model_class = _MODEL_BY_KIND[ref.kind]
        preloads = preload_for(ref.kind) if eager else ()
        model = (
            self.session.query(model_class)
            .options(*_loader_options(model_class, preloads))
            .filter(model_class.id == ref.activity_id)
            .one_or_none()
        )
        return _to_entity(model, preloads) if model is not None else None

    def resolve_many(
        self, refs: Iterable[ActivityRef], *, eager: bool = True
    ) -> dict[ActivityRef, Activity]:
        """Resolve ``refs`` with one query per activity kind.

        References whose row no longer exists are missing from the result.
        """

        ids_by_kind: dict[ActivityKind, set[int]] = defaultdict(set)
        for ref in refs:
            ids_by_kind[ref.kind].add(ref.activity_id)

        resolved: dict[ActivityRef, Activity] = {}
        for kind, activity_ids in ids_by_kind.items():
            model_class = _MODEL_BY_KIND[kind]
            preloads = preload_for(kind) if eager else ()
            query = (
                self.session.query(model_class)
                .options(*_loader_options(model_class, preloads))
                .filter(model_class.id.in_(activity_ids))
            )
            for model in query.all():
                resolved[ActivityRef(kind, model.id)] = _to_entity(model, preloads)
        return resolved


def _loader_options(model_class: type, preloads: Sequence[Preload]) -> list:
    """Translate a preload graph into SQLAlchemy loader options."""

    options = []
    for item in preloads:
        attribute = getattr(model_class, item.relation)
        option = selectinload(attribute)
        if item.children:
            target_class = attribute.property.mapper.class_
            option = option.options(*_loader_options(target_class, item.children))
        options.append(option)
    return options


def _to_entity(model, preloads: Sequence[Preload]):
    loaded = {item.relation: item for item in preloads}
    mapper = _MAPPERS[type(model)]
    return mapper(model, loaded)


def _related(model, loaded: dict[str, Preload], relation: str):
    item = loaded.get(relation)
    if item is None:
        return None
    value = getattr(model, relation)
    if value is None:
        return None
    return _to_entity(value, item.children)


def _related_list(model, loaded: dict[str, Preload], relation: str) -> list:
    item = loaded.get(relation)
    if item is None:
        return []
    return [_to_entity(value, item.children) for value in getattr(model, relation)]


def _account_to_entity(model, loaded):
    return AccountRepository._to_entity(model)


def _status_to_entity(model: StatusModel, loaded: dict[str, Preload]) -> Status:
    return Status(
        id=model.id,
        account_id=model.account_id,
        text=model.text or "",
        reblog_of_id=model.reblog_of_id,
        created_at=ensure_app_timezone(model.created_at),
        account=_related(model, loaded, "account"),
        reblog=_related(model, loaded, "reblog"),
        media_attachments=_related_list(model, loaded, "media_attachments"),
        tags=_related_list(model, loaded, "tags"),
        mentions=_related_list(model, loaded, "mentions"),
    )


def _media_to_entity(model: MediaAttachmentModel, loaded) -> MediaAttachment:
    return MediaAttachment(
        id=model.id,
        status_id=model.status_id,
        url=model.url,
        description=model.description,
    )


def _tag_to_entity(model: TagModel, loaded) -> Tag:
    return Tag(id=model.id, name=model.name)


def _mention_to_entity(model: MentionModel, loaded: dict[str, Preload]) -> Mention:
    return Mention(
        id=model.id,
        account_id=model.account_id,
        status_id=model.status_id,
        account=_related(model, loaded, "account"),
        status=_related(model, loaded, "status"),
    )


def _follow_to_entity(model: FollowModel, loaded: dict[str, Preload]) -> Follow:
    return Follow(
        id=model.id,
        account_id=model.account_id,
        target_account_id=model.target_account_id,
        account=_related(model, loaded, "account"),
    )


def _follow_request_to_entity(
    model: FollowRequestModel, loaded: dict[str, Preload]
) -> FollowRequest:
    return FollowRequest(
        id=model.id,
        account_id=model.account_id,
        target_account_id=model.target_account_id,
        account=_related(model, loaded, "account"),
    )


def _favourite_to_entity(model: FavouriteModel, loaded: dict[str, Preload]) -> Favourite:
    return Favourite(
        id=model.id,
        account_id=model.account_id,
        status_id=model.status_id,
        account=_related(model, loaded, "account"),
        status=_related(model, loaded, "status"),
    )


_MAPPERS = {
    AccountModel: _account_to_entity,
    StatusModel: _status_to_entity,
    MediaAttachmentModel: _media_to_entity,
    TagModel: _tag_to_entity,
    MentionModel: _mention_to_entity,
    FollowModel: _follow_to_entity,
    FollowRequestModel: _follow_request_to_entity,
    FavouriteModel: _favourite_to_entity,
}


__all__ = ["ActivityRepository"]
