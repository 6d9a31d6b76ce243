"""Named preload graphs used when activities are resolved for display."""

from __future__ import annotations

from dataclasses import dataclass

from activity_notifications.domain.entities.activity import ActivityKind


@dataclass(frozen=True)
class Preload:
    """A relation to load together with its own nested relations."""

    relation: str
    children: tuple[Preload, ...] = ()


def preload(relation: str, *children: Preload) -> Preload:
    return Preload(relation, tuple(children))


_STATUS_CONTENT: tuple[Preload, ...] = (
    preload("account"),
    preload("media_attachments"),
    preload("tags"),
    preload("mentions", preload("account")),
)

STATUS_PRELOAD: tuple[Preload, ...] = _STATUS_CONTENT + (
    preload("reblog", *_STATUS_CONTENT),
)

ACTIVITY_PRELOADS: dict[ActivityKind, tuple[Preload, ...]] = {
    ActivityKind.STATUS: STATUS_PRELOAD,
    ActivityKind.MENTION: (preload("status", *STATUS_PRELOAD),),
    ActivityKind.FAVOURITE: (preload("account"), preload("status", *STATUS_PRELOAD)),
    ActivityKind.FOLLOW: (preload("account"),),
    ActivityKind.FOLLOW_REQUEST: (preload("account"),),
}


def preload_for(kind: ActivityKind | str) -> tuple[Preload, ...]:
    """Return the display preload graph for activities of ``kind``."""

    return ACTIVITY_PRELOADS[ActivityKind.parse(kind)]


__all__ = ["ACTIVITY_PRELOADS", "STATUS_PRELOAD", "Preload", "preload", "preload_for"]
