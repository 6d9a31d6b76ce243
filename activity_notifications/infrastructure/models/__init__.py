"""ORM models used by the infrastructure layer."""

from .account import AccountModel
from .interactions import FavouriteModel, FollowModel, FollowRequestModel, MentionModel
from .notification import NotificationModel
from .status import MediaAttachmentModel, StatusModel, TagModel, status_tag_table

__all__ = [
    "AccountModel",
    "FavouriteModel",
    "FollowModel",
    "FollowRequestModel",
    "MediaAttachmentModel",
    "MentionModel",
    "NotificationModel",
    "StatusModel",
    "TagModel",
    "status_tag_table",
]
