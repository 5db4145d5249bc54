# deezer_metadata/objects/comment.py

"""Comment records."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from pydantic import Field, StrictStr

from deezer_metadata.codec import UInt
from deezer_metadata.objects.base import DeezerModel, Resource
from deezer_metadata.objects.user import User

if TYPE_CHECKING:
    from deezer_metadata.client import DeezerClient


class CommentParent(DeezerModel):
    """What the comment was posted on."""

    id: StrictStr
    object_type: StrictStr = Field(alias="type")  # "artist", "album" or "playlist"


class CommentAuthor(DeezerModel):
    """Shortened User who wrote a comment."""

    id: UInt
    name: StrictStr
    link: StrictStr
    picture: StrictStr
    picture_small: StrictStr
    picture_medium: StrictStr
    picture_big: StrictStr
    picture_xl: StrictStr

    def get_full(self, client: DeezerClient | None = None) -> User:
        return User.get(self.id, client=client)


class Comment(Resource):
    """A Deezer comment, as served by ``/comment/{id}``."""

    path: ClassVar[str] = "comment"

    id: UInt
    text: StrictStr
    date: UInt  # unix timestamp
    parent: CommentParent = Field(alias="object")
    author: CommentAuthor
