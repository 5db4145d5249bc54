# deezer_metadata/objects/user.py

"""User record."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field, StrictBool, StrictStr

from deezer_metadata.codec import UInt
from deezer_metadata.objects.base import Resource


class User(Resource):
    """A Deezer user, as served by ``/user/{id}``.

    Personal fields (names, email, birthday, ...) are only returned for the
    authenticated user and default to empty values otherwise.
    """

    path: ClassVar[str] = "user"

    id: UInt
    name: StrictStr
    last_name: StrictStr = Field(default="", alias="lastname")
    first_name: StrictStr = Field(default="", alias="firstname")
    email: StrictStr = ""
    status: UInt = 0
    birthday: StrictStr = ""
    inscription_date: StrictStr = ""
    gender: StrictStr = ""  # "F" or "M"
    link: StrictStr
    picture: StrictStr
    picture_small: StrictStr
    picture_medium: StrictStr
    picture_big: StrictStr
    picture_xl: StrictStr
    country: StrictStr
    lang: StrictStr = ""
    is_kid: StrictBool = False
    track_list: StrictStr = Field(alias="tracklist")
