# deezer_metadata/objects/radio.py

"""Radio record."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field, StrictStr

from deezer_metadata.codec import UInt
from deezer_metadata.objects.base import Resource


class Radio(Resource):
    """A Deezer radio, as served by ``/radio/{id}``."""

    path: ClassVar[str] = "radio"

    id: UInt
    title: StrictStr
    description: StrictStr
    share_link: StrictStr = Field(alias="share")
    picture: StrictStr
    picture_small: StrictStr
    picture_medium: StrictStr
    picture_big: StrictStr
    picture_xl: StrictStr
    track_list: StrictStr = Field(alias="tracklist")
