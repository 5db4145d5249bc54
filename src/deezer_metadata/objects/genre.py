# deezer_metadata/objects/genre.py

"""Genre record."""

from __future__ import annotations

from typing import ClassVar

from pydantic import StrictStr

from deezer_metadata.codec import UInt
from deezer_metadata.objects.base import Resource


class Genre(Resource):
    """A Deezer genre, as served by ``/genre/{id}``. Id 0 is "All"."""

    path: ClassVar[str] = "genre"

    id: UInt
    name: StrictStr
    picture: StrictStr
    picture_small: StrictStr
    picture_medium: StrictStr
    picture_big: StrictStr
    picture_xl: StrictStr
