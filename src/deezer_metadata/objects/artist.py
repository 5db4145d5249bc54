# deezer_metadata/objects/artist.py

"""Artist records."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from pydantic import Field, StrictBool, StrictStr

from deezer_metadata.codec import UInt
from deezer_metadata.objects.base import DeezerModel, Resource

if TYPE_CHECKING:
    from deezer_metadata.client import DeezerClient


class Artist(Resource):
    """A Deezer artist, as served by ``/artist/{id}``.

    Example:
        artist = Artist.get(27)
        print(artist.name, artist.nb_fan)
    """

    path: ClassVar[str] = "artist"

    id: UInt
    name: StrictStr
    link: StrictStr
    share_link: StrictStr = Field(alias="share")
    picture: StrictStr
    picture_small: StrictStr
    picture_medium: StrictStr
    picture_big: StrictStr
    picture_xl: StrictStr
    nb_album: UInt
    nb_fan: UInt
    has_radio: StrictBool = Field(alias="radio")
    tracklist: StrictStr  # API link to the artist's top tracks


class ContributorArtist(DeezerModel):
    """Artist credited on a track or album. Use ``get_full()`` for the Artist."""

    id: UInt
    name: StrictStr
    link: StrictStr
    share_link: StrictStr = Field(alias="share")
    picture_small: StrictStr
    picture_medium: StrictStr
    picture_big: StrictStr
    picture_xl: StrictStr
    has_radio: StrictBool = Field(alias="radio")
    tracklist: StrictStr

    def get_full(self, client: DeezerClient | None = None) -> Artist:
        return Artist.get(self.id, client=client)
