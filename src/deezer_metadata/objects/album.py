# deezer_metadata/objects/album.py

"""
Album records.

Contains the full ``Album`` as served by ``/album/{id}`` and the shortened
artist, track and genre objects embedded in it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from pydantic import Field, StrictBool, StrictInt, StrictStr, field_validator

from deezer_metadata.codec import Envelope, UInt
from deezer_metadata.objects.artist import Artist, ContributorArtist
from deezer_metadata.objects.base import DeezerModel, Resource
from deezer_metadata.objects.genre import Genre
from deezer_metadata.objects.track import Track

if TYPE_CHECKING:
    from deezer_metadata.client import DeezerClient

# Deezer's genre_id when an album has no primary genre.
NO_GENRE_ID = -1


class AlbumArtist(DeezerModel):
    """Shortened Artist the album belongs to."""

    id: UInt
    name: StrictStr
    picture: StrictStr
    picture_small: StrictStr
    picture_medium: StrictStr
    picture_big: StrictStr
    picture_xl: StrictStr

    def get_full(self, client: DeezerClient | None = None) -> Artist:
        return Artist.get(self.id, client=client)


class AlbumTrackArtist(DeezerModel):
    """Shortened Artist of one album track."""

    id: UInt
    name: StrictStr
    tracklist: StrictStr

    def get_full(self, client: DeezerClient | None = None) -> Artist:
        return Artist.get(self.id, client=client)


class AlbumTrack(DeezerModel):
    """Shortened Track listed on an album. Use ``get_full()`` for the Track."""

    id: UInt
    readable: StrictBool
    title: StrictStr
    title_short: StrictStr
    title_version: StrictStr
    link: StrictStr
    duration_in_seconds: UInt = Field(alias="duration")
    rank: UInt
    has_explicit_lyrics: StrictBool = Field(alias="explicit_lyrics")
    preview: StrictStr
    artist: AlbumTrackArtist

    def get_full(self, client: DeezerClient | None = None) -> Track:
        return Track.get(self.id, client=client)


class AlbumGenre(DeezerModel):
    """Shortened Genre of an album."""

    id: UInt
    name: StrictStr
    picture: StrictStr

    def get_full(self, client: DeezerClient | None = None) -> Genre:
        return Genre.get(self.id, client=client)


class Album(Resource):
    """
    Everything Deezer exposes about one album.

    ``genre_id`` is None when Deezer reports no primary genre; prefer
    ``genres``. ``alternative`` holds a replacement album when this one is
    not available in the caller's country.
    """

    path: ClassVar[str] = "album"

    id: UInt
    title: StrictStr
    upc: StrictStr
    link: StrictStr
    share_link: StrictStr = Field(alias="share")
    cover: StrictStr
    cover_small: StrictStr
    cover_medium: StrictStr
    cover_big: StrictStr
    cover_xl: StrictStr
    genre_id: StrictInt | None = None
    genres: Envelope[AlbumGenre]
    label: StrictStr
    nb_tracks: UInt
    duration_in_seconds: UInt = Field(alias="duration")
    fans: UInt
    rating: UInt
    release_date: StrictStr
    record_type: StrictStr  # "album", "ep", "single", ...
    available: StrictBool
    alternative: Album | None = None
    tracklist_api_url: StrictStr = Field(alias="tracklist")
    has_explicit_lyrics: StrictBool = Field(alias="explicit_lyrics")
    contributors: list[ContributorArtist]
    artist: AlbumArtist
    tracks: Envelope[AlbumTrack]

    @field_validator("genre_id")
    @classmethod
    def _no_genre_is_none(cls, value: int | None) -> int | None:
        if value == NO_GENRE_ID:
            return None
        return value
