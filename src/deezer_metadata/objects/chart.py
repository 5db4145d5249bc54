# deezer_metadata/objects/chart.py

"""Chart records.

``/chart`` returns four ranked collections (tracks, albums, artists,
playlists), each wrapped in a data envelope and each entry carrying its
``position`` in the chart.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from pydantic import Field, StrictBool, StrictStr

from deezer_metadata.codec import Envelope, UInt
from deezer_metadata.objects.album import Album
from deezer_metadata.objects.artist import Artist
from deezer_metadata.objects.base import DeezerModel, Resource
from deezer_metadata.objects.playlist import Playlist
from deezer_metadata.objects.track import Track
from deezer_metadata.objects.user import User

if TYPE_CHECKING:
    from deezer_metadata.client import DeezerClient


class ChartTrackArtist(DeezerModel):
    id: UInt
    name: StrictStr
    link: StrictStr
    picture: StrictStr
    picture_small: StrictStr
    picture_medium: StrictStr
    picture_big: StrictStr
    picture_xl: StrictStr
    has_radio: StrictBool = Field(alias="radio")

    def get_full(self, client: DeezerClient | None = None) -> Artist:
        return Artist.get(self.id, client=client)


class ChartTrackAlbum(DeezerModel):
    id: UInt
    title: StrictStr
    cover: StrictStr
    cover_small: StrictStr
    cover_medium: StrictStr
    cover_big: StrictStr
    cover_xl: StrictStr

    def get_full(self, client: DeezerClient | None = None) -> Album:
        return Album.get(self.id, client=client)


class ChartTrack(DeezerModel):
    """Shortened Track ranked in the chart."""

    id: UInt
    title: StrictStr
    title_short: StrictStr
    title_version: StrictStr
    link: StrictStr
    duration_in_seconds: UInt = Field(alias="duration")
    rank: UInt
    has_explicit_lyrics: StrictBool = Field(alias="explicit_lyrics")
    preview_url: StrictStr | None = Field(default=None, alias="preview")
    position: UInt
    artist: ChartTrackArtist
    album: ChartTrackAlbum

    def get_full(self, client: DeezerClient | None = None) -> Track:
        return Track.get(self.id, client=client)


class ChartAlbumArtist(DeezerModel):
    id: UInt
    name: StrictStr
    link: StrictStr
    picture: StrictStr
    picture_small: StrictStr
    picture_medium: StrictStr
    picture_big: StrictStr
    picture_xl: StrictStr
    has_radio: StrictBool = Field(alias="radio")

    def get_full(self, client: DeezerClient | None = None) -> Artist:
        return Artist.get(self.id, client=client)


class ChartAlbum(DeezerModel):
    """Shortened Album ranked in the chart."""

    id: UInt
    title: StrictStr
    cover: StrictStr
    cover_small: StrictStr
    cover_medium: StrictStr
    cover_big: StrictStr
    cover_xl: StrictStr
    record_type: StrictStr
    has_explicit_lyrics: StrictBool = Field(alias="explicit_lyrics")
    position: UInt
    artist: ChartAlbumArtist

    def get_full(self, client: DeezerClient | None = None) -> Album:
        return Album.get(self.id, client=client)


class ChartArtist(DeezerModel):
    """Shortened Artist ranked in the chart."""

    id: UInt
    name: StrictStr
    link: StrictStr
    picture: StrictStr
    picture_small: StrictStr
    picture_medium: StrictStr
    picture_big: StrictStr
    picture_xl: StrictStr
    has_radio: StrictBool = Field(alias="radio")
    position: UInt

    def get_full(self, client: DeezerClient | None = None) -> Artist:
        return Artist.get(self.id, client=client)


class ChartPlaylistUser(DeezerModel):
    id: UInt
    name: StrictStr

    def get_full(self, client: DeezerClient | None = None) -> User:
        return User.get(self.id, client=client)


class ChartPlaylist(DeezerModel):
    """Shortened Playlist ranked in the chart."""

    id: UInt
    title: StrictStr
    is_public: StrictBool = Field(alias="public")
    link: StrictStr
    picture: StrictStr
    picture_small: StrictStr
    picture_medium: StrictStr
    picture_big: StrictStr
    picture_xl: StrictStr
    position: UInt = 0
    user: ChartPlaylistUser

    def get_full(self, client: DeezerClient | None = None) -> Playlist:
        return Playlist.get(self.id, client=client)


class Chart(Resource):
    """Current top charts, from ``/chart``."""

    path: ClassVar[str] = "chart"
    takes_id: ClassVar[bool] = False

    tracks: Envelope[ChartTrack]
    albums: Envelope[ChartAlbum]
    artists: Envelope[ChartArtist]
    playlists: Envelope[ChartPlaylist]
