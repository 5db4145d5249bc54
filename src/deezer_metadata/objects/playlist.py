# deezer_metadata/objects/playlist.py

"""Playlist records."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from pydantic import Field, StrictBool, StrictStr

from deezer_metadata.codec import Envelope, UInt
from deezer_metadata.objects.album import Album
from deezer_metadata.objects.artist import Artist
from deezer_metadata.objects.base import DeezerModel, Resource
from deezer_metadata.objects.track import Track
from deezer_metadata.objects.user import User

if TYPE_CHECKING:
    from deezer_metadata.client import DeezerClient


class PlaylistUser(DeezerModel):
    """Creator of a playlist."""

    id: UInt
    name: StrictStr

    def get_full(self, client: DeezerClient | None = None) -> User:
        return User.get(self.id, client=client)


class PlaylistTrackArtist(DeezerModel):
    id: UInt
    name: StrictStr
    link: StrictStr

    def get_full(self, client: DeezerClient | None = None) -> Artist:
        return Artist.get(self.id, client=client)


class PlaylistTrackAlbum(DeezerModel):
    id: UInt
    title: StrictStr
    cover: StrictStr
    cover_small: StrictStr
    cover_medium: StrictStr
    cover_big: StrictStr
    cover_xl: StrictStr

    def get_full(self, client: DeezerClient | None = None) -> Album:
        return Album.get(self.id, client=client)


class PlaylistTrack(DeezerModel):
    """Shortened Track as listed in a playlist."""

    id: UInt
    readable: StrictBool
    title: StrictStr
    title_short: StrictStr
    title_version: StrictStr
    unseen: StrictBool = False
    link: StrictStr
    duration_in_seconds: UInt = Field(alias="duration")
    rank: UInt
    has_explicit_lyrics: StrictBool = Field(alias="explicit_lyrics")
    preview_url: StrictStr = Field(default="", alias="preview")
    added_on: UInt = Field(alias="time_add")  # unix timestamp
    artist: PlaylistTrackArtist
    album: PlaylistTrackAlbum

    def get_full(self, client: DeezerClient | None = None) -> Track:
        return Track.get(self.id, client=client)


class Playlist(Resource):
    """A Deezer playlist, as served by ``/playlist/{id}``.

    ``rating`` and ``unseen_track_count`` are only sent for some playlists.
    """

    path: ClassVar[str] = "playlist"

    id: UInt
    title: StrictStr
    description: StrictStr
    duration_in_seconds: UInt = Field(alias="duration")
    is_public: StrictBool = Field(alias="public")
    is_loved_track: StrictBool
    is_collaborative: StrictBool = Field(alias="collaborative")
    rating: UInt | None = None
    nb_tracks: UInt
    unseen_track_count: UInt | None = None
    fans: UInt
    link: StrictStr
    share_link: StrictStr = Field(alias="share")
    picture: StrictStr
    picture_small: StrictStr
    picture_medium: StrictStr
    picture_big: StrictStr
    picture_xl: StrictStr
    checksum: StrictStr
    creator: PlaylistUser
    tracks: Envelope[PlaylistTrack]
