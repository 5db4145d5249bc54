# deezer_metadata/objects/track.py

"""
Track records.

Contains the full ``Track`` as served by ``/track/{id}`` and the shortened
artist/album objects embedded in it.

Usage:
    from deezer_metadata.client import DeezerClient
    from deezer_metadata.objects.track import Track

    # single lookup, opens and closes its own connection
    track = Track.get(912486)

    # many lookups, one shared connection
    with DeezerClient() as deezer:
        tracks = [deezer.get_track(i) for i in (912486, 912487, 912488)]
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from pydantic import Field, StrictBool, StrictFloat, StrictStr

from deezer_metadata.codec import UInt
from deezer_metadata.objects.artist import Artist, ContributorArtist
from deezer_metadata.objects.base import DeezerModel, Resource

if TYPE_CHECKING:
    from deezer_metadata.client import DeezerClient
    from deezer_metadata.objects.album import Album


class TrackArtist(DeezerModel):
    """Shortened Artist embedded in a Track. Use ``get_full()`` for the Artist."""

    id: UInt
    name: StrictStr
    link: StrictStr
    share_link: StrictStr = Field(alias="share")
    picture: StrictStr
    picture_small: StrictStr
    picture_medium: StrictStr
    picture_big: StrictStr
    picture_xl: StrictStr
    nb_album: UInt | None = None
    nb_fan: UInt | None = None
    has_radio: StrictBool = Field(alias="radio")
    tracklist: StrictStr

    def get_full(self, client: DeezerClient | None = None) -> Artist:
        return Artist.get(self.id, client=client)


class TrackAlbum(DeezerModel):
    """Shortened Album embedded in a Track. Use ``get_full()`` for the Album."""

    id: UInt
    title: StrictStr
    link: StrictStr
    cover: StrictStr
    cover_small: StrictStr
    cover_medium: StrictStr
    cover_big: StrictStr
    cover_xl: StrictStr
    release_date: StrictStr

    def get_full(self, client: DeezerClient | None = None) -> Album:
        # album.py imports this module
        from deezer_metadata.objects.album import Album

        return Album.get(self.id, client=client)


class Track(Resource):
    """
    Everything Deezer exposes about one track.

    Attributes:
        id: Deezer track id.
        readable: True if the track can be played by the current user.
        title, title_short, title_version: Full, short and version titles.
        unseen: Unseen status, only present for some users.
        isrc: International Standard Recording Code.
        link, share_link: Web and share URLs on deezer.com.
        duration_in_seconds: Track length.
        track_position_in_album, album_disk_number: Placement on the album.
        rank: Deezer popularity rank.
        release_date: ISO date string.
        has_explicit_lyrics: Explicit lyrics flag.
        preview_url: 30 second MP3 preview, when available.
        bpm, gain: Beats per minute and signal gain.
        available_countries: ISO codes of countries where the track plays.
        alternative_track_id: Readable replacement when ``readable`` is False.
        contributors: Every credited artist.
        artist, album: Shortened main artist and album.
    """

    path: ClassVar[str] = "track"

    id: UInt
    readable: StrictBool
    title: StrictStr
    title_short: StrictStr
    title_version: StrictStr
    unseen: StrictBool | None = None
    isrc: StrictStr
    link: StrictStr
    share_link: StrictStr = Field(alias="share")
    duration_in_seconds: UInt = Field(alias="duration")
    track_position_in_album: UInt = Field(alias="track_position")
    album_disk_number: UInt = Field(alias="disk_number")
    rank: UInt
    release_date: StrictStr
    has_explicit_lyrics: StrictBool = Field(alias="explicit_lyrics")
    preview_url: StrictStr | None = Field(default=None, alias="preview")
    bpm: StrictFloat
    gain: StrictFloat
    available_countries: list[StrictStr]
    alternative_track_id: UInt | None = Field(default=None, alias="alternative")
    contributors: list[ContributorArtist]
    artist: TrackArtist
    album: TrackAlbum
