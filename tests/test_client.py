"""Tests for DeezerClient and the standalone fetch entry points."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

import deezer_metadata.client as client_module
from deezer_metadata.client import DeezerClient
from deezer_metadata.codec import DecodeWarning, decode_record
from deezer_metadata.config import ClientSettings
from deezer_metadata.errors import ApiError, ApiStatusError, DecodeError, TransportError
from deezer_metadata.objects.album import Album
from deezer_metadata.objects.artist import Artist
from deezer_metadata.objects.chart import Chart
from deezer_metadata.objects.comment import Comment
from deezer_metadata.objects.editorial import Editorial
from deezer_metadata.objects.genre import Genre
from deezer_metadata.objects.playlist import Playlist
from deezer_metadata.objects.track import Track
from deezer_metadata.objects.user import User

from payloads import (
    album_payload,
    artist_payload,
    chart_payload,
    comment_payload,
    editorial_payload,
    genre_payload,
    info_payload,
    options_payload,
    playlist_payload,
    radio_payload,
    track_payload,
    user_payload,
)


def test_build_url() -> None:
    with DeezerClient(settings=ClientSettings()) as client:
        assert client.build_url("track", 912486) == "https://api.deezer.com/track/912486"
        assert client.build_url("chart") == "https://api.deezer.com/chart"


@pytest.mark.parametrize(
    ("method", "args", "path", "payload"),
    [
        ("get_track", (912486,), "/track/912486", track_payload(912486)),
        ("get_artist", (27,), "/artist/27", artist_payload(27)),
        ("get_album", (302127,), "/album/302127", album_payload(302127)),
        ("get_genre", (113,), "/genre/113", genre_payload(113)),
        ("get_comment", (4179157801,), "/comment/4179157801", comment_payload(4179157801)),
        ("get_user", (12,), "/user/12", user_payload(12)),
        ("get_playlist", (908622995,), "/playlist/908622995", playlist_payload(908622995)),
        ("get_editorial", (0,), "/editorial/0", editorial_payload(0)),
        ("get_radio", (6,), "/radio/6", radio_payload(6)),
        ("get_chart", (), "/chart", chart_payload()),
        ("get_info", (), "/infos", info_payload()),
        ("get_options", (), "/options", options_payload()),
    ],
)
def test_facade_methods_hit_their_endpoint(
    make_client: Any,
    method: str,
    args: tuple[int, ...],
    path: str,
    payload: dict[str, Any],
) -> None:
    client, seen = make_client({path: payload})

    record = getattr(client, method)(*args)

    assert [r.url.path for r in seen] == [path]
    assert seen[0].method == "GET"
    if args:
        assert record.id == args[0]


def test_repeated_fetch_is_not_cached(make_client: Any) -> None:
    client, seen = make_client({"/track/912486": track_payload(912486)})

    first = client.get_track(912486)
    second = client.get_track(912486)

    assert len(seen) == 2
    assert first == second


def test_sends_configured_user_agent(make_client: Any) -> None:
    settings = ClientSettings(user_agent="my-app/1.0")
    client, seen = make_client({"/artist/27": artist_payload(27)}, settings=settings)

    client.get_artist(27)

    assert seen[0].headers["User-Agent"] == "my-app/1.0"


@pytest.mark.parametrize("status", [404, 429, 500])
def test_non_success_status_raises_status_error(make_client: Any, status: int) -> None:
    client, _ = make_client({"/track/1": lambda request: httpx.Response(status)})

    with pytest.raises(ApiStatusError) as excinfo:
        client.get_track(1)

    assert excinfo.value.status_code == status
    assert excinfo.value.details["url"] == "https://api.deezer.com/track/1"


def test_transport_failure_raises_transport_error(make_client: Any) -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client, _ = make_client({"/artist/27": refuse})

    with pytest.raises(TransportError) as excinfo:
        client.get_artist(27)

    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


def test_non_json_body_raises_decode_error(make_client: Any) -> None:
    client, _ = make_client(
        {"/genre/0": lambda request: httpx.Response(200, text="<html>oops</html>")}
    )

    with pytest.raises(DecodeError) as excinfo:
        client.get_genre(0)

    assert excinfo.value.details["url"] == "https://api.deezer.com/genre/0"


def test_error_payload_raises_api_error(make_client: Any) -> None:
    client, _ = make_client({})

    with pytest.raises(ApiError) as excinfo:
        client.get_album(999999999)

    assert excinfo.value.error_type == "DataException"
    assert excinfo.value.code == 800


def test_schema_mismatch_raises_decode_error(make_client: Any) -> None:
    payload = artist_payload(27)
    del payload["tracklist"]
    client, _ = make_client({"/artist/27": payload})

    with pytest.raises(DecodeError) as excinfo:
        client.get_artist(27)

    assert excinfo.value.path == "Artist.tracklist"


def test_id_presence_is_checked_against_the_resource(make_client: Any) -> None:
    client, seen = make_client({})

    with pytest.raises(ValueError):
        client.fetch(Track)
    with pytest.raises(ValueError):
        client.fetch(Chart, 1)

    assert seen == []


def test_strict_settings_fail_on_bad_collection_element(make_client: Any) -> None:
    payload = album_payload()
    payload["tracks"]["data"].append({"id": 3})
    routes = {"/album/302127": payload}

    strict_client, _ = make_client(routes, settings=ClientSettings(strict_collections=True))
    with pytest.raises(DecodeError):
        strict_client.get_album(302127)

    lenient_client, _ = make_client(routes)
    warnings: list[DecodeWarning] = []
    album = lenient_client.get_album(302127, warnings=warnings)
    assert len(album.tracks) == 2
    assert len(warnings) == 1


def test_reference_get_full_fetches_full_record(make_client: Any) -> None:
    client, seen = make_client(
        {
            "/album/302127": album_payload(302127),
            "/artist/27": artist_payload(27),
        }
    )
    album = client.get_album(302127)

    artist = album.artist.get_full(client)

    assert seen[-1].url.path == "/artist/27"
    assert isinstance(artist, Artist)
    assert artist == client.get_artist(27)


def test_track_album_get_full(make_client: Any) -> None:
    client, seen = make_client(
        {
            "/track/912486": track_payload(912486),
            "/album/302127": album_payload(302127),
        }
    )

    album = client.get_track(912486).album.get_full(client)

    assert isinstance(album, Album)
    assert album.id == 302127
    assert [r.url.path for r in seen] == ["/track/912486", "/album/302127"]


def test_standalone_get_opens_its_own_client(patch_default_client: Any) -> None:
    seen = patch_default_client(client_module, {"/track/912486": track_payload(912486)})

    track = Track.get(912486)

    assert track.id == 912486
    assert [r.url.path for r in seen] == ["/track/912486"]


def test_standalone_get_full_without_client(patch_default_client: Any) -> None:
    seen = patch_default_client(client_module, {"/artist/27": artist_payload(27)})
    track = Track.from_json(json.dumps(track_payload()))

    artist = track.artist.get_full()

    assert artist.id == 27
    assert [r.url.path for r in seen] == ["/artist/27"]


def test_get_editorials_lists_every_editorial(make_client: Any) -> None:
    listing = {
        "data": [editorial_payload(0, "All"), {"id": 2}, editorial_payload(132, "Pop")],
        "total": 3,
    }
    client, seen = make_client({"/editorial": listing})
    warnings: list[DecodeWarning] = []

    editorials = Editorial.all(client=client, warnings=warnings)

    assert [e.id for e in editorials] == [0, 132]
    assert [w.index for w in warnings] == [1]
    assert seen[0].url.path == "/editorial"


FULL_RECORD_ROUTES = {
    "/artist/27": artist_payload(27),
    "/album/302127": album_payload(302127),
    "/genre/113": genre_payload(113),
    "/track/3135553": track_payload(3135553),
    "/track/3135556": track_payload(3135556),
    "/user/12": user_payload(12),
    "/user/2529": user_payload(2529),
    "/playlist/908622995": playlist_payload(908622995),
}


@pytest.mark.parametrize(
    ("parent", "reference", "path", "full_type"),
    [
        (album_payload, lambda a: a.artist, "/artist/27", Artist),
        (album_payload, lambda a: a.contributors[0], "/artist/27", Artist),
        (album_payload, lambda a: a.genres[0], "/genre/113", Genre),
        (album_payload, lambda a: a.tracks[0], "/track/3135553", Track),
        (album_payload, lambda a: a.tracks[0].artist, "/artist/27", Artist),
        (track_payload, lambda t: t.artist, "/artist/27", Artist),
        (track_payload, lambda t: t.album, "/album/302127", Album),
        (playlist_payload, lambda p: p.creator, "/user/2529", User),
        (playlist_payload, lambda p: p.tracks[0], "/track/3135556", Track),
        (playlist_payload, lambda p: p.tracks[0].artist, "/artist/27", Artist),
        (playlist_payload, lambda p: p.tracks[0].album, "/album/302127", Album),
        (chart_payload, lambda c: c.tracks[0], "/track/3135553", Track),
        (chart_payload, lambda c: c.tracks[0].artist, "/artist/27", Artist),
        (chart_payload, lambda c: c.tracks[0].album, "/album/302127", Album),
        (chart_payload, lambda c: c.albums[0], "/album/302127", Album),
        (chart_payload, lambda c: c.albums[0].artist, "/artist/27", Artist),
        (chart_payload, lambda c: c.artists[0], "/artist/27", Artist),
        (chart_payload, lambda c: c.playlists[0], "/playlist/908622995", Playlist),
        (chart_payload, lambda c: c.playlists[0].user, "/user/2529", User),
        (comment_payload, lambda c: c.author, "/user/12", User),
    ],
)
def test_every_reference_fetches_its_full_record(
    make_client: Any,
    parent: Any,
    reference: Any,
    path: str,
    full_type: type,
) -> None:
    record_type = {
        album_payload: Album,
        track_payload: Track,
        playlist_payload: Playlist,
        chart_payload: Chart,
        comment_payload: Comment,
    }[parent]
    record = decode_record(record_type, parent())
    client, seen = make_client(FULL_RECORD_ROUTES)

    full = reference(record).get_full(client)

    assert isinstance(full, full_type)
    assert [r.url.path for r in seen] == [path]
