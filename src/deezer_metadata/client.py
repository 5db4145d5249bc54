# src/deezer_metadata/client.py

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx

from deezer_metadata.codec import (
    DecodeWarning,
    decode_envelope,
    decode_record,
    parse_json,
    raise_for_error_payload,
)
from deezer_metadata.config import API_ROOT, ClientSettings
from deezer_metadata.errors import ApiStatusError, DecodeError, TransportError
from deezer_metadata.objects.album import Album
from deezer_metadata.objects.artist import Artist
from deezer_metadata.objects.base import Resource
from deezer_metadata.objects.chart import Chart
from deezer_metadata.objects.comment import Comment
from deezer_metadata.objects.editorial import Editorial
from deezer_metadata.objects.genre import Genre
from deezer_metadata.objects.info import Info
from deezer_metadata.objects.options import Options
from deezer_metadata.objects.playlist import Playlist
from deezer_metadata.objects.radio import Radio
from deezer_metadata.objects.track import Track
from deezer_metadata.objects.user import User

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Resource)


class DeezerClient:
    """HTTP client for the public Deezer API.

    One instance keeps one ``httpx.Client`` open, so repeated lookups reuse
    connections. Nothing is cached: every call issues a fresh GET. Not meant
    to be shared between threads.
    """

    def __init__(
        self,
        *,
        settings: ClientSettings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings or ClientSettings.from_env()
        self._base_url = API_ROOT

        if not self._settings.verify_tls:
            logger.warning(
                "TLS verification is DISABLED (DEEZER_VERIFY_TLS=false). "
                "Do not use this setting in production."
            )

        headers = {
            "User-Agent": self._settings.user_agent,
            "Accept": "application/json",
        }

        self._client = httpx.Client(
            headers=headers,
            timeout=self._settings.timeout,
            verify=self._settings.verify_tls,
            follow_redirects=True,
            transport=transport,
        )

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> "DeezerClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # type: ignore[override]
        self.close()

    def build_url(self, path: str, resource_id: int | None = None) -> str:
        """Build the endpoint URL, appending the id when one is given."""
        if resource_id is None:
            return f"{self._base_url}/{path}"
        return f"{self._base_url}/{path}/{resource_id}"

    def fetch_json(self, path: str, resource_id: int | None = None) -> Any:
        """GET an endpoint and return its parsed JSON body.

        Raises:
            TransportError: No response (DNS, connect, timeout, read).
            ApiStatusError: Non-2xx status.
            DecodeError: Body is not JSON.
            ApiError: Body is a Deezer ``{"error": ...}`` object.
        """
        url = self.build_url(path, resource_id)

        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            msg = f"Deezer answered {status} for {url}."
            raise ApiStatusError(msg, status_code=status, details={"url": url}) from exc
        except httpx.RequestError as exc:
            msg = f"Request to {url} failed: {exc}"
            raise TransportError(msg, details={"url": url}) from exc

        logger.debug("Fetched %s (status=%s).", url, response.status_code)

        try:
            payload = parse_json(response.content)
        except DecodeError as exc:
            exc.details["url"] = url
            raise

        raise_for_error_payload(payload, url)
        return payload

    def fetch(
        self,
        record_type: type[R],
        resource_id: int | None = None,
        *,
        warnings: list[DecodeWarning] | None = None,
    ) -> R:
        """Fetch and decode one record of ``record_type``.

        Args:
            record_type: A Resource subclass, e.g. Track or Chart.
            resource_id: Deezer id; must be None for singleton resources.
            warnings: Receives a DecodeWarning for every collection element
                skipped under the lenient policy.
        """
        if record_type.takes_id and resource_id is None:
            msg = f"{record_type.__name__} requires an id."
            raise ValueError(msg)
        if not record_type.takes_id and resource_id is not None:
            msg = f"{record_type.__name__} does not take an id."
            raise ValueError(msg)

        payload = self.fetch_json(record_type.path, resource_id)

        try:
            return decode_record(
                record_type,
                payload,
                strict=self._settings.strict_collections,
                warnings=warnings,
            )
        except DecodeError as exc:
            exc.details["url"] = self.build_url(record_type.path, resource_id)
            raise

    def get_track(self, track_id: int, *, warnings: list[DecodeWarning] | None = None) -> Track:
        """Return the Track with the given id."""
        return self.fetch(Track, track_id, warnings=warnings)

    def get_artist(self, artist_id: int, *, warnings: list[DecodeWarning] | None = None) -> Artist:
        return self.fetch(Artist, artist_id, warnings=warnings)

    def get_album(self, album_id: int, *, warnings: list[DecodeWarning] | None = None) -> Album:
        """Return the Album with the given id (``genre_id`` -1 becomes None)."""
        return self.fetch(Album, album_id, warnings=warnings)

    def get_genre(self, genre_id: int, *, warnings: list[DecodeWarning] | None = None) -> Genre:
        return self.fetch(Genre, genre_id, warnings=warnings)

    def get_comment(
        self, comment_id: int, *, warnings: list[DecodeWarning] | None = None
    ) -> Comment:
        return self.fetch(Comment, comment_id, warnings=warnings)

    def get_user(self, user_id: int, *, warnings: list[DecodeWarning] | None = None) -> User:
        return self.fetch(User, user_id, warnings=warnings)

    def get_playlist(
        self, playlist_id: int, *, warnings: list[DecodeWarning] | None = None
    ) -> Playlist:
        return self.fetch(Playlist, playlist_id, warnings=warnings)

    def get_editorial(
        self, editorial_id: int, *, warnings: list[DecodeWarning] | None = None
    ) -> Editorial:
        return self.fetch(Editorial, editorial_id, warnings=warnings)

    def get_editorials(self, *, warnings: list[DecodeWarning] | None = None) -> list[Editorial]:
        """Return every editorial listed by ``/editorial``."""
        payload = self.fetch_json(Editorial.path)
        result = decode_envelope(
            payload,
            Editorial,
            strict=self._settings.strict_collections,
            path="editorials",
        )
        if warnings is not None:
            warnings.extend(result.warnings)
        return result.items

    def get_radio(self, radio_id: int, *, warnings: list[DecodeWarning] | None = None) -> Radio:
        return self.fetch(Radio, radio_id, warnings=warnings)

    def get_chart(self, *, warnings: list[DecodeWarning] | None = None) -> Chart:
        """Return the current top charts."""
        return self.fetch(Chart, warnings=warnings)

    def get_info(self, *, warnings: list[DecodeWarning] | None = None) -> Info:
        """Return API availability and offers for the caller's country."""
        return self.fetch(Info, warnings=warnings)

    def get_options(self, *, warnings: list[DecodeWarning] | None = None) -> Options:
        return self.fetch(Options, warnings=warnings)

