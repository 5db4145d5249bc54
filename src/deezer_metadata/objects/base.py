# deezer_metadata/objects/base.py

"""Base models shared by every record type."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict

from deezer_metadata.codec import (
    DecodeWarning,
    decode_record,
    parse_json,
    raise_for_error_payload,
)

if TYPE_CHECKING:
    from deezer_metadata.client import DeezerClient

R = TypeVar("R", bound="Resource")


class DeezerModel(BaseModel):
    """Immutable record read from a Deezer payload.

    Renamed fields declare the JSON key as their alias; unknown keys are
    ignored.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )


class Resource(DeezerModel):
    """Record served by one API endpoint.

    Subclasses set ``path`` (the endpoint below the API root) and
    ``takes_id`` (False for singletons such as ``chart``).
    """

    path: ClassVar[str]
    takes_id: ClassVar[bool] = True

    @classmethod
    def get(
        cls: type[R],
        resource_id: int | None = None,
        *,
        client: DeezerClient | None = None,
        warnings: list[DecodeWarning] | None = None,
    ) -> R:
        """Fetch one record.

        Without ``client`` a one-shot DeezerClient is opened and closed
        around the request, which is fine for single lookups. Pass a shared
        client when making many requests.
        """
        if client is not None:
            return client.fetch(cls, resource_id, warnings=warnings)

        from deezer_metadata.client import DeezerClient

        with DeezerClient() as one_shot:
            return one_shot.fetch(cls, resource_id, warnings=warnings)

    @classmethod
    def from_json(
        cls: type[R],
        body: str | bytes,
        *,
        strict: bool = False,
        warnings: list[DecodeWarning] | None = None,
    ) -> R:
        """Decode a raw response body for this endpoint.

        Raises ApiError when the body is Deezer's ``{"error": ...}`` answer.
        """
        payload = parse_json(body)
        raise_for_error_payload(payload)
        return decode_record(cls, payload, strict=strict, warnings=warnings)
