# deezer_metadata/objects/editorial.py

"""Editorial record."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from pydantic import StrictStr

from deezer_metadata.codec import DecodeWarning, UInt
from deezer_metadata.objects.base import Resource

if TYPE_CHECKING:
    from deezer_metadata.client import DeezerClient


class Editorial(Resource):
    """A Deezer editorial, as served by ``/editorial/{id}``."""

    path: ClassVar[str] = "editorial"

    id: UInt
    name: StrictStr
    picture: StrictStr
    picture_small: StrictStr
    picture_medium: StrictStr
    picture_big: StrictStr
    picture_xl: StrictStr

    @classmethod
    def all(
        cls,
        *,
        client: DeezerClient | None = None,
        warnings: list[DecodeWarning] | None = None,
    ) -> list[Editorial]:
        """Fetch every editorial listed by ``/editorial``."""
        if client is not None:
            return client.get_editorials(warnings=warnings)

        from deezer_metadata.client import DeezerClient

        with DeezerClient() as one_shot:
            return one_shot.get_editorials(warnings=warnings)
