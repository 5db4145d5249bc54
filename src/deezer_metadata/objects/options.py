# deezer_metadata/objects/options.py

"""Options record."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field, StrictBool

from deezer_metadata.codec import UInt
from deezer_metadata.objects.base import Resource


class Options(Resource):
    """What the current (anonymous) user may do, from ``/options``."""

    path: ClassVar[str] = "options"
    takes_id: ClassVar[bool] = False

    streaming: StrictBool
    streaming_duration: UInt  # seconds
    offline: StrictBool
    hq: StrictBool
    ads_display: StrictBool
    ads_audio: StrictBool
    has_too_many_devices: StrictBool = Field(alias="too_many_devices")
    can_subscribe: StrictBool
    radio_skips: UInt  # 0 means no limit
    lossless: StrictBool
    preview: StrictBool
    radio: StrictBool
