# deezer_metadata/objects/info.py

"""Country information record."""

from __future__ import annotations

from typing import ClassVar

from pydantic import StrictBool, StrictStr

from deezer_metadata.codec import Envelope, UInt
from deezer_metadata.objects.base import DeezerModel, Resource


class Offer(DeezerModel):
    id: UInt
    name: StrictStr
    amount: StrictStr
    currency: StrictStr
    displayed_amount: StrictStr
    tc: StrictStr
    tc_html: StrictStr
    tc_txt: StrictStr
    try_and_buy: UInt


class Info(Resource):
    """API availability in the caller's country, from ``/infos``."""

    path: ClassVar[str] = "infos"
    takes_id: ClassVar[bool] = False

    country_iso: StrictStr
    country: StrictStr
    open: StrictBool
    # Served as a bare array rather than a data envelope.
    offers: Envelope[Offer]
