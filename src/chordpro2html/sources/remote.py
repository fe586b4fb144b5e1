"""Reader for ChordPro files served over HTTP(S)."""

import logging

import httpx

from ..exceptions import FetchError
from .base import SourceReader

logger = logging.getLogger(__name__)


class HttpSource(SourceReader):
    """Fetch ChordPro text from an ``http://`` or ``https://`` URL."""

    @classmethod
    def can_handle(cls, location: str) -> bool:
        return location.startswith(("http://", "https://"))

    def read(self, location: str) -> str:
        logger.debug("Fetching %s", location)
        try:
            resp = httpx.get(location, follow_redirects=True, timeout=15)
        except httpx.RequestError as exc:
            raise FetchError(location, 0) from exc
        if resp.status_code != 200:
            raise FetchError(location, resp.status_code)
        return resp.text
