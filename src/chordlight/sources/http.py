"""Vocabulary source for chord lists served over HTTP(S).

The response is parsed as JSON when the URL path ends in ``.json`` or the
server says ``application/json``; otherwise as one symbol per line.
"""

import httpx

from ..exceptions import VocabularySourceError
from .base import VocabularySource
from .parsing import parse_json_vocabulary, parse_text_vocabulary


class HttpVocabularySource(VocabularySource):
    """Fetches a chord list from an http:// or https:// URL."""

    def __init__(self, timeout: float = 15):
        self.timeout = timeout
        self._content_type = ""

    @classmethod
    def can_handle(cls, location: str) -> bool:
        return location.startswith(("http://", "https://"))

    def fetch(self, location: str) -> str:
        try:
            resp = httpx.get(location, follow_redirects=True, timeout=self.timeout)
        except httpx.RequestError as exc:
            raise VocabularySourceError(location, 0) from exc
        if resp.status_code != 200:
            raise VocabularySourceError(location, resp.status_code)
        self._content_type = resp.headers.get("content-type", "")
        return resp.text

    def extract(self, raw: str, location: str) -> list[str]:
        path = location.split("?", 1)[0].split("#", 1)[0]
        if path.lower().endswith(".json") or "json" in self._content_type:
            return parse_json_vocabulary(raw, location)
        return parse_text_vocabulary(raw)
